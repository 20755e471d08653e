import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

MONGO_CONFIG = {
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017"),
    "database": os.getenv("MONGO_DB", "hr_admin"),
    "timeout_ms": int(os.getenv("MONGO_TIMEOUT_MS", "5000")),
}

# "locale" keeps the M/D/YYYY keys existing attendance documents use; "iso" writes YYYY-MM-DD
DATE_KEY_FORMAT = os.getenv("DATE_KEY_FORMAT", "locale")

# Write the attendance history and the queryable record in one transaction (needs a replica set)
ATOMIC_WRITES = bool(int(os.getenv("ATOMIC_WRITES", "0")))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will create indexes on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
