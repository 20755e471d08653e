import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

MONGO_CONFIG = {
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017"),
    "database": os.getenv("MONGO_DB", "hr_admin"),
    "timeout_ms": int(os.getenv("MONGO_TIMEOUT_MS", "5000")),
}

DATE_KEY_FORMAT = os.getenv("DATE_KEY_FORMAT", "locale")
ATOMIC_WRITES = bool(int(os.getenv("ATOMIC_WRITES", "0")))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
