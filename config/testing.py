import os

SECRET_KEY = "test-secret"

MONGO_CONFIG = {
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017"),
    "database": os.getenv("MONGO_DB", "hr_admin_test"),
    "timeout_ms": int(os.getenv("MONGO_TIMEOUT_MS", "1000")),
}

DATE_KEY_FORMAT = "locale"
ATOMIC_WRITES = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
