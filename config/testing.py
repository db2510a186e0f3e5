import os

DB_CONFIG = {
    "uri": os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
    "database": os.getenv("MONGODB_DB", "timetrack_test"),
}

JWT_SECRET = "test-secret-key-for-time-tracker-0123456789"
TOKEN_TTL_HOURS = 24

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
CORS_ORIGINS = "*"

AUTO_INIT_DB = False
