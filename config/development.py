import os
import secrets

DB_CONFIG = {
    "uri": os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
    "database": os.getenv("MONGODB_DB", "timetrack"),
}

# Without JWT_SECRET every restart signs with a fresh key (old tokens stop working).
JWT_SECRET = os.getenv("JWT_SECRET") or secrets.token_hex(32)
TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "24"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

# If enabled, app creates the MongoDB indexes on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
