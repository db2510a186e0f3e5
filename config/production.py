import os

# No defaults: create_app refuses to start without these.
DB_CONFIG = {
    "uri": os.getenv("MONGODB_URI", ""),
    "database": os.getenv("MONGODB_DB", "timetrack"),
}

JWT_SECRET = os.getenv("JWT_SECRET", "")
TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "24"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
