import os

SECRET_KEY = os.getenv("JWT_SECRET", "your-super-secret-jwt-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "admin"),
    "password": os.getenv("DB_PASSWORD", "password"),
    "database": os.getenv("DB_NAME", "timerwork"),
}

DEBUG = True

# Applies schema.sql on startup (idempotent: CREATE TABLE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Startup connectivity probe
DB_CONNECT_ATTEMPTS = int(os.getenv("DB_CONNECT_ATTEMPTS", "30"))
DB_CONNECT_DELAY = float(os.getenv("DB_CONNECT_DELAY", "2"))

TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "24"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
