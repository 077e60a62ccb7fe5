import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendease_db"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "5")),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Applies schema.sql on startup (CREATE TABLE IF NOT EXISTS, safe to repeat).
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Reference data plus the demo admin/teacher/student accounts.
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
