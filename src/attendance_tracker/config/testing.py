import os

SECRET_KEY = "test-secret"

JWT_SECRET = "test-jwt-secret-0123456789abcdefghij"
JWT_EXPIRES_HOURS = 1

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker_test"),
}

CORS_ORIGINS = ["http://localhost:3000"]

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
