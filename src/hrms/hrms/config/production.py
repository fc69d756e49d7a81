import os

MONEY_DECIMAL_PLACES = int(os.getenv("MONEY_DECIMAL_PLACES", "2"))
TIMEZONE = os.getenv("TIMEZONE", "UTC")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

RECORD_STORE = os.getenv("RECORD_STORE", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hrms_db"),
}
