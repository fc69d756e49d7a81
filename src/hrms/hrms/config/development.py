import os

# Money is rounded to this many decimal places (0 for whole-unit currencies)
MONEY_DECIMAL_PLACES = int(os.getenv("MONEY_DECIMAL_PLACES", "2"))

# IANA zone used to derive a subject's local calendar date; empty = naive local time
TIMEZONE = os.getenv("TIMEZONE", "")

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# memory | mysql
RECORD_STORE = os.getenv("RECORD_STORE", "memory")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hrms_db"),
}
