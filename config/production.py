import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_attendance"),
}

TIMEZONE = os.getenv("TIMEZONE", "Asia/Jakarta")

WORK_HOURS = {
    "weekday_start": os.getenv("WEEKDAY_START", "08:00"),
    "weekday_end": os.getenv("WEEKDAY_END", "17:00"),
    "saturday_start": os.getenv("SATURDAY_START", "08:00"),
    "saturday_end": os.getenv("SATURDAY_END", "12:00"),
    "late_threshold": os.getenv("LATE_THRESHOLD", "08:30"),
}

LATE_PENALTY = int(os.getenv("LATE_PENALTY", "40000"))
LONG_OVERTIME_THRESHOLD_MINUTES = int(os.getenv("LONG_OVERTIME_THRESHOLD_MINUTES", "120"))
MIN_OVERTIME_REASON_LENGTH = int(os.getenv("MIN_OVERTIME_REASON_LENGTH", "20"))
MIN_LATE_REASON_LENGTH = int(os.getenv("MIN_LATE_REASON_LENGTH", "20"))

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
