import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_attendance_test"),
}

TIMEZONE = "Asia/Jakarta"

WORK_HOURS = {
    "weekday_start": "08:00",
    "weekday_end": "17:00",
    "saturday_start": "08:00",
    "saturday_end": "12:00",
    "late_threshold": "08:30",
}

LATE_PENALTY = 40000
LONG_OVERTIME_THRESHOLD_MINUTES = 120
MIN_OVERTIME_REASON_LENGTH = 20
MIN_LATE_REASON_LENGTH = 20

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
