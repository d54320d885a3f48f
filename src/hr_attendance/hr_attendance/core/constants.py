"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Deployment-specific values can be overridden through the settings modules.
"""

from datetime import time

DEFAULT_TIMEZONE = "Asia/Jakarta"

DEFAULT_WEEKDAY_START = time(8, 0)
DEFAULT_WEEKDAY_END = time(17, 0)
DEFAULT_SATURDAY_START = time(8, 0)
DEFAULT_SATURDAY_END = time(12, 0)
DEFAULT_LATE_THRESHOLD = time(8, 30)

# Overtime ending after this clock time on the next day is cut off.
OVERTIME_NEXT_DAY_CUTOFF = time(7, 0)

LONG_OVERTIME_THRESHOLD_MINUTES = 120
MIN_OVERTIME_REASON_LENGTH = 20
MIN_LATE_REASON_LENGTH = 20
# Free-text reasons are stored in VARCHAR(500) columns.
MAX_REASON_LENGTH = 500

# Free-text marker written into notes when a request is rejected.
REJECTION_MARKER = "Di Tolak"
# Appended to notes when a late justification is turned down; not a resubmission marker.
LATE_REJECTION_PREFIX = "Ditolak"

# Payroll (amounts in Rupiah)
LATE_PENALTY = 40000
ABSENCE_PENALTY_PERCENT = 100
NON_SHIFT_MEAL_ALLOWANCE = 20000
NON_SHIFT_TRANSPORT_ALLOWANCE = 20000
SHIFT_FIXED_ALLOWANCE = 0
FOREMAN_ALLOWANCE = 600000
ASSISTANT_FOREMAN_ALLOWANCE = 500000
MONTHLY_WORK_HOURS = 173
MONTHLY_WORK_DAYS = 22
