"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Index 0 = Sunday ... 6 = Saturday (same numbering as the weekday tokens "2".."7").
DEFAULT_DAY_NAMES = (
    "Chủ nhật",
    "Thứ 2",
    "Thứ 3",
    "Thứ 4",
    "Thứ 5",
    "Thứ 6",
    "Thứ 7",
)
SUNDAY_TOKENS = ("cn",)

MONTHLY_CYCLE_DAYS = 30
SESSIONS_PER_WEEK = 3
DAYS_PER_WEEK = 7
NOMINAL_SESSIONS_PER_MONTH = 4

FEE_CALCULATION_METHOD_KEY = "fee_calculation_method"
FEE_CALCULATION_METHOD_DESCRIPTION = (
    "Phương pháp tính học phí: PER_SESSION (theo buổi) hoặc PER_CYCLE (theo chu kỳ)"
)

# Query/cache keys dependent views refetch after a mutation.
ATTENDANCE_TODAY_QUERY = "attendance/today"
SETTINGS_QUERY = "settings"

ISO_DATE_FORMAT = "%Y-%m-%d"
