"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STUDENT_ID_PATTERN = r"M\d{8}"
VALID_DAYS = (1, 2)

ROSTER_COLUMNS = (
    "Student ID",
    "First Name",
    "Last Name",
    "Year Of Study",
    "Degree Programme Title",
    "Mdx Email",
    "Mb Phone Number",
    "Nationality Description",
)
DAY_COLUMNS = ("Day1", "Day2")
ATTENDANCE_COLUMNS = ROSTER_COLUMNS + DAY_COLUMNS

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_ROSTER_CACHE_TTL_SECONDS = 5 * 60
DEFAULT_SESSION_ROTATION_MINUTES = 30
DEFAULT_SESSION_EXPIRY_HOURS = 8
DEFAULT_SESSION_SWEEP_INTERVAL_MINUTES = 60

SESSION_HEADER_PREFIX = "Session "
NEW_SESSION_HEADER = "X-New-Session-ID"
