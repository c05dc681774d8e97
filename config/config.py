"""Settings shared by every environment; values come from the environment (.env)."""

import os


def _csv_list(value: str) -> list:
    return [item.strip() for item in value.split(",") if item.strip()]


# Server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

# Operator account (single shared login)
AUTH_USERNAME = os.environ.get("AUTH_USERNAME", "")
AUTH_PASSWORD = os.environ.get("AUTH_PASSWORD", "")
# Optional werkzeug hash; takes precedence over AUTH_PASSWORD
AUTH_PASSWORD_HASH = os.environ.get("AUTH_PASSWORD_HASH", "")

EXPORT_PASSWORD = os.environ.get("EXPORT_PASSWORD", "")

ALLOWED_ORIGINS = _csv_list(os.environ.get("ALLOWED_ORIGINS", "http://localhost:3000"))

# Data files (resolved against the working directory)
STUDENT_DATA_FILE = os.path.abspath(os.environ.get("STUDENT_DATA_FILE", "data/student_data.csv"))
ATTENDANCE_FILE = os.path.abspath(os.environ.get("ATTENDANCE_FILE", "data/attendance.csv"))

ROSTER_CACHE_TTL_SECONDS = int(os.environ.get("ROSTER_CACHE_TTL_SECONDS", "300"))

# Sessions
SESSION_ROTATION_MINUTES = int(os.environ.get("SESSION_ROTATION_MINUTES", "30"))
SESSION_EXPIRY_HOURS = int(os.environ.get("SESSION_EXPIRY_HOURS", "8"))
SESSION_SWEEP_INTERVAL_MINUTES = int(os.environ.get("SESSION_SWEEP_INTERVAL_MINUTES", "60"))
SESSION_SWEEP_ENABLED = bool(int(os.environ.get("SESSION_SWEEP_ENABLED", "1")))

# flask-limiter
RATELIMIT_ENABLED = bool(int(os.environ.get("RATELIMIT_ENABLED", "1")))
RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")
RATELIMIT_DEFAULT = os.environ.get("RATELIMIT_DEFAULT", "300 per 15 minutes")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("LOG_FILE") or None
