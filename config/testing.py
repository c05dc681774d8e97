from .config import *  # noqa: F401,F403

ENVIRONMENT = "testing"
DEBUG = False
TESTING = True

AUTH_USERNAME = "operator"
AUTH_PASSWORD = "s3cret"
AUTH_PASSWORD_HASH = ""
EXPORT_PASSWORD = "export-pw"

SESSION_SWEEP_ENABLED = False
RATELIMIT_ENABLED = False

LOG_LEVEL = "WARNING"
LOG_FILE = None
