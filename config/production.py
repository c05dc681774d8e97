import os

from .config import *  # noqa: F401,F403

ENVIRONMENT = "production"
DEBUG = False

# AUTH_USERNAME / AUTH_PASSWORD have no defaults here; startup fails if unset.

RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "60 per 15 minutes")

LOG_FILE = os.getenv("LOG_FILE", "logs/checkin_desk.log")
