import os

from .config import *  # noqa: F401,F403

ENVIRONMENT = "development"
DEBUG = True

AUTH_USERNAME = os.getenv("AUTH_USERNAME", "admin")
AUTH_PASSWORD = os.getenv("AUTH_PASSWORD", "password123")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
