import os

# Accepted spellings of APP_ENV / ENVIRONMENT -> settings module
_SETTINGS_BY_ENV = {
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}


def get_settings_module() -> str:
    """Settings module for the current process.

    APP_ENV wins over ENVIRONMENT (the name .env files for the desk use);
    unknown or empty values run with the development settings.
    """
    env = (os.getenv("APP_ENV") or os.getenv("ENVIRONMENT") or "").strip().lower()
    return _SETTINGS_BY_ENV.get(env, "config.development")
