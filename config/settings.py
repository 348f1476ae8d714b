# config/settings.py

import os

def str_to_bool(value):
    truthy = ("true", "1", "yes", "on")
    falsey = ("false", "0", "no", "off")

    val = str(value).strip().lower()

    if val in truthy:
        return True
    elif val in falsey:
        return False
    else:
        raise ValueError(f"Invalid boolean string: '{value}'")

# Database settings
DB_HOST = os.environ.get("DB_HOST", "localhost")
DB_PORT = os.environ.get("DB_PORT", "3306")
DB_NAME = os.environ.get("DB_NAME", "films")
DB_USER = os.environ.get("DB_USER", "filmuser")
DB_PASSWORD = os.environ.get("DB_PASSWORD", "filmpass")

DATABASE_URL = os.environ.get(
    "DATABASE_URL",
    f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# Application version
APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

class Config:
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = str_to_bool(os.environ.get("SQLALCHEMY_ECHO", "False"))
    SECRET_KEY = os.environ.get("SECRET_KEY") or os.urandom(24)

    # Additional configuration
    APP_VERSION = APP_VERSION
    LOG_LEVEL = LOG_LEVEL

    # BABEL
    BABEL_DEFAULT_LOCALE = 'en'
    BABEL_DEFAULT_TIMEZONE = 'UTC'
    # Add a code only together with its catalog under translations/
    LANGUAGES = ['en']


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ECHO = False
    SECRET_KEY = "test-secret"
    LOG_LEVEL = "DEBUG"
