# flake8: noqa
"""
Test settings: in-memory SQLite, a fixed token secret and quiet logging.
"""

from .base import *

ENVIRONMENT = "test"

DEBUG = False
SECRET_KEY = "django-insecure-test-key"
ALLOWED_HOSTS = ["testserver", "localhost"]

# Tests mint their own provider tokens with this secret
SIMPLE_JWT["SIGNING_KEY"] = "test-provider-jwt-secret-0123456789abcdef"
SIMPLE_JWT["AUDIENCE"] = "authenticated"
SIMPLE_JWT["ISSUER"] = None

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

for logger_name in ["django", "core", "finance", "users"]:
    LOGGING["loggers"][logger_name]["level"] = "WARNING"
