"""
Django AppConfig for the users application.

The application keeps profiles and preferences of identities issued by the
hosted auth provider and the bearer token authentication class.
"""

from django.apps import AppConfig


class UsersConfig(AppConfig):
    """
    Configuration class for the users application.
    """

    default_auto_field = "django.db.models.BigAutoField"

    # Application name (Python path)
    name = "users"
