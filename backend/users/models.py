"""
User profile model for the finance API.

Accounts, credentials and sessions live at the hosted auth provider. The API
only keeps display data and preferences, keyed by the provider's user id.
"""

from django.conf import settings
from django.db import models


def default_currency():
    return settings.DEFAULT_CURRENCY


class UserProfile(models.Model):
    """
    Profile and preferences of one provider identity.

    Created lazily from the token claims the first time the identity calls
    a profile endpoint.
    """

    class Theme(models.TextChoices):
        LIGHT = "LIGHT", "Light"
        DARK = "DARK", "Dark"

    CURRENCY_CHOICES = [(code, code) for code in settings.SUPPORTED_CURRENCIES]
    LANGUAGE_CHOICES = settings.LANGUAGES

    # Identity id issued by the auth provider (token "sub" claim)
    id = models.CharField(primary_key=True, max_length=64)
    name = models.CharField(max_length=255, blank=True)
    email = models.EmailField(blank=True)
    currency = models.CharField(
        max_length=3, choices=CURRENCY_CHOICES, default=default_currency
    )
    theme = models.CharField(max_length=5, choices=Theme.choices, default=Theme.LIGHT)
    language = models.CharField(
        max_length=5, choices=LANGUAGE_CHOICES, default=settings.LANGUAGE_CODE
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]

    def __str__(self):
        return self.email or self.id
