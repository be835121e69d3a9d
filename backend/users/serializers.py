"""
Serializers for the user profile endpoints.
"""

import logging

from rest_framework import serializers

from .models import UserProfile

logger = logging.getLogger(__name__)


class PreferencesSerializer(serializers.ModelSerializer):
    """Display preferences; the language must be one of settings.LANGUAGES."""

    class Meta:
        model = UserProfile
        fields = ["currency", "theme", "language"]


class UserProfileSerializer(serializers.ModelSerializer):
    """
    Profile of the signed-in identity.

    ``id`` is the provider's user id. Only ``name`` and ``email`` are writable
    here; preferences have their own endpoint.
    """

    preferences = PreferencesSerializer(source="*", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = UserProfile
        fields = ["id", "name", "email", "preferences", "createdAt", "updatedAt"]
        read_only_fields = ["id"]

    def validate_name(self, value):
        value = value.strip()
        if not value:
            logger.warning(
                "Profile update rejected - empty name",
                extra={
                    "action": "profile_validation_failed",
                    "component": "UserProfileSerializer",
                },
            )
            raise serializers.ValidationError("Name is required.")
        return value
