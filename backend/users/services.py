"""
Service for the signed-in user's profile and preferences.
"""

import logging

from django.db import transaction

from .models import UserProfile

logger = logging.getLogger(__name__)


class ProfileService:
    """
    Profile operations for the identity of the current request.
    """

    @staticmethod
    def get_or_create_profile(owner_context):
        """
        Return the profile of the identity, creating it from token claims.

        Args:
            owner_context: OwnerContext of the request

        Returns:
            UserProfile: Existing or newly created profile
        """
        profile, created = UserProfile.objects.get_or_create(
            id=owner_context.owner_id,
            defaults={"name": owner_context.name, "email": owner_context.email},
        )

        if created:
            logger.info(
                "User profile created from token claims",
                extra={
                    "owner_id": owner_context.owner_id,
                    "action": "user_profile_created",
                    "component": "ProfileService",
                },
            )
        return profile

    @staticmethod
    @transaction.atomic
    def update_profile(owner_context, data):
        """Update name and email of the identity's profile."""
        profile = ProfileService.get_or_create_profile(owner_context)
        for field, value in data.items():
            setattr(profile, field, value)
        profile.save()

        logger.info(
            "User profile updated",
            extra={
                "owner_id": owner_context.owner_id,
                "updated_fields": list(data.keys()),
                "action": "user_profile_updated",
                "component": "ProfileService",
            },
        )
        return profile

    @staticmethod
    @transaction.atomic
    def update_preferences(owner_context, data):
        """Update currency, theme and language preferences."""
        profile = ProfileService.get_or_create_profile(owner_context)
        for field, value in data.items():
            setattr(profile, field, value)
        profile.save()

        logger.info(
            "User preferences updated",
            extra={
                "owner_id": owner_context.owner_id,
                "preferences": {field: str(value) for field, value in data.items()},
                "action": "user_preferences_updated",
                "component": "ProfileService",
            },
        )
        return profile
