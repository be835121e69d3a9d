"""
Views for the signed-in user's profile and preferences.
"""

import logging

from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from core.responses import EnvelopeResponseMixin, envelope
from finance.mixins import OwnerContextMixin, ServiceExceptionHandlerMixin

from .serializers import PreferencesSerializer, UserProfileSerializer
from .services import ProfileService

logger = logging.getLogger(__name__)


class BaseProfileView(
    EnvelopeResponseMixin, OwnerContextMixin, ServiceExceptionHandlerMixin, APIView
):
    permission_classes = [IsAuthenticated]

    def profile_response(self, profile, message=None):
        return envelope(data=UserProfileSerializer(profile).data, message=message)


class CurrentUserView(BaseProfileView):
    """GET and PUT /users/me."""

    def get(self, request):
        profile = self.handle_service_call(
            ProfileService.get_or_create_profile, self.owner_context
        )
        return self.profile_response(profile)

    def put(self, request):
        serializer = UserProfileSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        profile = self.handle_service_call(
            ProfileService.update_profile, self.owner_context, serializer.validated_data
        )
        return self.profile_response(profile, message="Profile updated successfully")


class PreferencesView(BaseProfileView):
    """PUT /users/me/preferences."""

    def put(self, request):
        serializer = PreferencesSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        profile = self.handle_service_call(
            ProfileService.update_preferences,
            self.owner_context,
            serializer.validated_data,
        )
        return self.profile_response(profile, message="Preferences updated successfully")
