"""
Bearer token authentication against the hosted auth provider.

The provider signs access tokens with the project's JWT secret (HS256,
``aud`` = ``authenticated``). Tokens are verified statelessly with
djangorestframework-simplejwt; no user table is consulted.
"""

import logging

from django.utils.functional import cached_property
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.models import TokenUser

logger = logging.getLogger(__name__)


class ProviderIdentity(TokenUser):
    """
    Identity resolved from a verified provider token.

    ``id`` is the ``sub`` claim (USER_ID_CLAIM); display data comes from the
    ``email`` claim and the provider's ``user_metadata``.
    """

    @cached_property
    def email(self):
        return self.token.get("email", "") or ""

    @cached_property
    def name(self):
        metadata = self.token.get("user_metadata") or {}
        return metadata.get("name") or metadata.get("full_name") or ""

    def __str__(self):
        return f"ProviderIdentity {self.id}"


class ProviderTokenAuthentication(JWTStatelessUserAuthentication):
    """
    Stateless bearer authentication for provider-issued tokens.

    Requests without an Authorization header stay anonymous and are rejected
    by the IsAuthenticated permission with 401.
    """

    www_authenticate_realm = "api"

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except InvalidToken as e:
            logger.warning(
                "Bearer token rejected",
                extra={
                    "request_path": request.path,
                    "request_method": request.method,
                    "error_code": getattr(e, "default_code", "token_not_valid"),
                    "action": "bearer_token_rejected",
                    "component": "ProviderTokenAuthentication",
                    "severity": "medium",
                },
            )
            raise
