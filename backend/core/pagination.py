import math

from django.conf import settings
from rest_framework.pagination import LimitOffsetPagination

from .responses import envelope


class EnvelopeLimitOffsetPagination(LimitOffsetPagination):
    """
    limit/offset pagination answering with the list envelope.

    ``page`` is ``floor(offset / limit) + 1`` and ``totalPages`` is
    ``ceil(count / limit)``, or 0 when nothing matches.
    """

    default_limit = settings.API_PAGE_SIZE
    max_limit = settings.API_MAX_PAGE_SIZE

    def get_paginated_response(self, data):
        return envelope(
            data=data,
            count=self.count,
            page=self.offset // self.limit + 1,
            limit=self.limit,
            totalPages=math.ceil(self.count / self.limit) if self.count else 0,
        )
