from django.conf import settings
from rest_framework.throttling import SimpleRateThrottle


class ApiRateThrottle(SimpleRateThrottle):
    """Per-address limit over a window that DRF's rate strings cannot express (e.g. 15 minutes)."""

    scope = "api"

    def get_rate(self):
        return f"{settings.API_RATE_LIMIT}/{settings.API_RATE_WINDOW_SECONDS}s"

    def parse_rate(self, rate):
        return settings.API_RATE_LIMIT, settings.API_RATE_WINDOW_SECONDS

    def get_cache_key(self, request, view):
        return self.cache_format % {"scope": self.scope, "ident": self.get_ident(request)}
