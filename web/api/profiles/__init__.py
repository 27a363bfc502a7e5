"""Party profile API."""

from web.api.profiles.views import get_profile, get_profiles

__all__ = [
    "get_profiles",
    "get_profile",
]
