"""Public models for the TonicPow SDK.

Example:
    from tonicpow.models import User

    response = client.request("GET", "users/details?id=1", expected_status_code=200)
    user = response.parse_as(User)
"""

from tonicpow.models.resources import (
    AdvertiserProfile,
    Campaign,
    Conversion,
    Goal,
    Link,
    Rate,
    User,
    VisitorSession,
)
from tonicpow.models.response import APIError, StandardResponse, TraceInfo

__all__ = [
    "APIError",
    "StandardResponse",
    "TraceInfo",
    "AdvertiserProfile",
    "Campaign",
    "Conversion",
    "Goal",
    "Link",
    "Rate",
    "User",
    "VisitorSession",
]
