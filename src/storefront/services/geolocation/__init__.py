"""Customer position acquisition."""

from .client import (
    GeolocationClient,
    GeolocationError,
    GeolocationUnavailableError,
    build_geolocation_client,
)

__all__ = [
    "GeolocationClient",
    "GeolocationError",
    "GeolocationUnavailableError",
    "build_geolocation_client",
]
