"""HTTP client for a single-shot customer position lookup."""

from __future__ import annotations

import logging

import httpx

from ...config import settings
from ...models.domain import GeoPoint

logger = logging.getLogger(__name__)


class GeolocationError(Exception):
    """Raised when a position fix cannot be obtained."""


class GeolocationUnavailableError(GeolocationError):
    """Raised when no location service is configured."""


class GeolocationClient:
    """Requests one position fix from a geolocation service.

    Each call issues exactly one request. There is no retry and no caching of
    previous fixes; ``maximum_age_seconds=0`` is sent as ``Cache-Control: no-cache``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        high_accuracy: bool | None = None,
        maximum_age_seconds: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.geolocation_url
        if not self.base_url:
            raise GeolocationUnavailableError("Geolocation service URL is not configured.")
        self.timeout = timeout if timeout is not None else settings.geolocation_timeout_seconds
        self.high_accuracy = high_accuracy if high_accuracy is not None else settings.geolocation_high_accuracy
        self.maximum_age_seconds = (
            maximum_age_seconds if maximum_age_seconds is not None else settings.geolocation_maximum_age_seconds
        )
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        if self.maximum_age_seconds == 0:
            return {"Cache-Control": "no-cache"}
        return {"Cache-Control": f"max-age={self.maximum_age_seconds}"}

    def current_position(self, client_ip: str | None = None) -> GeoPoint:
        params: dict[str, str] = {"enableHighAccuracy": "true" if self.high_accuracy else "false"}
        if client_ip:
            params["ip"] = client_ip

        try:
            with httpx.Client(timeout=httpx.Timeout(self.timeout), transport=self._transport) as client:
                response = client.get(self.base_url, params=params, headers=self._headers())
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as exc:
            raise GeolocationError(f"Location request timed out after {self.timeout:.0f}s") from exc
        except httpx.HTTPStatusError as exc:
            raise GeolocationError(f"Location service returned HTTP {exc.response.status_code}") from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise GeolocationError(f"Location request failed: {exc}") from exc

        try:
            return GeoPoint(latitude=float(data["latitude"]), longitude=float(data["longitude"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise GeolocationError("Location service response missing latitude/longitude.") from exc


def build_geolocation_client() -> GeolocationClient | None:
    """Return a client when a geolocation service is configured, else None."""
    try:
        return GeolocationClient()
    except GeolocationUnavailableError:
        logger.debug("Geolocation service not configured")
        return None
