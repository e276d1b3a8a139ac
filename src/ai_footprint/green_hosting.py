"""Advisory green-hosting lookup via The Green Web Foundation greencheck API.

The verdict is for display only. It never enters an emissions formula, and
any failure results in ``None`` rather than an exception.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Final
from urllib.parse import quote, urlsplit

import httpx

from ai_footprint.settings import FootprintSettings, get_settings

LOGGER = logging.getLogger(__name__)

__all__ = ["GreenCheckResult", "GreenHostingClient", "normalise_host"]

_UNKNOWN_HOST: Final[str] = "unknown"


@dataclass(frozen=True, slots=True)
class GreenCheckResult:
    """Greencheck answer for a single host."""

    url: str
    green: bool
    hosted_by: str

    def to_dict(self) -> dict[str, object]:
        return {"url": self.url, "green": self.green, "hosted_by": self.hosted_by}


def normalise_host(url: str) -> str:
    """Reduce a URL to the host name the greencheck API expects."""

    text = url.strip()
    if "://" not in text:
        text = f"//{text}"
    host = urlsplit(text).hostname
    return host or url.strip()


class GreenHostingClient:
    """Query the greencheck API with a small TTL cache."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout_seconds: float | None = None,
        ttl_seconds: int | None = None,
        settings: FootprintSettings | None = None,
    ) -> None:
        settings_obj = settings or get_settings()
        self._base = (base_url or settings_obj.green_check_url).rstrip("/")
        self._timeout = timeout_seconds or settings_obj.green_check_timeout
        self._ttl_seconds = (
            ttl_seconds if ttl_seconds is not None else settings_obj.green_check_ttl_seconds
        )
        self._cache: dict[str, tuple[float, GreenCheckResult | None]] = {}

    def _url_for(self, host: str) -> str:
        return f"{self._base}/{quote(host, safe='')}"

    def _cached(self, host: str) -> tuple[bool, GreenCheckResult | None]:
        cached = self._cache.get(host)
        if cached is None:
            return False, None
        cached_at, result = cached
        if time.time() - cached_at <= self._ttl_seconds:
            LOGGER.debug("Greencheck cache hit", extra={"host": host})
            return True, result
        self._cache.pop(host, None)
        return False, None

    def _parse(self, url: str, payload: object) -> GreenCheckResult | None:
        if not isinstance(payload, dict):
            LOGGER.warning(
                "Greencheck returned a non-object payload",
                extra={"url": url, "payload_type": type(payload).__name__},
            )
            return None
        hosted_by = payload.get("hosted_by")
        return GreenCheckResult(
            url=url,
            green=bool(payload.get("green", False)),
            hosted_by=str(hosted_by) if hosted_by else _UNKNOWN_HOST,
        )

    def check(self, url: str) -> GreenCheckResult | None:
        """Return the green-hosting verdict for ``url``, or ``None`` on failure."""

        host = normalise_host(url)
        if not host:
            return None
        hit, cached = self._cached(host)
        if hit:
            return cached

        request_url = self._url_for(host)
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.get(request_url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            LOGGER.warning(
                "Greencheck HTTP error",
                extra={"url": request_url, "status_code": exc.response.status_code},
                exc_info=exc,
            )
            return None
        except httpx.HTTPError as exc:
            LOGGER.warning(
                "Greencheck transport error", extra={"url": request_url}, exc_info=exc
            )
            return None
        except ValueError as exc:
            LOGGER.warning(
                "Greencheck response parsing error",
                extra={"url": request_url},
                exc_info=exc,
            )
            return None

        result = self._parse(url, payload)
        self._cache[host] = (time.time(), result)
        return result

    async def acheck(self, url: str) -> GreenCheckResult | None:
        """Asynchronous variant of :meth:`check` sharing the same cache."""

        host = normalise_host(url)
        if not host:
            return None
        hit, cached = self._cached(host)
        if hit:
            return cached

        request_url = self._url_for(host)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(request_url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            LOGGER.warning(
                "Greencheck HTTP error",
                extra={"url": request_url, "status_code": exc.response.status_code},
                exc_info=exc,
            )
            return None
        except httpx.HTTPError as exc:
            LOGGER.warning(
                "Greencheck transport error", extra={"url": request_url}, exc_info=exc
            )
            return None
        except ValueError as exc:
            LOGGER.warning(
                "Greencheck response parsing error",
                extra={"url": request_url},
                exc_info=exc,
            )
            return None

        result = self._parse(url, payload)
        self._cache[host] = (time.time(), result)
        return result
