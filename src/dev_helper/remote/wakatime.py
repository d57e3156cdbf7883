# src/dev_helper/remote/wakatime.py

from __future__ import annotations

import base64
import logging
from typing import Any

import httpx

from ..core.errors import RemoteCallError
from .http import make_timeout

logger = logging.getLogger(__name__)


def basic_auth_header(api_key: str) -> str:
    """WakaTime-style Basic auth: the key alone, base64-encoded (no "user:" part)."""
    token = base64.b64encode(api_key.encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class WakaTimeClient:
    """
    Single GET against a WakaTime-compatible "all time since today" endpoint.

    Returns the human-readable `data.text` field. No retries.
    """

    def __init__(
        self,
        url: str,
        *,
        connect_timeout: float = 5.0,
        read_timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = make_timeout(connect_timeout, read_timeout)
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Any) -> "WakaTimeClient":
        return cls(
            settings.wakatime_url,
            connect_timeout=float(getattr(settings, "http_connect_timeout", 5.0)),
            read_timeout=float(getattr(settings, "http_read_timeout", 60.0)),
        )

    def fetch_total(self, api_key: str) -> str:
        headers = {"Authorization": basic_auth_header(api_key), "Accept": "application/json"}
        logger.info("WakaTime: GET %s", self._url)

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                resp = client.get(self._url, headers=headers)
        except httpx.HTTPError as e:
            logger.info("WakaTime: transport error %s", e.__class__.__name__)
            raise RemoteCallError(f"Could not reach the time-tracking API: {e}") from e

        if not resp.is_success:
            logger.info("WakaTime: HTTP %s", resp.status_code)
            raise RemoteCallError(
                f"Time-tracking API returned HTTP {resp.status_code}.",
                status_code=resp.status_code,
            )

        try:
            text = resp.json()["data"]["text"]
        except (ValueError, KeyError, TypeError) as e:
            raise RemoteCallError("Unexpected response from the time-tracking API (no data.text).") from e

        if not isinstance(text, str):
            raise RemoteCallError("Unexpected response from the time-tracking API (no data.text).")
        return text
