# src/dev_helper/remote/http.py

from __future__ import annotations

import httpx


def make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    """Shared timeout object for the time-tracking and chat-completion clients."""
    return httpx.Timeout(
        connect=connect_s,
        read=read_s,
        write=10.0,
        pool=connect_s,
    )
