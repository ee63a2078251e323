"""httpx wrapper.

Why a wrapper:
- One place decides base URL, timeout and headers for every action call.
- Tests can hand in an `httpx.MockTransport` instead of the network.
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from agentai.core.domain.models import ClientConfig

logger = logging.getLogger(__name__)

MANDATORY_HEADERS = ("Authorization", "Content-Type")


def build_headers(api_key: str, extra_headers: Mapping[str, str] | None = None) -> dict[str, str]:
    """Mandatory headers with `extra_headers` merged on top.

    Header names compare case-insensitively, so `authorization` in
    `extra_headers` replaces `Authorization` instead of duplicating it.
    """

    headers: dict[str, str] = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    for name, value in (extra_headers or {}).items():
        for existing in [k for k in headers if k.lower() == name.lower()]:
            if existing in MANDATORY_HEADERS:
                logger.warning("Extra header %r overrides the default %s header", name, existing)
            del headers[existing]
        headers[name] = value
    return headers


def build_async_client(
    api_key: str,
    config: ClientConfig | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the `httpx.AsyncClient` shared by every call of one API client.

    Why a builder:
    - Centralizes timeout/headers so every action behaves the same.
    - Leaves a seam (`transport`) for tests.
    """

    config = config or ClientConfig()
    return httpx.AsyncClient(
        base_url=config.base_url,
        headers=build_headers(api_key, config.headers),
        timeout=httpx.Timeout(config.timeout),
        transport=transport,
    )
