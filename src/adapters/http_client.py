"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for every outgoing request.
- Eases testing: an `httpx.MockTransport` can be injected.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Build a synchronous `httpx.Client` with safe defaults.

    Why a builder:
    - A timeout is always set (never block indefinitely).
    - The optional token is added in a single place.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {"User-Agent": settings.user_agent}
    if settings.github_token:
        headers["Authorization"] = f"Bearer {settings.github_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
