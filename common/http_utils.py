"""ABOUTME: Async GET helper shared by the upstream API clients."""

from typing import Any, Dict, Optional
import httpx

DEFAULT_HTTP_TIMEOUT = 10.0
USER_AGENT = "weather-mcp-server/0.1"


async def safe_http_get(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
) -> httpx.Response:
    """GET ``url`` on a short-lived client and return the successful response.

    Raises:
        httpx.HTTPStatusError: For any non-2xx answer
        httpx.HTTPError: For transport failures, including the timeout
    """
    async with httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
    ) as client:
        response = await client.get(url, params=params)
    response.raise_for_status()
    return response


def extract_error_reason(error: httpx.HTTPStatusError) -> Optional[str]:
    """Pull the upstream-supplied failure reason out of an error response.

    Open-Meteo answers bad requests with ``{"error": true, "reason": "..."}``.
    Returns None when the body is not JSON or carries no reason.
    """
    try:
        body = error.response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("reason"):
        return str(body["reason"])
    return None
