"""Thin wrapper around requests shared by every remote stage."""

import logging
from typing import Any, Dict, Optional

import requests

from .errors import NetworkError
from .schemas import ServiceConfig

logger = logging.getLogger(__name__)


def http_get(
    url: str, service: ServiceConfig, params: Optional[Dict[str, Any]] = None
) -> requests.Response:
    """
    Issue a GET request with the configured headers and timeout.

    The status code is not checked: callers decide what a non-2xx body means.

    Raises:
        NetworkError: If the request cannot be completed.
    """
    logger.debug(f"GET {url} params={params}")
    try:
        response = requests.get(
            url,
            params=params,
            headers={"User-Agent": service.user_agent},
            timeout=service.timeout,
        )
    except requests.RequestException as e:
        raise NetworkError(f"GET {url} failed: {e}") from e

    if not 200 <= response.status_code < 300:
        logger.warning(f"GET {url} returned HTTP {response.status_code}")
    return response


def response_text(response: requests.Response) -> str:
    """
    Decode a response body as text.

    Without a charset in Content-Type, requests assumes ISO-8859-1 for text/*.
    In that case the body is tried as UTF-8 first, then as the detected encoding.
    """
    content_type = response.headers.get("Content-Type", "")
    if "charset" in content_type.lower():
        return response.text

    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError:
        encoding = response.apparent_encoding or "utf-8"
        logger.debug(f"Body is not UTF-8, decoding as {encoding}")
        return response.content.decode(encoding, errors="replace")
