from __future__ import annotations

import logging
from http.client import HTTPException
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from etf_matcher.config.settings import settings
from etf_matcher.errors import TransportError

logger = logging.getLogger(__name__)


def fetch_bytes(url: str, timeout: float | None = None) -> bytes:
    logger.debug("GET %s", url)
    try:
        request = Request(url)
        with urlopen(request, timeout=timeout or settings.http_timeout_seconds) as response:
            body = response.read()
    except HTTPError as exc:
        logger.warning("GET %s returned HTTP %s", url, exc.code)
        raise TransportError(url, f"HTTP {exc.code}", status=exc.code) from exc
    # OSError covers URLError, timeouts and resets mid-body; HTTPException covers
    # InvalidURL and IncompleteRead; ValueError is urllib's unknown URL type.
    except (OSError, HTTPException, ValueError) as exc:
        reason = getattr(exc, "reason", None) or exc
        logger.warning("GET %s failed: %r", url, reason)
        raise TransportError(url, str(reason) or type(exc).__name__) from exc
    logger.debug("GET %s -> %d bytes", url, len(body))
    return body


def fetch_text(url: str, timeout: float | None = None) -> str:
    body = fetch_bytes(url, timeout=timeout)
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TransportError(url, "response body is not valid UTF-8") from exc
