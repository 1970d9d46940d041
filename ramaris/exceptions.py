"""Exception hierarchy for the Ramaris client and error-response normalization."""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import httpx

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "UNKNOWN_ERROR"
RATE_LIMITED = "RATE_LIMITED"
NETWORK_ERROR = "NETWORK_ERROR"


class RamarisError(Exception):
    """Base exception for all Ramaris API errors.

    ``status`` is the HTTP status of the failed response, or ``0`` when no
    response was received at all.
    """

    def __init__(self, message: str, code: str, status: int) -> None:
        self.message = message
        self.code = code
        self.status = status
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"code={self.code!r}, status={self.status})"
        )


class RateLimitError(RamarisError):
    """Raised on 429 responses."""

    def __init__(self, message: str, retry_after: int = 0) -> None:
        super().__init__(message, RATE_LIMITED, 429)
        self.retry_after = retry_after


def network_error(exc: BaseException) -> RamarisError:
    """Wrap a transport failure (no HTTP response) as a ``NETWORK_ERROR``."""
    return RamarisError(str(exc) or "Network error", NETWORK_ERROR, 0)


def _parse_error_body(response: httpx.Response) -> dict[str, Any]:
    """Return the ``error`` object of a JSON error body, or an empty dict."""
    content_type = response.headers.get("content-type", "")
    if "application/json" not in content_type:
        return {}
    try:
        body = response.json()
    except Exception:
        logger.debug("Unparseable JSON error body (HTTP %d)", response.status_code)
        return {}
    if not isinstance(body, dict):
        return {}
    error = body.get("error")
    return error if isinstance(error, dict) else {}


def raise_for_error(response: httpx.Response) -> NoReturn:
    """Raise the exception matching a non-2xx *response*."""
    status = response.status_code
    error = _parse_error_body(response)

    message = error.get("message")
    if message is None:
        message = f"HTTP {status}"

    if status == 429:
        retry_after = error.get("retryAfter")
        raise RateLimitError(message, 0 if retry_after is None else retry_after)

    code = error.get("code")
    raise RamarisError(message, UNKNOWN_ERROR if code is None else code, status)
