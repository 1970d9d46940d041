"""Lightweight models used by the client."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _parse_int(raw: str) -> int | None:
    """Parse the leading base-10 integer of *raw*, or *None* if there is none."""
    match = _INT_PREFIX.match(raw)
    if match is None:
        return None
    return int(match.group(1))


@dataclass(frozen=True)
class RateLimitInfo:
    """Rate-limit metadata parsed from response headers."""

    limit: int | None
    remaining: int | None
    reset: int | None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RateLimitInfo | None:
        """Parse ``X-RateLimit-*`` headers, returning *None* unless all three are set.

        Values that are not integers do not raise; the affected field is *None*.
        """
        raw_limit = headers.get("x-ratelimit-limit")
        raw_remaining = headers.get("x-ratelimit-remaining")
        raw_reset = headers.get("x-ratelimit-reset")
        if not raw_limit or not raw_remaining or not raw_reset:
            return None
        return cls(
            limit=_parse_int(raw_limit),
            remaining=_parse_int(raw_remaining),
            reset=_parse_int(raw_reset),
        )
