"""Ramaris Python client: typed access to the Ramaris REST API."""

from __future__ import annotations

from ramaris.client import AsyncRamarisClient, RamarisClient, build_url
from ramaris.exceptions import RamarisError, RateLimitError
from ramaris.models import RateLimitInfo
from ramaris.types import (
    HealthStatus,
    PaginatedResponse,
    Pagination,
    PaginationParams,
    StrategyDetail,
    StrategyListItem,
    Subscription,
    UserProfile,
    WalletDetail,
    WalletListItem,
    WatchlistStrategy,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncRamarisClient",
    "RamarisClient",
    "build_url",
    "RamarisError",
    "RateLimitError",
    "RateLimitInfo",
    "HealthStatus",
    "PaginatedResponse",
    "Pagination",
    "PaginationParams",
    "StrategyDetail",
    "StrategyListItem",
    "Subscription",
    "UserProfile",
    "WalletDetail",
    "WalletListItem",
    "WatchlistStrategy",
]
