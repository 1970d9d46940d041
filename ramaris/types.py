"""Response shapes returned by the Ramaris API.

These are structural types only; the client does not validate responses
against them. Keys keep the API's camelCase spelling.
"""

from __future__ import annotations

from typing import Generic, Literal, TypedDict, TypeVar

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class Pagination(TypedDict):
    page: int
    pageSize: int
    totalItems: int
    totalPages: int


class PaginatedResponse(TypedDict, Generic[T]):
    data: list[T]
    pagination: Pagination


class PaginationParams(TypedDict, total=False):
    page: int
    pageSize: int


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


class Creator(TypedDict):
    nickname: str


class StrategyStats(TypedDict):
    walletsTracked: int
    totalSwaps: int


class StrategyDetailStats(StrategyStats):
    totalNotifications: int


class StrategyListItem(TypedDict):
    id: int
    shareId: str
    name: str
    description: str | None
    roiPercent: float | None
    lastActivityAt: str | None
    createdAt: str
    creator: Creator
    stats: StrategyStats


class StrategyDetail(TypedDict):
    id: int
    shareId: str
    name: str
    description: str | None
    roiPercent: float | None
    lastActivityAt: str | None
    createdAt: str
    status: Literal["ACTIVE", "INACTIVE", "DELETED"]
    creator: Creator
    stats: StrategyDetailStats
    tags: list[str]


class WatchlistStrategy(TypedDict):
    id: int
    shareId: str
    name: str
    description: str | None
    roiPercent: float | None
    lastActivityAt: str | None
    creator: Creator
    copiedAt: str


# ---------------------------------------------------------------------------
# Wallets
# ---------------------------------------------------------------------------


class WalletStats(TypedDict):
    totalSwaps: int
    openPositions: int


class WalletDetailStats(WalletStats):
    followers: int


class TopToken(TypedDict):
    symbol: str
    realizedProfitUsd: float
    tradeCount: int


class WalletListItem(TypedDict):
    id: int
    winRate: float | None
    realizedPnL: float | None
    createdAt: str
    stats: WalletStats
    tags: list[str]


class WalletDetail(TypedDict):
    id: int
    winRate: float | None
    realizedPnL: float | None
    createdAt: str
    status: str
    stats: WalletDetailStats
    tags: list[str]
    topTokens: list[TopToken]


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


class UserStats(TypedDict):
    strategiesCreated: int
    walletsFollowed: int
    strategiesFollowed: int


class UserProfile(TypedDict):
    id: str
    nickname: str | None
    name: str | None
    email: str
    createdAt: str
    isFounder: bool
    stats: UserStats


class Subscription(TypedDict):
    tier: Literal["FREE", "PRO", "ULTRA", "ENTERPRISE"]
    status: str
    currentPeriodEnd: str | None
    cancelAtPeriodEnd: bool
    isFounder: bool
    createdAt: str | None


# ---------------------------------------------------------------------------
# /health
# ---------------------------------------------------------------------------


class KeyRateLimit(TypedDict):
    limit: int
    keyPrefix: str


class HealthStatus(TypedDict):
    status: str
    version: str
    timestamp: str
    user: str
    rateLimit: KeyRateLimit
