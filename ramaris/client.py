"""Async and sync HTTP clients for the Ramaris API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ramaris.config import settings
from ramaris.exceptions import network_error, raise_for_error
from ramaris.models import RateLimitInfo
from ramaris.request_context import request_scope
from ramaris.types import (
    HealthStatus,
    PaginatedResponse,
    PaginationParams,
    StrategyDetail,
    StrategyListItem,
    Subscription,
    UserProfile,
    WalletDetail,
    WalletListItem,
    WatchlistStrategy,
)

logger = logging.getLogger(__name__)


def build_url(
    base_url: str, path: str, params: PaginationParams | None = None,
) -> str:
    """Join *base_url* and *path*, appending ``page`` then ``pageSize`` if given."""
    url = f"{base_url}{path}"
    if not params:
        return url
    query: list[tuple[str, str]] = []
    if params.get("page") is not None:
        query.append(("page", str(params["page"])))
    if params.get("pageSize") is not None:
        query.append(("pageSize", str(params["pageSize"])))
    if not query:
        return url
    return f"{url}?{httpx.QueryParams(query)}"


def _pagination(page: int | None, page_size: int | None) -> PaginationParams:
    params: PaginationParams = {}
    if page is not None:
        params["page"] = page
    if page_size is not None:
        params["pageSize"] = page_size
    return params


def _resolve_config(
    api_key: str | None, base_url: str | None,
) -> tuple[str, str]:
    """Fill in unset options from settings and normalize the base URL."""
    key = api_key if api_key is not None else settings.api_key
    if not key:
        raise ValueError(
            "An API key is required (pass api_key or set RAMARIS_API_KEY)"
        )
    url = base_url if base_url is not None else settings.base_url
    return key, url.rstrip("/")


class _BaseClient:
    """Configuration and response bookkeeping shared by both clients."""

    def __init__(self, api_key: str | None, base_url: str | None) -> None:
        self._api_key, self._base_url = _resolve_config(api_key, base_url)
        self.rate_limit: RateLimitInfo | None = None

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }

    def _handle_response(self, response: httpx.Response) -> Any:
        logger.debug(
            "GET %s -> %d", response.request.url, response.status_code,
            extra={"url": str(response.request.url), "status": response.status_code},
        )
        info = RateLimitInfo.from_headers(response.headers)
        if info is not None:
            self.rate_limit = info
            logger.debug(
                "Rate limit: %s/%s remaining, resets at %s",
                info.remaining, info.limit, info.reset,
            )
        if not response.is_success:
            logger.info(
                "Ramaris API returned HTTP %d for %s",
                response.status_code, response.request.url.path,
                extra={"url": str(response.request.url), "status": response.status_code},
            )
            raise_for_error(response)
        return response.json()


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------


class AsyncRamarisClient(_BaseClient):
    """Async client for the Ramaris API (backed by ``httpx.AsyncClient``)."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        *,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(api_key, base_url)
        kwargs: dict[str, Any] = {
            "timeout": settings.timeout if timeout is None else timeout,
        }
        if _transport is not None:
            kwargs["transport"] = _transport
        self._client = httpx.AsyncClient(**kwargs)

    # -- context manager -----------------------------------------------------

    async def __aenter__(self) -> AsyncRamarisClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    # -- transport -----------------------------------------------------------

    async def request(self, path: str, params: PaginationParams | None = None) -> Any:
        """Issue one authenticated GET and return the decoded JSON body."""
        url = build_url(self._base_url, path, params)
        with request_scope():
            try:
                response = await self._client.get(url, headers=self._headers())
            except (httpx.TransportError, httpx.InvalidURL) as exc:
                logger.warning(
                    "Network error calling %s: %s", url, exc,
                    extra={"url": url, "status": 0},
                )
                raise network_error(exc) from exc
            return self._handle_response(response)

    async def request_single(self, path: str) -> Any:
        body = await self.request(path)
        return body.get("data")

    async def request_paginated(
        self, path: str, params: PaginationParams | None = None,
    ) -> PaginatedResponse[Any]:
        return await self.request(path, params)

    # -- strategies ----------------------------------------------------------

    async def list_strategies(
        self, *, page: int | None = None, page_size: int | None = None,
    ) -> PaginatedResponse[StrategyListItem]:
        return await self.request_paginated(
            "/strategies", _pagination(page, page_size),
        )

    async def get_strategy(self, share_id: str) -> StrategyDetail:
        return await self.request_single(f"/strategies/{share_id}")

    async def strategy_watchlist(
        self, *, page: int | None = None, page_size: int | None = None,
    ) -> PaginatedResponse[WatchlistStrategy]:
        return await self.request_paginated(
            "/me/strategies/watchlist", _pagination(page, page_size),
        )

    # -- wallets -------------------------------------------------------------

    async def list_wallets(
        self, *, page: int | None = None, page_size: int | None = None,
    ) -> PaginatedResponse[WalletListItem]:
        return await self.request_paginated(
            "/wallets", _pagination(page, page_size),
        )

    async def get_wallet(self, wallet_id: int) -> WalletDetail:
        return await self.request_single(f"/wallets/{wallet_id}")

    # -- me ------------------------------------------------------------------

    async def profile(self) -> UserProfile:
        return await self.request_single("/me/profile")

    async def subscription(self) -> Subscription:
        return await self.request_single("/me/subscription")

    async def health(self) -> HealthStatus:
        return await self.request("/health")


# ---------------------------------------------------------------------------
# Sync client
# ---------------------------------------------------------------------------


class RamarisClient(_BaseClient):
    """Synchronous client for the Ramaris API (backed by ``httpx.Client``)."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        *,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(api_key, base_url)
        kwargs: dict[str, Any] = {
            "timeout": settings.timeout if timeout is None else timeout,
        }
        if _transport is not None:
            kwargs["transport"] = _transport
        self._client = httpx.Client(**kwargs)

    # -- context manager -----------------------------------------------------

    def __enter__(self) -> RamarisClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # -- transport -----------------------------------------------------------

    def request(self, path: str, params: PaginationParams | None = None) -> Any:
        """Issue one authenticated GET and return the decoded JSON body."""
        url = build_url(self._base_url, path, params)
        with request_scope():
            try:
                response = self._client.get(url, headers=self._headers())
            except (httpx.TransportError, httpx.InvalidURL) as exc:
                logger.warning(
                    "Network error calling %s: %s", url, exc,
                    extra={"url": url, "status": 0},
                )
                raise network_error(exc) from exc
            return self._handle_response(response)

    def request_single(self, path: str) -> Any:
        return self.request(path).get("data")

    def request_paginated(
        self, path: str, params: PaginationParams | None = None,
    ) -> PaginatedResponse[Any]:
        return self.request(path, params)

    # -- strategies ----------------------------------------------------------

    def list_strategies(
        self, *, page: int | None = None, page_size: int | None = None,
    ) -> PaginatedResponse[StrategyListItem]:
        return self.request_paginated("/strategies", _pagination(page, page_size))

    def get_strategy(self, share_id: str) -> StrategyDetail:
        return self.request_single(f"/strategies/{share_id}")

    def strategy_watchlist(
        self, *, page: int | None = None, page_size: int | None = None,
    ) -> PaginatedResponse[WatchlistStrategy]:
        return self.request_paginated(
            "/me/strategies/watchlist", _pagination(page, page_size),
        )

    # -- wallets -------------------------------------------------------------

    def list_wallets(
        self, *, page: int | None = None, page_size: int | None = None,
    ) -> PaginatedResponse[WalletListItem]:
        return self.request_paginated("/wallets", _pagination(page, page_size))

    def get_wallet(self, wallet_id: int) -> WalletDetail:
        return self.request_single(f"/wallets/{wallet_id}")

    # -- me ------------------------------------------------------------------

    def profile(self) -> UserProfile:
        return self.request_single("/me/profile")

    def subscription(self) -> Subscription:
        return self.request_single("/me/subscription")

    def health(self) -> HealthStatus:
        return self.request("/health")
