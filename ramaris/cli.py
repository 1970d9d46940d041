"""``ramaris`` command-line interface: fetch one resource and print it as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable

from ramaris.client import RamarisClient
from ramaris.config import settings
from ramaris.exceptions import RamarisError, RateLimitError
from ramaris.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _add_pagination(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--page", type=int, default=None, help="Page number")
    parser.add_argument(
        "--page-size", type=int, default=None, help="Items per page",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ramaris", description="Query the Ramaris API",
    )
    parser.add_argument(
        "--api-key", default=None, help="API key (default: $RAMARIS_API_KEY)",
    )
    parser.add_argument(
        "--base-url", default=None,
        help=f"API root (default: {settings.base_url})",
    )
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument(
        "--log-format", choices=["text", "json"], default=settings.log_format,
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("health", help="API health and key status")
    _add_pagination(sub.add_parser("strategies", help="List strategies"))
    strategy = sub.add_parser("strategy", help="Show one strategy")
    strategy.add_argument("share_id")
    _add_pagination(sub.add_parser("watchlist", help="List watched strategies"))
    _add_pagination(sub.add_parser("wallets", help="List wallets"))
    wallet = sub.add_parser("wallet", help="Show one wallet")
    wallet.add_argument("wallet_id", type=int)
    sub.add_parser("profile", help="Show the user profile")
    sub.add_parser("subscription", help="Show the subscription")
    return parser


def _dispatch(client: RamarisClient, args: argparse.Namespace) -> Any:
    commands: dict[str, Callable[[], Any]] = {
        "health": client.health,
        "strategies": lambda: client.list_strategies(
            page=args.page, page_size=args.page_size,
        ),
        "strategy": lambda: client.get_strategy(args.share_id),
        "watchlist": lambda: client.strategy_watchlist(
            page=args.page, page_size=args.page_size,
        ),
        "wallets": lambda: client.list_wallets(
            page=args.page, page_size=args.page_size,
        ),
        "wallet": lambda: client.get_wallet(args.wallet_id),
        "profile": client.profile,
        "subscription": client.subscription,
    }
    return commands[args.command]()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    try:
        client = RamarisClient(api_key=args.api_key, base_url=args.base_url)
    except ValueError as exc:
        parser.error(str(exc))

    with client:
        try:
            result = _dispatch(client, args)
        except RateLimitError as exc:
            print(
                f"{exc.code}: {exc.message} (retry after {exc.retry_after}s)",
                file=sys.stderr,
            )
            return 2
        except RamarisError as exc:
            print(f"{exc.code}: {exc.message}", file=sys.stderr)
            return 1
        finally:
            logger.debug("Rate limit snapshot: %s", client.rate_limit)

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
