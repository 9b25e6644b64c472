"""Command-line interface for the coin scanner."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import click

from .api_client import CoinScannerClient
from .controller import CoinSelectionController
from .errors import StorageError
from .state_manager import RedisSavedCoinStore

logger = logging.getLogger(__name__)


def _open_store() -> Optional[RedisSavedCoinStore]:
    try:
        return RedisSavedCoinStore()
    except StorageError as exc:
        logger.warning("Redis not available, saved coins will not be shown: %s", exc)
        return None


def _echo_coins(controller: CoinSelectionController) -> None:
    for coin in controller.coins:
        marker = "*" if controller.is_coin_saved(coin) else " "
        click.echo(f"{marker} {coin}")
    if controller.error_message:
        click.echo(controller.error_message, err=True)
        sys.exit(1)


@click.group()
def main() -> None:
    """Browse and search coin market data."""


@main.command()
@click.option("--pages", default=1, show_default=True, type=click.IntRange(min=1), help="Number of pages to load.")
def browse(pages: int) -> None:
    """List coins by market cap, one page at a time."""
    controller = CoinSelectionController(CoinScannerClient(), saved_store=_open_store())

    async def run() -> None:
        await controller.fetch_saved_coins()
        await controller.fetch_coins()
        for _ in range(pages - 1):
            if not controller.coins or controller.error_message:
                break
            loaded = len(controller.coins)
            await controller.fetch_coins_on_next_page_if_needed(controller.coins[-1])
            if len(controller.coins) == loaded:
                break

    asyncio.run(run())
    logger.info("Showing %s coins from %s page(s)", len(controller.coins), controller.current_page)
    _echo_coins(controller)


@main.command()
@click.argument("query")
def search(query: str) -> None:
    """Search coins by name or symbol."""
    controller = CoinSelectionController(CoinScannerClient(), saved_store=_open_store())

    async def run() -> None:
        await controller.fetch_saved_coins()
        controller.handle_search_input(query.strip())
        await controller.wait_for_pending_search()

    asyncio.run(run())
    _echo_coins(controller)


@main.command()
@click.argument("coin_id")
def toggle(coin_id: str) -> None:
    """Save a coin, or remove it if it is already saved."""
    try:
        store = RedisSavedCoinStore()
        if store.is_saved(coin_id):
            store.delete(coin_id)
            click.echo(f"Removed {coin_id}")
        else:
            store.save(coin_id)
            click.echo(f"Saved {coin_id}")
    except StorageError as exc:
        click.echo(exc.description, err=True)
        sys.exit(1)


@main.command()
@click.option("--include-archived", is_flag=True, help="Also list archived coins.")
def saved(include_archived: bool) -> None:
    """List saved coin ids."""
    try:
        store = RedisSavedCoinStore()
        coins = store.list_saved_sync(exclude_archived=not include_archived)
    except StorageError as exc:
        click.echo(exc.description, err=True)
        sys.exit(1)
    for coin in coins:
        suffix = " (archived)" if coin.is_archived else ""
        click.echo(f"{coin.id}{suffix}")
