"""Paged listing, debounced search and saved-coin tracking for the coin picker."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol, Set

from .config import Config
from .debounce import Debouncer
from .errors import CoinScannerError
from .models import Coin, SavedCoin

logger = logging.getLogger(__name__)


class CoinSource(Protocol):
    async def get_coins(self, page: int) -> List[Coin]: ...

    async def search_coins(self, query: str) -> List[Coin]: ...


class SavedCoinSource(Protocol):
    async def list_saved(self, exclude_archived: bool = True) -> List[SavedCoin]: ...


class CoinSelectionController:
    """
    Serve the coin list shown by the coin picker.

    In list mode coins are fetched page by page and every page is memoized;
    in search mode results are memoized per query string. Query changes go
    through a debounce gate, which is the only thing that switches modes.
    The set of saved coin ids is tracked independently of either mode.

    All methods are expected to be called from a single event loop.
    """

    def __init__(
        self,
        source: CoinSource,
        saved_store: Optional[SavedCoinSource] = None,
        debounce_delay: Optional[float] = None,
    ) -> None:
        self.source = source
        self.saved_store = saved_store

        self.coins: List[Coin] = []
        self.is_loading = False
        self.is_loading_more = False
        self.is_in_search_mode = False
        self.error_message: Optional[str] = None

        self.coins_cache: Dict[int, List[Coin]] = {}
        self.search_coins_cache: Dict[str, List[Coin]] = {}

        self.current_page = 1
        self.saved_coin_ids: Set[str] = set()

        if debounce_delay is None:
            debounce_delay = Config.SEARCH_DEBOUNCE_MS / 1000
        self._debouncer = Debouncer(self.handle_query_change, delay=debounce_delay)

    def set_error(self, exc: CoinScannerError) -> None:
        logger.warning("%s: %s", type(exc).__name__, exc.description)
        self.error_message = exc.description

    def clear_error(self) -> None:
        self.error_message = None

    async def fetch_coins(self, page: int = 1) -> None:
        self.is_loading = True
        try:
            if not self.is_in_search_mode and page in self.coins_cache:
                logger.debug("Page %s served from cache", page)
                self._show_page(page, self.coins_cache[page])
                return

            try:
                fetched = await self.source.get_coins(page)
            except CoinScannerError as exc:
                self.set_error(exc)
                return

            # Search mode may have been entered while the request was in flight.
            if not self.is_in_search_mode:
                self.coins_cache[page] = fetched
            self._show_page(page, fetched)
        finally:
            self.is_loading = False

    def _show_page(self, page: int, coins: List[Coin]) -> None:
        self.coins = self.coins + coins if page > 1 else list(coins)
        self.current_page = page

    async def fetch_coins_on_next_page_if_needed(self, coin: Coin) -> None:
        if self.is_loading_more or self.is_in_search_mode:
            return
        if not self.coins or coin.id != self.coins[-1].id:
            return
        self.is_loading_more = True
        try:
            await self.fetch_coins(self.current_page + 1)
        finally:
            self.is_loading_more = False

    def handle_search_input(self, query: str) -> None:
        """Feed a raw query into the debounce gate. Needs a running event loop."""
        self._debouncer.submit(query)

    async def wait_for_pending_search(self) -> None:
        await self._debouncer.wait()

    def close(self) -> None:
        self._debouncer.cancel()

    async def search_coins(self, query: str) -> None:
        if self.is_in_search_mode and query in self.search_coins_cache:
            logger.debug("Search %r served from cache", query)
            self.coins = list(self.search_coins_cache[query])
            return

        self.is_loading = True
        try:
            fetched = await self.source.search_coins(query)
        except CoinScannerError as exc:
            self.set_error(exc)
            return
        finally:
            self.is_loading = False

        # Keyed by the literal query, so a late result is still valid to cache.
        self.search_coins_cache[query] = fetched
        self.coins = list(fetched)

    async def handle_query_change(self, query: str) -> None:
        if not query:
            self.is_in_search_mode = False
            self.current_page = 1
            self.coins = []
            await self.fetch_coins(self.current_page)
        else:
            self.is_in_search_mode = True
            await self.search_coins(query)

    async def fetch_saved_coins(self) -> None:
        if self.saved_store is None:
            return
        try:
            saved = await self.saved_store.list_saved(exclude_archived=True)
        except CoinScannerError as exc:
            self.set_error(exc)
            return
        self.saved_coin_ids = {coin.id for coin in saved if not coin.is_archived}
        logger.info("Loaded %s saved coins", len(self.saved_coin_ids))

    def toggle_save_state(self, coin: Coin) -> None:
        if coin.id in self.saved_coin_ids:
            self.saved_coin_ids.remove(coin.id)
        else:
            self.saved_coin_ids.add(coin.id)

    def is_coin_saved(self, coin: Coin) -> bool:
        return coin.id in self.saved_coin_ids
