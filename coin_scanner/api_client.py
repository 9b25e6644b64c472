"""Requests-based client for fetching coin market data."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import requests

from .config import HEADERS, Config
from .errors import DecodingError, NetworkError
from .models import Coin

logger = logging.getLogger(__name__)


def _optional_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


def parse_market_coin(raw: Dict[str, Any]) -> Coin:
    """Build a Coin from a ``/coins/markets`` entry."""
    rank = raw.get("market_cap_rank")
    return Coin(
        id=str(raw["id"]),
        symbol=str(raw["symbol"]),
        name=str(raw["name"]),
        image=raw.get("image"),
        current_price=_optional_float(raw.get("current_price")),
        market_cap=_optional_float(raw.get("market_cap")),
        market_cap_rank=int(rank) if rank is not None else None,
        price_change_percentage_24h=_optional_float(raw.get("price_change_percentage_24h")),
    )


def parse_search_coin(raw: Dict[str, Any]) -> Coin:
    """Build a Coin from a ``/search`` entry, which carries no market fields."""
    rank = raw.get("market_cap_rank")
    return Coin(
        id=str(raw["id"]),
        symbol=str(raw["symbol"]),
        name=str(raw["name"]),
        image=raw.get("large") or raw.get("thumb"),
        market_cap_rank=int(rank) if rank is not None else None,
    )


class CoinScannerClient:
    """High-level interface for the remote market data API."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.base_url = Config.API_BASE_URL.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(HEADERS)
        if Config.API_KEY:
            self.session.headers["x-cg-demo-api-key"] = Config.API_KEY

    def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=float(Config.REQUEST_TIMEOUT))
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Request to %s failed: %s", url, exc)
            raise NetworkError() from exc
        try:
            return response.json()
        except ValueError as exc:
            logger.error("Invalid JSON from %s: %s", url, exc)
            raise DecodingError() from exc

    def get_coins_sync(self, page: int) -> List[Coin]:
        payload = self._get_json(
            "/coins/markets",
            {
                "vs_currency": Config.CURRENCY,
                "order": "market_cap_desc",
                "per_page": Config.PER_PAGE,
                "page": page,
            },
        )
        try:
            coins = [parse_market_coin(item) for item in payload]
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Malformed market payload for page %s: %s", page, exc)
            raise DecodingError() from exc
        logger.info("Fetched %s coins for page %s", len(coins), page)
        return coins

    def search_coins_sync(self, query: str) -> List[Coin]:
        payload = self._get_json("/search", {"query": query})
        try:
            coins = [parse_search_coin(item) for item in payload["coins"]]
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Malformed search payload for %r: %s", query, exc)
            raise DecodingError() from exc
        logger.info("Found %s coins matching %r", len(coins), query)
        return coins

    async def get_coins(self, page: int) -> List[Coin]:
        return await asyncio.to_thread(self.get_coins_sync, page)

    async def search_coins(self, query: str) -> List[Coin]:
        return await asyncio.to_thread(self.search_coins_sync, query)
