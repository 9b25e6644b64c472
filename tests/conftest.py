from typing import Dict, List, Optional

import pytest

from coin_scanner.errors import CoinScannerError
from coin_scanner.models import Coin, SavedCoin


def make_coins(start: int, end: int) -> List[Coin]:
    return [Coin(id=f"c{i}", symbol=f"s{i}", name=f"Coin {i}") for i in range(start, end + 1)]


class FakeCoinSource:
    """Scripted remote source that records every call."""

    def __init__(self) -> None:
        self.pages: Dict[int, List[Coin]] = {}
        self.searches: Dict[str, List[Coin]] = {}
        self.error: Optional[CoinScannerError] = None
        self.page_calls: List[int] = []
        self.search_calls: List[str] = []
        self.on_call = None

    async def get_coins(self, page: int) -> List[Coin]:
        self.page_calls.append(page)
        if self.on_call:
            await self.on_call()
        if self.error:
            raise self.error
        return list(self.pages.get(page, []))

    async def search_coins(self, query: str) -> List[Coin]:
        self.search_calls.append(query)
        if self.on_call:
            await self.on_call()
        if self.error:
            raise self.error
        return list(self.searches.get(query, []))


class FakeSavedStore:
    def __init__(self, saved: Optional[List[SavedCoin]] = None) -> None:
        self.saved = saved or []
        self.error: Optional[CoinScannerError] = None
        self.calls = 0

    async def list_saved(self, exclude_archived: bool = True) -> List[SavedCoin]:
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.saved)


@pytest.fixture
def source():
    return FakeCoinSource()


@pytest.fixture
def saved_store():
    return FakeSavedStore()


@pytest.fixture
def coins():
    return make_coins
