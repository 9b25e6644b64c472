"""Domain models used by the application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, eq=False)
class Coin:
    id: str
    symbol: str
    name: str
    image: Optional[str] = None
    current_price: Optional[float] = None
    market_cap: Optional[float] = None
    market_cap_rank: Optional[int] = None
    price_change_percentage_24h: Optional[float] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        price_info = f" - ${self.current_price:,.2f}" if self.current_price is not None else ""
        change_info = ""
        if self.price_change_percentage_24h is not None:
            change_info = f" ({self.price_change_percentage_24h:+.2f}%)"
        rank_info = f"#{self.market_cap_rank} " if self.market_cap_rank else ""
        return f"{rank_info}{self.name} ({self.symbol.upper()}){price_info}{change_info}"


@dataclass(frozen=True)
class SavedCoin:
    id: str
    is_archived: bool = False
