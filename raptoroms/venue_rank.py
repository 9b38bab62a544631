"""A venue's ranking for one symbol."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field


@dataclass(eq=False)
class VenueRank:
    """Weighted factors that score how attractive a venue is for a symbol."""

    venue_trading_cost: float = 0.0
    router_historic_trading_volume: float = 0.0
    market_historic_trading_volume: float = 0.0
    immediate_trading_volume: float = 0.0
    price_improvement_indicator: float = 0.0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def inc_router_historic_trading_volume(self, volume: float) -> None:
        """Add to the router's historic trading volume."""
        with self._lock:
            self.router_historic_trading_volume += volume

    def inc_market_historic_trading_volume(self, volume: float) -> None:
        """Add to the market's historic trading volume."""
        with self._lock:
            self.market_historic_trading_volume += volume

    def inc_immediate_trading_volume(self, volume: float) -> None:
        """Add to the immediate trading volume."""
        with self._lock:
            self.immediate_trading_volume += volume

    def inc_price_improvement_indicator(self, value: float) -> None:
        """Add to the price improvement indicator."""
        with self._lock:
            self.price_improvement_indicator += value

    def rank(self) -> float:
        """The weighted score."""
        return (
            self.venue_trading_cost * 0.15
            + self.router_historic_trading_volume * 0.2
            + self.market_historic_trading_volume * 0.1
            + self.price_improvement_indicator * 0.15
            + self.immediate_trading_volume * 0.4
        )