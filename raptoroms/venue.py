"""A trading venue."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from raptoroms.order import Order
from raptoroms.venue_order_manager import VenueOrderManager
from raptoroms.venue_rank import VenueRank


@dataclass(eq=False)
class Venue:
    """A venue trading a set of symbols, with per-symbol rankings."""

    name: str
    available: bool
    symbols: List[str]
    execution_probability: float = 0.0
    avg_latency: int = 0
    rank_mapping: Dict[str, VenueRank] = field(default_factory=dict)
    order_manager: VenueOrderManager = field(default_factory=VenueOrderManager, repr=False)

    def accept_order(self, order: Order) -> None:
        """Hand ``order`` to the venue's books."""
        self.order_manager.accept_order(order)

    def ranking(self, symbol: str) -> VenueRank:
        """The ranking for ``symbol``; an empty one is created if there is none."""
        return self.rank_mapping.setdefault(symbol, VenueRank())

    def set_ranking(self, symbol: str, rank: VenueRank) -> None:
        """Set the ranking for ``symbol``."""
        self.rank_mapping[symbol] = rank

    def __str__(self) -> str:
        listed = "".join(f"{symbol}, " for symbol in self.symbols)
        return f" Venue [{self.name}, {int(self.available)}, {listed}]"