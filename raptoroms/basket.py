"""A basket of orders across several symbols for one account."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from raptoroms.enums import OrderSide, OrderType


@dataclass(eq=False)
class Basket:
    """Symbols with their quantities and sides, worked in waves."""

    symbols: List[str]
    account_id: str
    basket_id: int
    quantities: List[int]
    sides: List[OrderSide]
    order_types: List[OrderType] = field(default_factory=list)
    current_wave_number: int = 0
    total_traded: int = 0
    routed: int = 0

    def __post_init__(self) -> None:
        if not len(self.symbols) == len(self.quantities) == len(self.sides):
            raise ValueError("symbols, quantities and sides must have the same length")

    def leaves(self) -> int:
        """Shares of the whole basket not yet traded."""
        return sum(self.quantities) - self.total_traded

    def update_routed(self, shares: int) -> int:
        """Add ``shares`` to the routed total and return the new total."""
        self.routed += shares
        return self.routed

    def new_wave(self) -> int:
        """Advance to the next wave and return its number."""
        self.current_wave_number += 1
        return self.current_wave_number