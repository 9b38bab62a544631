"""Creates baskets and sends them out in waves."""

from __future__ import annotations

import itertools
from typing import Optional, Sequence

from raptoroms.basket import Basket
from raptoroms.basket_store import BasketStore
from raptoroms.basket_wave import BasketWave, WaveStatus
from raptoroms.configs import OrderConfig
from raptoroms.enums import AlgorithmType, BasketServerStatus, LotSizing, OrderSide, OrderType, Rounding


class BasketNotFoundError(LookupError):
    """Raised when a basket id is not known."""


class BasketServer:
    """Front end for basket trading."""

    def __init__(
        self,
        raptor,
        basket_db: Optional[BasketStore] = None,
        status: BasketServerStatus = BasketServerStatus.ACTIVE,
    ) -> None:
        self.raptor = raptor
        self.basket_db = basket_db if basket_db is not None else BasketStore()
        self.status = status
        self._ids = itertools.count()

    def create_tradable_basket(
        self,
        account_id: str,
        symbols: Sequence[str],
        quantities: Sequence[int],
        sides: Sequence[OrderSide],
    ) -> Basket:
        """Create and store a basket with the next id."""
        basket = Basket(list(symbols), account_id, next(self._ids), list(quantities), list(sides))
        self.basket_db.add_basket(basket)
        return basket

    def _basket(self, basket_id: int) -> Basket:
        basket = self.basket_db.get_basket(basket_id)
        if basket is None:
            raise BasketNotFoundError("Could not find basket!")
        return basket

    def create_wave(
        self,
        basket_id: int,
        percentage: float,
        order_config: Optional[OrderConfig],
        algorithm_type: AlgorithmType,
        prices: Sequence[float],
        order_types: Sequence[OrderType],
        lot_sizing: LotSizing,
        rounding: Rounding,
    ) -> BasketWave:
        """Create the basket's next wave, send it, and return it."""
        basket = self._basket(basket_id)
        wave = BasketWave(
            basket.current_wave_number + 1,
            percentage,
            order_config,
            algorithm_type,
            prices,
            order_types,
            self.raptor,
            rounding,
            lot_sizing,
        )
        basket.new_wave()
        self.basket_db.add_wave(basket_id, wave)
        wave.execute(basket)
        return wave

    def cancel_outstanding_orders(self, basket_id: int) -> None:
        """Cancel every wave of the basket that is neither cancelled nor executed."""
        done = WaveStatus.CANCELLED | WaveStatus.EXECUTED
        for wave in self.basket_db.waves(basket_id):
            if not wave.status_flags & done:
                wave.cancel()