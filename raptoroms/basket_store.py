"""In-memory store of baskets and their waves."""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from raptoroms.basket import Basket
from raptoroms.basket_wave import BasketWave


class BasketStore:
    """Baskets keyed by id, with the waves created for each."""

    def __init__(self) -> None:
        self._baskets: Dict[int, Basket] = {}
        self._waves: Dict[int, List[BasketWave]] = {}

    def add_basket(self, basket: Basket) -> None:
        """Store ``basket`` under its id."""
        self._baskets[basket.basket_id] = basket

    def get_basket(self, basket_id: int) -> Optional[Basket]:
        """The basket with ``basket_id``, or None."""
        return self._baskets.get(basket_id)

    def add_wave(self, basket_id: int, wave: BasketWave) -> None:
        """Record ``wave`` as belonging to the basket ``basket_id``."""
        self._waves.setdefault(basket_id, []).append(wave)

    def waves(self, basket_id: int) -> List[BasketWave]:
        """The waves recorded for ``basket_id``, oldest first."""
        return list(self._waves.get(basket_id, []))

    def delete_basket(self, basket: Union[Basket, int]) -> None:
        """Remove a basket, given the basket or its id."""
        basket_id = basket.basket_id if isinstance(basket, Basket) else basket
        self._baskets.pop(basket_id, None)