"""Keeps the set of venues and ranks them per symbol."""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterable, List

from raptoroms.execution import Execution
from raptoroms.order import Order
from raptoroms.venue import Venue

log = logging.getLogger(__name__)


class VenueUnavailableError(Exception):
    """Raised when an order is sent directly to a venue that is not available."""


class VenueManager:
    """Venues indexed by the symbols they trade."""

    def __init__(self, venues: Iterable[Venue]) -> None:
        self._venues: List[Venue] = []
        self._symbol_venues: Dict[str, List[Venue]] = {}
        for venue in venues:
            log.info("v:%s", venue.name)
            self._index(venue)

    def _index(self, venue: Venue) -> None:
        self._venues.append(venue)
        for symbol in venue.symbols:
            log.info("Adding to symbol:%s", symbol)
            self._symbol_venues.setdefault(symbol, []).append(venue)

    def add_venue(self, venue: Venue) -> None:
        """Add ``venue`` and make it available for its symbols."""
        log.info("adding venue:%s", venue.name)
        self._index(venue)

    def remove_venue(self, venue: Venue) -> None:
        """Remove every venue with the same name as ``venue``."""
        name = venue.name
        log.info("removing venue:%s", name)
        self._venues = [v for v in self._venues if v.name != name]
        for symbol, listed in self._symbol_venues.items():
            self._symbol_venues[symbol] = [v for v in listed if v.name != name]
        log.info("Removed venue: %s", name)

    def venues(self, symbol: str) -> List[Venue]:
        """Venues for ``symbol``, each carrying its share of the total rank as execution probability."""
        listed = self._symbol_venues.get(symbol, [])
        if not listed:
            return []
        ranks = [venue.ranking(symbol).rank() for venue in listed]
        total = sum(ranks)
        return [
            dataclasses.replace(venue, execution_probability=rank / total if total else 0.0)
            for venue, rank in zip(listed, ranks)
        ]

    def send_order(self, venue_name: str, order: Order) -> None:
        """Send ``order`` straight to the named venue trading its symbol."""
        for venue in self.venues(order.symbol):
            if venue.name == venue_name:
                if not venue.available:
                    raise VenueUnavailableError(f"venue {venue_name} is not available")
                venue.accept_order(order)
                log.info("Order sent to venue:%s", venue.name)
                return

    def process_exec(self, execution: Execution) -> None:
        """Record an incoming execution report."""
        log.info("Received exec:%s", execution.exec_id)