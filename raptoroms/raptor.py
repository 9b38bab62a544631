"""Entry point that sends orders by their routing configuration."""

from __future__ import annotations

from raptoroms.enums import RoutingType
from raptoroms.order import Order
from raptoroms.routers import SprayRouter
from raptoroms.routing_config import RoutingConfig
from raptoroms.venue_manager import VenueManager


class InvalidRouteError(Exception):
    """Raised for a routing type that cannot be served."""


class Raptor:
    """Sends orders directly to a venue or sprays them across venues."""

    def __init__(self, venue_manager: VenueManager) -> None:
        self.venue_manager = venue_manager
        self.spray_router = SprayRouter(venue_manager)

    def send(self, routing_config: RoutingConfig, order: Order) -> None:
        """Send ``order`` as ``routing_config`` says."""
        if routing_config.routing_type is RoutingType.DIRECT:
            self.venue_manager.send_order(routing_config.venue_name, order)
        elif routing_config.routing_type is RoutingType.SPRAY:
            self.spray_router.route(order)
        else:
            raise InvalidRouteError("Invalid routing type!")