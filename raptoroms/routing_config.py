"""How an order is to be routed."""

from __future__ import annotations

from dataclasses import dataclass

from raptoroms.enums import RoutingType


@dataclass
class RoutingConfig:
    """Routing type and, for direct routing, the target venue."""

    routing_type: RoutingType
    venue_name: str = ""


def sor(routing_type: RoutingType) -> RoutingConfig:
    """Smart-order-routing configuration of the given type."""
    return RoutingConfig(routing_type, "")


def direct(venue_name: str) -> RoutingConfig:
    """Configuration that routes straight to one venue."""
    return RoutingConfig(RoutingType.DIRECT, venue_name)