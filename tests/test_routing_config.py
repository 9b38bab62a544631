from raptoroms.enums import RoutingType
from raptoroms.routing_config import RoutingConfig, direct, sor


def test_sor_has_no_venue():
    config = sor(RoutingType.SPRAY)
    assert config.routing_type is RoutingType.SPRAY
    assert config.venue_name == ""


def test_direct_targets_venue():
    config = direct("DPa")
    assert config.routing_type is RoutingType.DIRECT
    assert config.venue_name == "DPa"


def test_configs_are_independent():
    first = sor(RoutingType.SPRAY)
    second = sor(RoutingType.SPRAY)
    first.venue_name = "DPb"
    assert second.venue_name == ""
    assert second == RoutingConfig(RoutingType.SPRAY)