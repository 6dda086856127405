"""Tests for port classification and adapter name resolution."""

import logging

import pytest

from edge_netcore.config import settings
from edge_netcore.core.classifier import (
    adapter_to_ifname,
    is_free_management_port,
    is_management_port,
    is_port,
    lookup_management_port,
    report_ports,
    resolve_adapter_name,
)
from edge_netcore.core.errors import PortNotFound
from edge_netcore.schemas import DevicePortConfigVersion

from conftest import make_port, make_status


def test_is_port_matches_logical_and_interface_names(mixed_status):
    assert is_port(mixed_status, "eth2")
    assert is_port(mixed_status, "apps")
    assert not is_port(mixed_status, "eth9")


def test_matching_is_case_sensitive(mixed_status):
    assert not is_port(mixed_status, "ETH0")
    assert not is_port(mixed_status, "Wired")


def test_empty_name_matches_nothing():
    """A port without a logical name must not be found by an empty name."""
    status = make_status(make_port("eth0", ["10.0.0.5"]))
    assert not is_port(status, "")
    assert lookup_management_port(status, "") is None
    assert not resolve_adapter_name(status, "").resolved


def test_management_flag_honoured_from_dpc_is_mgmt(mixed_status):
    assert is_management_port(mixed_status, "eth0")
    assert is_management_port(mixed_status, "cell")
    assert not is_management_port(mixed_status, "eth2")
    assert not is_management_port(mixed_status, "apps")


@pytest.mark.parametrize("is_mgmt", [True, False])
def test_every_port_is_management_before_dpc_is_mgmt(is_mgmt):
    """
    Configurations produced before the IsMgmt flag existed.

    The flag is ignored and every declared port is a management port.
    """
    status = make_status(
        make_port("eth0", is_mgmt=is_mgmt),
        make_port("eth1", name="lte", is_mgmt=is_mgmt),
        version=DevicePortConfigVersion.DPC_INITIAL,
    )
    assert is_management_port(status, "eth0")
    assert is_management_port(status, "lte")
    assert lookup_management_port(status, "eth1").if_name == "eth1"


def test_exactly_flagged_ports_are_management_at_dpc_is_mgmt():
    ports = [
        make_port("eth0", is_mgmt=True),
        make_port("eth1", is_mgmt=False),
        make_port("eth2", is_mgmt=True),
    ]
    status = make_status(*ports)
    assert [p.if_name for p in ports if is_management_port(status, p.if_name)] == ["eth0", "eth2"]


def test_free_management_port(mixed_status):
    assert is_free_management_port(mixed_status, "wired")
    assert not is_free_management_port(mixed_status, "wwan0")
    # eth2 is free but not a management port
    assert not is_free_management_port(mixed_status, "eth2")
    assert not is_free_management_port(mixed_status, "missing")


def test_lookup_management_port_returns_record_or_none(mixed_status):
    port = lookup_management_port(mixed_status, "cell")
    assert port is not None
    assert port.if_name == "wwan0"
    assert lookup_management_port(mixed_status, "eth2") is None
    assert lookup_management_port(mixed_status, "nope") is None


def test_lookup_is_first_match_wins_on_collision(caplog):
    """Duplicate names are logged, not rejected, and the first record wins."""
    with caplog.at_level(logging.WARNING):
        status = make_status(
            make_port("eth0", ["10.0.0.5"], name="uplink"),
            make_port("eth1", ["10.0.1.5"], name="uplink"),
        )
    assert "Duplicate logical port name uplink" in caplog.text
    assert lookup_management_port(status, "uplink").if_name == "eth0"
    assert resolve_adapter_name(status, "uplink").if_name == "eth0"


def test_lookup_skips_non_management_match_and_continues():
    status = make_status(
        make_port("eth0", name="shared", is_mgmt=False),
        make_port("eth1", name="shared", is_mgmt=True),
    )
    assert lookup_management_port(status, "shared").if_name == "eth1"


def test_resolve_logical_name(mixed_status):
    resolution = resolve_adapter_name(mixed_status, "cell")
    assert resolution.if_name == "wwan0"
    assert resolution.matched_by == "name"
    assert resolution.resolved


def test_resolve_prefers_logical_name_over_interface_name():
    """A logical name equal to another port's interface name resolves by logical name."""
    status = make_status(
        make_port("eth0", name="eth1"),
        make_port("eth1", name="lte"),
    )
    assert resolve_adapter_name(status, "eth1").if_name == "eth0"


def test_resolve_interface_name(mixed_status):
    resolution = resolve_adapter_name(mixed_status, "eth3")
    assert resolution.if_name == "eth3"
    assert resolution.matched_by == "if_name"


def test_resolve_unknown_name_passes_through(mixed_status):
    resolution = resolve_adapter_name(mixed_status, "uplink")
    assert resolution.if_name == "uplink"
    assert resolution.matched_by is None
    assert not resolution.resolved


def test_adapter_to_ifname_permissive_and_strict(mixed_status):
    assert adapter_to_ifname(mixed_status, "wired") == "eth0"
    assert adapter_to_ifname(mixed_status, "bogus", strict=False) == "bogus"
    with pytest.raises(PortNotFound) as excinfo:
        adapter_to_ifname(mixed_status, "bogus", strict=True)
    assert excinfo.value.error_code == "PORT_NOT_FOUND"
    assert excinfo.value.name == "bogus"


def test_adapter_to_ifname_strict_default_from_settings(mixed_status, monkeypatch):
    monkeypatch.setattr(settings, "STRICT_ADAPTER_RESOLUTION", True)
    with pytest.raises(PortNotFound):
        adapter_to_ifname(mixed_status, "bogus")
    assert adapter_to_ifname(mixed_status, "cell") == "wwan0"


def test_report_ports_lists_extra_then_logical_names(two_uplinks):
    assert report_ports(two_uplinks) == ["dbo1x0", "uplink0", "uplink1"]


def test_classifier_does_not_mutate_status(mixed_status):
    before = mixed_status.model_dump()
    is_port(mixed_status, "eth0")
    lookup_management_port(mixed_status, "cell")
    resolve_adapter_name(mixed_status, "backup")
    assert mixed_status.model_dump() == before
