"""Tests for management port listing, address selection and reverse lookup."""

from ipaddress import ip_address

import pytest

from edge_netcore.core.errors import NoAddressAvailable
from edge_netcore.core.selector import (
    count_local_addr_any_no_link_local,
    count_local_addr_free_no_link_local,
    eligible_addresses,
    list_management_ports,
    local_addr_any,
    local_addr_any_no_link_local,
    local_addr_free_no_link_local,
    management_ports_any,
    management_ports_free,
    management_ports_free_no_link_local,
    management_ports_non_free,
    reverse_lookup_port,
    rotate,
    select_address,
)
from edge_netcore.schemas import DeviceNetworkStatus, DevicePortConfigVersion

from conftest import make_port, make_status


# === rotate ===

@pytest.mark.parametrize("amount,expected", [
    (0, ["a", "b", "c"]),
    (1, ["b", "c", "a"]),
    (2, ["c", "a", "b"]),
    (3, ["a", "b", "c"]),
    (7, ["b", "c", "a"]),
])
def test_rotate_left_modulo_length(amount, expected):
    assert rotate(["a", "b", "c"], amount) == expected


def test_negative_rotation_goes_right():
    assert rotate(["a", "b", "c"], -1) == ["c", "a", "b"]


def test_rotate_empty_never_fails():
    assert rotate([], 0) == []
    assert rotate([], 5) == []


def test_rotation_inverse_restores_order():
    seq = ["eth0", "eth1", "wlan0", "wwan0"]
    for k in range(len(seq) * 2):
        assert rotate(rotate(seq, k), len(seq) - (k % len(seq))) == seq


# === Management ports ===

def test_list_management_ports_scenario(two_uplinks):
    assert list_management_ports(two_uplinks, 0) == ["eth0", "eth1"]
    assert list_management_ports(two_uplinks, 1) == ["eth1", "eth0"]
    assert management_ports_any(two_uplinks, 2) == ["eth0", "eth1"]


def test_free_and_non_free_filters(mixed_status):
    assert management_ports_any(mixed_status) == ["eth0", "wwan0", "eth3"]
    assert management_ports_free(mixed_status) == ["eth0", "eth3"]
    assert management_ports_free(mixed_status, 1) == ["eth3", "eth0"]
    assert management_ports_non_free(mixed_status) == ["wwan0"]


def test_both_filters_rejected(mixed_status):
    with pytest.raises(ValueError):
        list_management_ports(mixed_status, free_only=True, non_free_only=True)


def test_management_ports_ignore_flag_before_dpc_is_mgmt():
    status = make_status(
        make_port("eth0", is_mgmt=False),
        make_port("eth1", is_mgmt=False),
        version=DevicePortConfigVersion.DPC_INITIAL,
    )
    assert management_ports_any(status) == ["eth0", "eth1"]


def test_management_ports_on_empty_status():
    status = DeviceNetworkStatus()
    assert management_ports_any(status) == []
    assert management_ports_free(status, 3) == []


# === Address selection ===

def test_select_address_scenario(two_uplinks):
    assert select_address(two_uplinks, 0, "", free_only=False, include_link_local=False) == ip_address("10.0.0.5")
    assert select_address(two_uplinks, 1) == ip_address("10.0.1.5")
    assert select_address(two_uplinks, 2) == ip_address("10.0.0.5")


def test_free_addresses_listed_first_regardless_of_port_order():
    status = make_status(
        make_port("wwan0", ["100.64.0.7"], free=False),
        make_port("eth0", ["10.0.0.5", "10.0.0.6"], free=True),
    )
    assert eligible_addresses(status) == [
        ip_address("10.0.0.5"),
        ip_address("10.0.0.6"),
        ip_address("100.64.0.7"),
    ]
    assert local_addr_any_no_link_local(status, 0) == ip_address("10.0.0.5")


def test_pick_index_round_robins_over_all_eligible(mixed_status):
    expected = [ip_address("10.0.0.5"), ip_address("100.64.0.7")]
    picked = [local_addr_any_no_link_local(mixed_status, i) for i in range(4)]
    assert picked == expected * 2


def test_link_local_excluded_unless_requested(mixed_status):
    addrs = eligible_addresses(mixed_status)
    assert ip_address("fe80::1") not in addrs
    assert ip_address("169.254.3.3") not in addrs

    with_ll = eligible_addresses(mixed_status, include_link_local=True)
    assert with_ll == [
        ip_address("10.0.0.5"),
        ip_address("fe80::1"),
        ip_address("169.254.3.3"),
        ip_address("100.64.0.7"),
    ]
    assert local_addr_any(mixed_status, 2) == ip_address("169.254.3.3")


def test_non_management_addresses_never_selected(mixed_status):
    for i in range(10):
        assert local_addr_any(mixed_status, i) != ip_address("192.168.10.1")


def test_free_only_selection(mixed_status):
    assert local_addr_free_no_link_local(mixed_status, 0) == ip_address("10.0.0.5")
    assert local_addr_free_no_link_local(mixed_status, 5) == ip_address("10.0.0.5")


def test_restrict_to_port_by_logical_or_interface_name(mixed_status):
    assert local_addr_any_no_link_local(mixed_status, 0, "cell") == ip_address("100.64.0.7")
    assert local_addr_any_no_link_local(mixed_status, 0, "wwan0") == ip_address("100.64.0.7")
    assert local_addr_any(mixed_status, 1, "wired") == ip_address("fe80::1")


def test_restrict_to_non_management_port_yields_nothing(mixed_status):
    with pytest.raises(NoAddressAvailable):
        local_addr_any(mixed_status, 0, "apps")


def test_no_address_available_on_empty_status():
    status = DeviceNetworkStatus()
    with pytest.raises(NoAddressAvailable) as excinfo:
        select_address(status, 0)
    assert excinfo.value.error_code == "NO_ADDRESS_AVAILABLE"
    assert str(excinfo.value) == "No good IP address"


def test_no_address_when_only_link_local():
    status = make_status(make_port("eth3", ["169.254.3.3", "fe80::2"], free=True))
    with pytest.raises(NoAddressAvailable):
        local_addr_free_no_link_local(status)
    assert local_addr_any(status, 1) == ip_address("fe80::2")


def test_ipv4_mapped_link_local_excluded():
    status = make_status(make_port("eth0", ["::ffff:169.254.3.3"], free=True))
    assert eligible_addresses(status) == []
    with pytest.raises(NoAddressAvailable):
        local_addr_any_no_link_local(status)
    assert count_local_addr_any_no_link_local(status) == 0
    assert management_ports_free_no_link_local(status) == []
    assert local_addr_any(status) == ip_address("::ffff:169.254.3.3")


def test_ipv4_mapped_routable_address_kept():
    status = make_status(make_port("eth0", ["::ffff:10.0.0.5"], free=True))
    assert local_addr_free_no_link_local(status) == ip_address("::ffff:10.0.0.5")


def test_unknown_port_restriction_yields_nothing(mixed_status):
    with pytest.raises(NoAddressAvailable) as excinfo:
        local_addr_any(mixed_status, 0, "eth9")
    assert excinfo.value.details["port"] == "eth9"


# === Counts ===

def test_counts(mixed_status):
    assert count_local_addr_any_no_link_local(mixed_status) == 2
    assert count_local_addr_any_no_link_local(mixed_status, "cell") == 1
    assert count_local_addr_any_no_link_local(mixed_status, "backup") == 0
    assert count_local_addr_free_no_link_local(mixed_status) == 1


def test_counts_on_empty_status():
    status = DeviceNetworkStatus()
    assert count_local_addr_any_no_link_local(status) == 0
    assert count_local_addr_free_no_link_local(status) == 0


def test_management_ports_free_no_link_local(mixed_status):
    ports = management_ports_free_no_link_local(mixed_status)
    assert [p.if_name for p in ports] == ["eth0"]
    assert ports[0].name == "wired"
    assert ports[0].addrs == [ip_address("10.0.0.5")]
    # The snapshot keeps its link-local address
    assert len(mixed_status.ports[0].addr_info_list) == 2


# === Reverse lookup ===

def test_reverse_lookup_port(mixed_status):
    assert reverse_lookup_port(mixed_status, "100.64.0.7") == "wwan0"
    assert reverse_lookup_port(mixed_status, ip_address("fe80::1")) == "eth0"


def test_reverse_lookup_ipv4_mapped_ipv6(mixed_status):
    assert reverse_lookup_port(mixed_status, "::ffff:10.0.0.5") == "eth0"


def test_reverse_lookup_only_management_ports(mixed_status):
    assert reverse_lookup_port(mixed_status, "192.168.10.1") is None


def test_reverse_lookup_unknown_address(mixed_status):
    assert reverse_lookup_port(mixed_status, "203.0.113.9") is None
    assert reverse_lookup_port(DeviceNetworkStatus(), "10.0.0.5") is None


def test_reverse_lookup_rejects_garbage(mixed_status):
    with pytest.raises(ValueError):
        reverse_lookup_port(mixed_status, "not-an-ip")
