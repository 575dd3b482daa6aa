from __future__ import annotations

from sshm.domain.discovery import AddressResolver, parse_known_hosts, prefer_ipv4
from tests.helpers.hosts import FakeLookup


def test_literal_addresses_pass_through_without_lookup() -> None:
    lookup = FakeLookup()
    resolver = AddressResolver(lookup=lookup)

    assert resolver.resolve("10.0.0.5") == "10.0.0.5"
    assert resolver.resolve("2001:db8::7") == "2001:db8::7"
    assert lookup.queries == []


def test_known_hosts_alias_is_used_before_lookup() -> None:
    lookup = FakeLookup(answers={"web.example.com": ["198.51.100.1"]})
    known_hosts = parse_known_hosts(["web.example.com,192.0.2.7 ssh-rsa AAAA"])
    resolver = AddressResolver(known_hosts=known_hosts, lookup=lookup)

    assert resolver.resolve("web.example.com") == "192.0.2.7"
    assert lookup.queries == []


def test_lookup_prefers_ipv4() -> None:
    lookup = FakeLookup(answers={"box": ["2001:db8::1", "192.0.2.1", "192.0.2.2"]})

    assert AddressResolver(lookup=lookup).resolve("box") == "192.0.2.1"


def test_lookup_failure_and_missing_lookup_give_empty_string() -> None:
    assert AddressResolver(lookup=FakeLookup()).resolve("nowhere") == ""
    assert AddressResolver().resolve("box") == ""
    assert AddressResolver().resolve("") == ""


def test_prefer_ipv4_falls_back_to_first_ipv6_and_skips_junk() -> None:
    assert prefer_ipv4(["junk", "2001:db8::1", "2001:db8::2"]) == "2001:db8::1"
    assert prefer_ipv4([]) == ""
