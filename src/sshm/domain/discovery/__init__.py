"""Evidence parsing and candidate merging for host discovery."""

from __future__ import annotations

from .addresses import AddressResolver, is_ip_literal, prefer_ipv4
from .candidates import DiscoveryCandidate, IdentityKey, candidate_name
from .known_hosts import (
    KnownHostEntry,
    candidates_from_known_hosts,
    line_refers_to,
    parse_known_hosts,
    parse_known_hosts_line,
)
from .merge import merge_candidates
from .pipeline import DiscoveryBatch, DiscoverySettings, discover_candidates
from .shell_history import ShellHistory, SshInvocation, hostnames_match, parse_ssh_invocation
from .ssh_config import SshClientConfig, SshConfigStanza
from .usernames import UsernameResolver

__all__ = [
    "AddressResolver",
    "DiscoveryBatch",
    "DiscoveryCandidate",
    "DiscoverySettings",
    "IdentityKey",
    "KnownHostEntry",
    "ShellHistory",
    "SshClientConfig",
    "SshConfigStanza",
    "SshInvocation",
    "UsernameResolver",
    "candidate_name",
    "candidates_from_known_hosts",
    "discover_candidates",
    "hostnames_match",
    "is_ip_literal",
    "line_refers_to",
    "merge_candidates",
    "parse_known_hosts",
    "parse_known_hosts_line",
    "parse_ssh_invocation",
    "prefer_ipv4",
]
