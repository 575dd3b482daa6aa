"""Collapse duplicate discovery candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sshm.domain.discovery.candidates import DiscoveryCandidate, IdentityKey


def merge_candidates(
    candidates: Iterable[DiscoveryCandidate],
    *,
    preferred_key_type: str,
) -> list[DiscoveryCandidate]:
    """Keep one candidate per identity key.

    A candidate with the preferred key type replaces an earlier one without
    it; otherwise the first seen wins. Output keeps first-seen key order.
    """

    merged: dict[IdentityKey, DiscoveryCandidate] = {}
    for candidate in candidates:
        key = candidate.identity_key
        existing = merged.get(key)
        if existing is None:
            merged[key] = candidate
        elif (
            candidate.key_type == preferred_key_type
            and existing.key_type != preferred_key_type
        ):
            merged[key] = candidate
    return list(merged.values())
