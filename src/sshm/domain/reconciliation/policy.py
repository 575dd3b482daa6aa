"""Create/enrich/skip policy for discovery candidates.

Enrichment only ever fills gaps: a username is replaced only while it is still
the fallback, and an address only while it is empty.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from sshm.domain.model import HostProfile

from .plan import ReconcileInstruction, ReconcileStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from sshm.domain.discovery import DiscoveryCandidate


def describe_candidate(candidate: DiscoveryCandidate) -> str:
    if candidate.key_type:
        return f"Auto-detected from {candidate.source} ({candidate.key_type})"
    return f"Auto-detected from {candidate.source}"


def plan_candidate(
    candidate: DiscoveryCandidate,
    existing: HostProfile | None,
    *,
    fallback_username: str,
    discovery_tag: str,
    resolve_address: Callable[[str], str],
) -> ReconcileInstruction:
    """Decide how ``candidate`` relates to the profile stored under its name."""

    if existing is None:
        profile = HostProfile(
            name=candidate.name,
            hostname=candidate.hostname,
            username=candidate.username,
            port=candidate.port,
            ip_address=resolve_address(candidate.hostname) or None,
            description=describe_candidate(candidate),
            tags=discovery_tag,
        )
        return ReconcileInstruction(
            candidate=candidate,
            strategy=ReconcileStrategy.CREATE,
            profile=profile,
        )

    updates: dict[str, str] = {}
    if existing.username == fallback_username and candidate.username != fallback_username:
        updates["username"] = candidate.username
    if not existing.ip_address:
        address = resolve_address(existing.hostname)
        if address:
            updates["ip_address"] = address

    if not updates:
        return ReconcileInstruction(
            candidate=candidate,
            strategy=ReconcileStrategy.SKIP,
            reason="nothing to enrich",
        )
    return ReconcileInstruction(
        candidate=candidate,
        strategy=ReconcileStrategy.ENRICH,
        profile=replace(existing, **updates),
        changes=tuple(updates),
    )
