"""Plan types shared by the reconciliation policy and engine.

The policy decides, the engine applies. Instructions carry the profile to
persist so the engine never re-derives a decision.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sshm.domain.discovery import DiscoveryCandidate
    from sshm.domain.model import HostProfile


class ReconcileStrategy(StrEnum):
    CREATE = "create"
    ENRICH = "enrich"
    SKIP = "skip"


@dataclass(slots=True, kw_only=True)
class ReconcileInstruction:
    """Decision for one merged candidate.

    ``profile`` is the new profile for ``CREATE`` and the enriched copy of the
    stored profile for ``ENRICH``; ``changes`` names the fields enrichment set.
    """

    candidate: DiscoveryCandidate
    strategy: ReconcileStrategy
    profile: HostProfile | None = None
    changes: tuple[str, ...] = ()
    reason: str | None = None


@dataclass(slots=True)
class ReconcileResult:
    """Counts for one reconciliation run."""

    created: int = 0
    enriched: int = 0
    skipped: int = 0

    def record(self, strategy: ReconcileStrategy) -> None:
        match strategy:
            case ReconcileStrategy.CREATE:
                self.created += 1
            case ReconcileStrategy.ENRICH:
                self.enriched += 1
            case ReconcileStrategy.SKIP:
                self.skipped += 1
