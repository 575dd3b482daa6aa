"""Apply reconciliation decisions to the host repository."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sshm.domain.errors import ConflictError, NotFoundError, ValidationError

from .plan import ReconcileResult, ReconcileStrategy
from .policy import plan_candidate

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from sshm.domain.discovery import DiscoveryCandidate
    from sshm.domain.ports import HostRepository

    from .plan import ReconcileInstruction

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconciliationEngine:
    """Run candidates through the policy and persist the outcome.

    Validation and name conflicts drop the single candidate. Storage errors
    propagate so the caller's unit of work rolls the whole run back.
    """

    fallback_username: str
    discovery_tag: str
    resolve_address: Callable[[str], str]

    def reconcile(
        self,
        candidates: Iterable[DiscoveryCandidate],
        *,
        hosts: HostRepository,
    ) -> ReconcileResult:
        result = ReconcileResult()
        for candidate in candidates:
            instruction = plan_candidate(
                candidate,
                hosts.find_by_name(candidate.name),
                fallback_username=self.fallback_username,
                discovery_tag=self.discovery_tag,
                resolve_address=self.resolve_address,
            )
            try:
                self._apply(instruction, hosts)
            except (ValidationError, ConflictError, NotFoundError) as exc:
                log.debug("Skipping discovered host %s: %s", candidate.name, exc)
                result.record(ReconcileStrategy.SKIP)
                continue
            result.record(instruction.strategy)
        return result

    @staticmethod
    def _apply(instruction: ReconcileInstruction, hosts: HostRepository) -> None:
        profile = instruction.profile
        match instruction.strategy:
            case ReconcileStrategy.CREATE if profile is not None:
                hosts.add(profile)
                log.debug("Discovered new host %s", profile.name)
            case ReconcileStrategy.ENRICH if profile is not None:
                hosts.update(profile)
                log.debug("Enriched host %s: %s", profile.name, ", ".join(instruction.changes))
            case _:
                pass
