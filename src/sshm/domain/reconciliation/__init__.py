"""Reconciliation of discovery candidates against the stored directory.

Flow per merged candidate:
1) look up the stored profile with the candidate's name
2) decide create, enrich or skip (``policy``)
3) persist through the host repository (``engine``)
"""

from __future__ import annotations

from .engine import ReconciliationEngine
from .plan import ReconcileInstruction, ReconcileResult, ReconcileStrategy
from .policy import describe_candidate, plan_candidate

__all__ = [
    "ReconcileInstruction",
    "ReconcileResult",
    "ReconcileStrategy",
    "ReconciliationEngine",
    "describe_candidate",
    "plan_candidate",
]
