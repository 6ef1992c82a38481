"""Priority reconciliation for the client board.

Pure transformations from one invariant-satisfying board snapshot to the next:
callers load every record, call ``reconcile`` and persist what
``changed_records`` reports, all inside one unit of work.
"""

from __future__ import annotations

from .errors import InvalidStatusError, ReconciliationError, UnknownTargetError
from .lanes import lane_members, lane_violations, lanes_of, renumber, splice
from .reconcile import ReconcileCase, changed_records, classify, reconcile

__all__ = [
    "InvalidStatusError",
    "ReconcileCase",
    "ReconciliationError",
    "UnknownTargetError",
    "changed_records",
    "classify",
    "lane_members",
    "lane_violations",
    "lanes_of",
    "reconcile",
    "renumber",
    "splice",
]
