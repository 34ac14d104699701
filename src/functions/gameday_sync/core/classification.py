"""Injury bucket rules.

Rules are checked in order and the first match wins. Long-term rules come
before game-time rules, so a player listed as ``Injured Reserve`` with an
``Out`` designation lands in IR and nowhere else.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Tuple

from .contracts import Classification, InjuryBucket, NormalizedInjuryRecord

Rule = Callable[[str, str], bool]

CLASSIFICATION_RULES: Tuple[Tuple[InjuryBucket, Rule], ...] = (
    (InjuryBucket.IR, lambda status, designation: "injured reserve" in designation or "reserve" in status),
    (InjuryBucket.SUSPENDED, lambda status, designation: "suspension" in designation or "suspension" in status),
    (InjuryBucket.OUT, lambda status, designation: status == "out" or designation == "out"),
    (InjuryBucket.DOUBTFUL, lambda status, designation: designation == "doubtful"),
    (InjuryBucket.QUESTIONABLE, lambda status, designation: designation == "questionable"),
)


def classify(record: NormalizedInjuryRecord) -> Classification:
    """Place ``record`` in exactly one bucket, ``UNCLASSIFIED`` if no rule matches."""
    status = (record.status_text or "").lower()
    designation = (record.designation or "").lower()
    for bucket, rule in CLASSIFICATION_RULES:
        if rule(status, designation):
            return Classification(bucket, record)
    return Classification(InjuryBucket.UNCLASSIFIED, record)


def classify_all(records: Iterable[NormalizedInjuryRecord]) -> List[Classification]:
    return [classify(record) for record in records]
