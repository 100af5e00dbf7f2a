"""Single channel for the non-fatal problems found while building credits.

Unknown fragment kinds, records the classifier cannot place and outcome
events without a season are reported here. None of them stops the batch.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

UNRECOGNIZED_FRAGMENT_KIND = "UNRECOGNIZED_FRAGMENT_KIND"
UNCLASSIFIABLE_RECORD = "UNCLASSIFIABLE_RECORD"
MISSING_SEASON = "MISSING_SEASON"


@dataclass
class Diagnostic:
    code: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)


class Diagnostics:
    """Collects diagnostics for one run and logs each as it arrives."""

    def __init__(self):
        self.entries: List[Diagnostic] = []

    def report(self, code: str, message: str, **context: Any) -> Diagnostic:
        entry = Diagnostic(code=code, message=message, context=context)
        self.entries.append(entry)
        logger.warning(f"[{code}] {message} {context}")
        return entry

    def by_code(self, code: str) -> List[Diagnostic]:
        return [e for e in self.entries if e.code == code]

    def summary(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for e in self.entries:
            counts[e.code] = counts.get(e.code, 0) + 1
        return counts

    def __len__(self) -> int:
        return len(self.entries)
