"""
Type definitions for the aggregation module.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ..core.catalog import is_canonical_context
from ..core.models import MutationOutcome


@dataclass
class AggregationResult:
    """
    Outcome of contextualising a batch of mutations against one sequence.

    Attributes:
        outcomes: Per-mutation ContextResult/ErrorResult, in input order
        counts: Count for each of the 192 canonical contexts, in catalog order
        sequence: The parsed reference sequence
    """

    outcomes: List[MutationOutcome] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)
    sequence: str = ''

    @property
    def sequence_length(self) -> int:
        return len(self.sequence)

    @property
    def has_outcomes(self) -> bool:
        return len(self.outcomes) > 0

    @property
    def n_success(self) -> int:
        """Mutations that parsed and validated."""
        return sum(1 for o in self.outcomes if not o.is_error)

    @property
    def n_errors(self) -> int:
        return sum(1 for o in self.outcomes if o.is_error)

    @property
    def n_counted(self) -> int:
        """Total of all context counts."""
        return sum(self.counts.values())

    @property
    def n_uncounted(self) -> int:
        """Successful mutations whose context is outside the catalog (edge 'N' flank or ref == alt)."""
        return sum(
            1 for o in self.outcomes
            if not o.is_error and not is_canonical_context(o.context)
        )

    @property
    def errors(self) -> List[MutationOutcome]:
        return [o for o in self.outcomes if o.is_error]
