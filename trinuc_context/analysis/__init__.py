"""
Aggregation of mutation contexts over a batch of tokens.

Example:
    >>> from trinuc_context.analysis import aggregate
    >>> result = aggregate(">seq1\\nACGTACGTAC", "G3C, G5C")
    >>> result.n_counted, result.n_errors
    (1, 1)
"""

from .aggregation import (
    aggregate,
    counts_to_series,
    empty_counts,
    outcomes_to_dataframe,
)
from .types import AggregationResult

__all__ = [
    'AggregationResult',
    'aggregate',
    'empty_counts',
    'outcomes_to_dataframe',
    'counts_to_series',
]
