"""
trinuc_context - Trinucleotide context analysis of point mutations.

Places each mutation of a batch in its trinucleotide context on a
reference sequence and counts contexts over all 192 strand-aware
substitution types.
"""

__version__ = "0.1.0"

from .analysis import AggregationResult, aggregate
from .config import AnalysisConfig
from .core.catalog import ALL_CONTEXTS, generate_all_contexts
from .core.contextualise import contextualise_mutation
from .core.models import ContextResult, ErrorResult, MutationError, ParsedMutation
from .core.mutation import parse_mutation
from .io.output import render_tsv
from .utils.sequence import parse_fasta

__all__ = [
    "ALL_CONTEXTS",
    "generate_all_contexts",
    "parse_fasta",
    "parse_mutation",
    "contextualise_mutation",
    "aggregate",
    "render_tsv",
    "AggregationResult",
    "AnalysisConfig",
    "ParsedMutation",
    "ContextResult",
    "ErrorResult",
    "MutationError",
    "__version__",
]
