"""
Core contextualisation modules for trinuc_context.
"""

from .catalog import (
    ALL_CONTEXTS,
    BASES,
    CONTEXT_INDEX,
    EDGE_BASE,
    format_context,
    generate_all_contexts,
    is_canonical_context,
)
from .contextualise import contextualise_mutation, get_flanking_bases
from .models import (
    ContextResult,
    ErrorResult,
    MutationError,
    MutationOutcome,
    ParsedMutation,
)
from .mutation import (
    INVALID_FORMAT_MESSAGE,
    MUTATION_PATTERN,
    parse_mutation,
    split_mutation_tokens,
)

__all__ = [
    # Catalog
    'ALL_CONTEXTS',
    'BASES',
    'CONTEXT_INDEX',
    'EDGE_BASE',
    'format_context',
    'generate_all_contexts',
    'is_canonical_context',
    # Models
    'ParsedMutation',
    'ContextResult',
    'ErrorResult',
    'MutationError',
    'MutationOutcome',
    # Parsing
    'MUTATION_PATTERN',
    'INVALID_FORMAT_MESSAGE',
    'parse_mutation',
    'split_mutation_tokens',
    # Contextualisation
    'contextualise_mutation',
    'get_flanking_bases',
]
