"""
Canonical catalog of strand-aware trinucleotide substitution contexts.

Contexts are written ``before[ref>alt]after``. With four bases at each flank
and twelve ordered substitutions there are 4 x 12 x 4 = 192 of them.
"""

from typing import Dict, List, Tuple

BASES = ('A', 'C', 'G', 'T')

# Flank used when a mutation sits at either end of the sequence
EDGE_BASE = 'N'


def format_context(before: str, ref: str, alt: str, after: str) -> str:
    """Format a single context string, e.g. ``C[G>C]T``."""
    return f"{before}[{ref}>{alt}]{after}"


def generate_all_contexts() -> List[str]:
    """
    Generate all 192 trinucleotide substitution contexts in canonical order.

    Order is before base (outer), reference base, alternate base, then after
    base, each iterating A, C, G, T and skipping alt == ref. This is also the
    row order of the TSV count table.

    Returns:
        List of 192 context strings

    Examples:
        >>> contexts = generate_all_contexts()
        >>> len(contexts)
        192
        >>> contexts[:2]
        ['A[A>C]A', 'A[A>C]C']
    """
    contexts = []
    for before in BASES:
        for ref in BASES:
            for alt in BASES:
                if alt == ref:
                    continue
                for after in BASES:
                    contexts.append(format_context(before, ref, alt, after))
    return contexts


ALL_CONTEXTS: Tuple[str, ...] = tuple(generate_all_contexts())

CONTEXT_INDEX: Dict[str, int] = {context: idx for idx, context in enumerate(ALL_CONTEXTS)}


def is_canonical_context(context: str) -> bool:
    """Check if a context string is one of the 192 catalog entries."""
    return context in CONTEXT_INDEX
