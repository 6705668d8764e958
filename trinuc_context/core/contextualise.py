"""
Trinucleotide context extraction for point mutations.

Validates a parsed mutation against the reference sequence and reads the
flanking bases around the mutated site. Failures are returned as
ErrorResult values so a batch can carry on past them.
"""

from .catalog import EDGE_BASE, format_context
from .models import (
    ContextResult,
    ErrorResult,
    MutationError,
    MutationOutcome,
    ParsedMutation,
)


def get_flanking_bases(sequence: str, idx: int) -> tuple:
    """
    Get the bases either side of a 0-based index.

    Positions at the ends of the sequence get 'N' for the missing flank.

    Returns:
        (before, after) tuple
    """
    before = sequence[idx - 1] if idx > 0 else EDGE_BASE
    after = sequence[idx + 1] if idx < len(sequence) - 1 else EDGE_BASE
    return before, after


def contextualise_mutation(
    sequence: str,
    mutation: ParsedMutation,
    original: str = '',
) -> MutationOutcome:
    """
    Derive the trinucleotide context of a mutation.

    Args:
        sequence: Parsed reference sequence (uppercase)
        mutation: Mutation with a 1-based position
        original: Original token text, attached to the result

    Returns:
        ContextResult if the position is in range and the reference base
        matches, otherwise ErrorResult with the reason

    Examples:
        >>> contextualise_mutation('ACGTACGTAC', ParsedMutation('G', 3, 'C')).context
        'C[G>C]T'
        >>> contextualise_mutation('ACGTACGTAC', ParsedMutation('A', 1, 'T')).context
        'N[A>T]C'
    """
    original = original or str(mutation)
    idx = mutation.position - 1

    if idx < 0 or idx >= len(sequence):
        return ErrorResult(
            original=original,
            error=f"Position {mutation.position_label} out of range (sequence length: {len(sequence)})",
            error_type=MutationError.POSITION_OUT_OF_RANGE,
        )

    actual_base = sequence[idx]
    if actual_base != mutation.ref:
        return ErrorResult(
            original=original,
            error=(
                f"Reference mismatch at position {mutation.position_label}: "
                f"expected {mutation.ref}, found {actual_base}"
            ),
            error_type=MutationError.REFERENCE_MISMATCH,
        )

    before, after = get_flanking_bases(sequence, idx)

    return ContextResult(
        original=original,
        before=before,
        ref=mutation.ref,
        alt=mutation.alt,
        after=after,
        position=mutation.position,
        context=format_context(before, mutation.ref, mutation.alt, after),
    )
