"""
Batch aggregation of mutation contexts.

Runs every mutation token through parsing and contextualisation and tallies
the resulting contexts over the full 192-context catalog.
"""

from typing import Dict, List
import logging

import pandas as pd

from ..core.catalog import ALL_CONTEXTS
from ..core.contextualise import contextualise_mutation
from ..core.models import ErrorResult, MutationError, MutationOutcome
from ..core.mutation import INVALID_FORMAT_MESSAGE, parse_mutation, split_mutation_tokens
from ..utils.sequence import parse_fasta
from .types import AggregationResult

logger = logging.getLogger(__name__)


def empty_counts() -> Dict[str, int]:
    """Return a count table with every canonical context set to zero."""
    return {context: 0 for context in ALL_CONTEXTS}


def aggregate(sequence_text: str, mutations_text: str) -> AggregationResult:
    """
    Contextualise a batch of mutations and count contexts.

    A pure function of its two inputs: identical inputs always give equal
    results.

    Args:
        sequence_text: Reference sequence, bare or FASTA formatted
        mutations_text: Comma-separated mutation tokens, e.g. 'G3C, A1T'

    Returns:
        AggregationResult with outcomes in input order, counts for all 192
        contexts and the parsed sequence. If the parsed sequence is empty,
        no tokens are processed and all counts are zero.

    Example:
        >>> result = aggregate(">seq1\\nACGTACGTAC", "G3C, A1T")
        >>> [o.context for o in result.outcomes]
        ['C[G>C]T', 'N[A>T]C']
        >>> result.counts['C[G>C]T']
        1
    """
    sequence = parse_fasta(sequence_text)
    counts = empty_counts()

    if not sequence:
        logger.warning("Reference sequence is empty; skipping mutations")
        return AggregationResult(outcomes=[], counts=counts, sequence=sequence)

    tokens = split_mutation_tokens(mutations_text)
    outcomes: List[MutationOutcome] = []

    for token in tokens:
        mutation = parse_mutation(token)
        if mutation is None:
            outcomes.append(ErrorResult(
                original=token,
                error=INVALID_FORMAT_MESSAGE,
                error_type=MutationError.MALFORMED_TOKEN,
            ))
            logger.debug(f"{token}: {INVALID_FORMAT_MESSAGE}")
            continue

        result = contextualise_mutation(sequence, mutation, original=token)
        outcomes.append(result)

        if result.is_error:
            logger.debug(f"{token}: {result.error}")
        elif result.context in counts:
            counts[result.context] += 1
        else:
            logger.debug(f"{token}: context {result.context} not counted")

    aggregated = AggregationResult(outcomes=outcomes, counts=counts, sequence=sequence)
    logger.info(
        f"Contextualised {len(tokens)} mutations against {len(sequence)} bp: "
        f"{aggregated.n_counted} counted, {aggregated.n_uncounted} uncounted, "
        f"{aggregated.n_errors} errors"
    )

    return aggregated


def outcomes_to_dataframe(outcomes: List[MutationOutcome]) -> pd.DataFrame:
    """
    Convert per-mutation outcomes to a DataFrame, one row per token.

    Example:
        >>> df = outcomes_to_dataframe(aggregate('ACGT', 'C2T, X1A').outcomes)
        >>> df['status'].tolist()
        ['ok', 'error']
    """
    columns = ['mutation', 'status', 'context', 'before', 'ref', 'alt', 'after', 'position', 'error']
    rows = [o.to_dict() for o in outcomes]
    df = pd.DataFrame(rows, columns=columns)
    df['position'] = df['position'].astype('Int64')
    return df


def counts_to_series(counts: Dict[str, int]) -> pd.Series:
    """Convert a count table to a Series indexed by all 192 contexts in catalog order."""
    series = pd.Series(
        [int(counts.get(context, 0)) for context in ALL_CONTEXTS],
        index=pd.Index(ALL_CONTEXTS, name='Context'),
        name='Count',
        dtype=int,
    )
    return series
