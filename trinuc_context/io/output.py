"""
Output generation for context counts and per-mutation results.
"""

from pathlib import Path
from typing import Dict, List
import logging

from ..analysis.aggregation import counts_to_series, outcomes_to_dataframe
from ..analysis.types import AggregationResult
from ..core.catalog import ALL_CONTEXTS, CONTEXT_INDEX
from ..core.models import MutationOutcome

logger = logging.getLogger(__name__)

TSV_HEADER = "Context\tCount"


def render_tsv(counts: Dict[str, int]) -> str:
    """
    Render context counts as a two-column TSV table.

    The header is followed by one row per canonical context in catalog order.
    Contexts missing from `counts` are written as 0. There is no trailing
    newline.

    Args:
        counts: Mapping of context string to count

    Returns:
        TSV text with 193 lines
    """
    lines = [TSV_HEADER]
    for context in ALL_CONTEXTS:
        lines.append(f"{context}\t{counts.get(context, 0)}")
    return '\n'.join(lines)


def write_counts_tsv(counts: Dict[str, int], output_path: Path) -> Path:
    """
    Write the 192-row context count table to a TSV file.

    Args:
        counts: Mapping of context string to count
        output_path: Path for output TSV

    Returns:
        Path to written file
    """
    series = counts_to_series(counts)
    series.to_frame().to_csv(output_path, sep='\t', lineterminator='\n')

    logger.info(f"Wrote {len(series)} context counts to {output_path}")

    return output_path


def write_outcomes_tsv(outcomes: List[MutationOutcome], output_path: Path) -> Path:
    """
    Write per-mutation results to TSV, one row per token in input order.

    Args:
        outcomes: ContextResult/ErrorResult list from aggregate()
        output_path: Path for output TSV

    Returns:
        Path to written file
    """
    df = outcomes_to_dataframe(outcomes)
    df.to_csv(output_path, sep='\t', index=False, lineterminator='\n')

    logger.info(f"Wrote {len(df)} mutation results to {output_path}")

    return output_path


def format_outcome(outcome: MutationOutcome) -> str:
    """Format one outcome as 'token -> context' or 'token -> error'."""
    if outcome.is_error:
        return f"{outcome.original} -> {outcome.error}"
    return f"{outcome.original} -> {outcome.context}"


def generate_summary_report(result: AggregationResult, output_path: Path) -> Path:
    """
    Generate a summary report in markdown format.

    Args:
        result: AggregationResult from aggregate()
        output_path: Path for output markdown file

    Returns:
        Path to written file
    """
    with open(output_path, 'w') as f:
        f.write("# Mutation Context Summary\n\n")

        f.write("## Overview\n\n")
        f.write(f"- **Parsed sequence length:** {result.sequence_length:,} bp\n")
        f.write(f"- **Mutations:** {len(result.outcomes)}\n")
        f.write(f"- **Counted:** {result.n_counted}\n")
        f.write(f"- **Uncounted (edge or non-canonical context):** {result.n_uncounted}\n")
        f.write(f"- **Failed:** {result.n_errors}\n\n")

        errors = result.errors
        if errors:
            f.write("## Failed Mutations\n\n")
            f.write("| Mutation | Error |\n")
            f.write("|----------|-------|\n")
            for e in errors:
                f.write(f"| {e.original} | {e.error} |\n")
            f.write("\n")

        observed = [(c, n) for c, n in result.counts.items() if n > 0]
        if observed:
            observed.sort(key=lambda item: (-item[1], CONTEXT_INDEX[item[0]]))
            f.write("## Observed Contexts\n\n")
            f.write("| Context | Count |\n")
            f.write("|---------|-------|\n")
            for context, count in observed:
                f.write(f"| {context} | {count} |\n")
            f.write("\n")

    logger.info(f"Wrote summary report to {output_path}")

    return output_path
