"""
I/O modules for trinuc_context.
"""

from .output import (
    TSV_HEADER,
    format_outcome,
    generate_summary_report,
    render_tsv,
    write_counts_tsv,
    write_outcomes_tsv,
)

__all__ = [
    'TSV_HEADER',
    'render_tsv',
    'format_outcome',
    'write_counts_tsv',
    'write_outcomes_tsv',
    'generate_summary_report',
]
