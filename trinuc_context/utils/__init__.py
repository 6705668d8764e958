"""
Utility modules for trinuc_context.
"""

from .sequence import (
    BYTE_ORDER_MARK,
    DNA_PATTERN,
    is_dna_sequence,
    parse_fasta,
    trim_text,
)

__all__ = [
    'BYTE_ORDER_MARK',
    'DNA_PATTERN',
    'is_dna_sequence',
    'parse_fasta',
    'trim_text',
]
