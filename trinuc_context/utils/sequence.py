"""
Sequence parsing utilities.

Reference text may be a bare sequence or FASTA formatted. Only the
sequence lines are kept.
"""

import re

# Regex to detect if string is a pure nucleotide sequence (IUPAC codes allowed)
DNA_PATTERN = re.compile(r'^[ACGTURYSWKMBDHVN]+$', re.IGNORECASE)

BYTE_ORDER_MARK = '\ufeff'


def trim_text(s: str) -> str:
    """Strip whitespace and byte order marks from both ends."""
    return s.strip().strip(BYTE_ORDER_MARK).strip()


def is_dna_sequence(s: str) -> bool:
    """Check if string is a pure DNA sequence (not a file path)."""
    return bool(s) and bool(DNA_PATTERN.match(s))


def parse_fasta(text: str) -> str:
    """
    Parse reference text into a single uppercase sequence.

    Every line starting with '>' (after trimming) is treated as a header and
    dropped, wherever it appears. All remaining lines are trimmed and
    concatenated, so multi-record input collapses into one sequence.
    Characters outside ACGT are kept as-is.

    Args:
        text: Raw sequence text, with or without FASTA headers

    Returns:
        The concatenated sequence (uppercase), empty if there is none

    Examples:
        >>> parse_fasta(">seq1\\nACGT\\nacgt")
        'ACGTACGT'
        >>> parse_fasta("\\ufeff  ggcc  ")
        'GGCC'
    """
    sequence = []
    for line in text.split('\n'):
        line = trim_text(line)
        if line.startswith('>'):
            continue
        sequence.append(line)
    return ''.join(sequence).upper()
