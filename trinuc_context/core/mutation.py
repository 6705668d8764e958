"""
Mutation token parsing.

Tokens have the form <base><position><base>, e.g. ``G123C``, with a
1-based position. Matching is case-insensitive.
"""

import re
import sys
from typing import List, Optional

from ..utils.sequence import trim_text
from .models import ParsedMutation

MUTATION_PATTERN = re.compile(r'([ACGT])([0-9]+)([ACGT])')

INVALID_FORMAT_MESSAGE = "Invalid mutation format"

# Longer digit runs are past the end of any sequence and are not converted
MAX_POSITION_DIGITS = 18
OVERFLOW_POSITION = sys.maxsize


def parse_mutation(token: str) -> Optional[ParsedMutation]:
    """
    Parse a single mutation token.

    Args:
        token: Raw token such as 'G123C' or ' g123c '

    Returns:
        ParsedMutation, or None if the token does not match the grammar.
        Positions longer than MAX_POSITION_DIGITS digits get
        OVERFLOW_POSITION, with the digits kept in position_text.

    Examples:
        >>> parse_mutation('g12t')
        ParsedMutation(ref='G', position=12, alt='T')
        >>> parse_mutation('GA12T') is None
        True
    """
    match = MUTATION_PATTERN.fullmatch(trim_text(token).upper())
    if not match:
        return None

    ref, digits, alt = match.groups()
    significant = digits.lstrip('0')
    if len(significant) > MAX_POSITION_DIGITS:
        return ParsedMutation(ref=ref, position=OVERFLOW_POSITION, alt=alt, position_text=significant)
    return ParsedMutation(ref=ref, position=int(significant or '0'), alt=alt)


def split_mutation_tokens(text: str) -> List[str]:
    """Split comma-separated mutation text into trimmed, non-empty tokens (order kept)."""
    tokens = []
    for piece in text.split(','):
        piece = trim_text(piece)
        if piece:
            tokens.append(piece)
    return tokens
