"""
Data models for mutation contextualisation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Union


class MutationError(Enum):
    """Per-mutation failure categories."""
    MALFORMED_TOKEN = 'malformed_token'
    POSITION_OUT_OF_RANGE = 'position_out_of_range'
    REFERENCE_MISMATCH = 'reference_mismatch'


@dataclass(frozen=True)
class ParsedMutation:
    """
    A point mutation parsed from a token such as ``G123C``.

    Attributes:
        ref: Reference base (A, C, G or T)
        position: 1-based position in the reference sequence
        alt: Alternate base (A, C, G or T); may equal ref
        position_text: Digits as written, kept when the position is too
            long to convert (position is then a value past any sequence)
    """
    ref: str
    position: int
    alt: str
    position_text: str = field(default='', repr=False)

    @property
    def position_label(self) -> str:
        """Position for messages and display."""
        return self.position_text or str(self.position)

    def __str__(self) -> str:
        return f"{self.ref}{self.position_label}{self.alt}"


@dataclass(frozen=True)
class ContextResult:
    """A mutation that validated against the reference, with its flanks."""
    original: str
    before: str
    ref: str
    alt: str
    after: str
    position: int
    context: str

    @property
    def is_error(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat row for tabular output."""
        return {
            'mutation': self.original,
            'status': 'ok',
            'context': self.context,
            'before': self.before,
            'ref': self.ref,
            'alt': self.alt,
            'after': self.after,
            'position': self.position,
            'error': '',
        }


@dataclass(frozen=True)
class ErrorResult:
    """A mutation token that failed parsing or validation."""
    original: str
    error: str
    error_type: MutationError = MutationError.MALFORMED_TOKEN

    @property
    def is_error(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat row for tabular output."""
        return {
            'mutation': self.original,
            'status': 'error',
            'context': '',
            'before': '',
            'ref': '',
            'alt': '',
            'after': '',
            'position': None,
            'error': self.error,
        }


MutationOutcome = Union[ContextResult, ErrorResult]
