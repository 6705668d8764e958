"""
Configuration and input resolution for trinuc_context.
"""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
import yaml

from .utils.sequence import is_dna_sequence, parse_fasta, trim_text


def parse_sequence_input(value: str) -> str:
    """
    Parse sequence input - can be either a DNA string or a FASTA file path.

    Args:
        value: Either a DNA sequence string or path to a FASTA file

    Returns:
        The DNA sequence (uppercase)

    Examples:
        >>> parse_sequence_input("acgtacgt")
        'ACGTACGT'
        >>> parse_sequence_input("reference.fasta")
        'ACGT...'  # contents of file
    """
    value = trim_text(value)
    if not value:
        return ''

    # Check if it's a DNA sequence
    if is_dna_sequence(value):
        return value.upper()

    # Otherwise treat as file path
    if not os.path.isfile(value):
        raise ValueError(f"File not found: {value}")

    return load_fasta(Path(value))


def parse_mutations_input(value: str) -> str:
    """
    Parse mutations input - either comma-separated tokens or a file path.

    A file may list mutations comma-separated, one per line, or both;
    lines are joined with commas.

    Returns:
        Comma-separated mutation text
    """
    path = value.strip()
    if path and os.path.isfile(path):
        with open(path, encoding='utf-8-sig') as f:
            return ','.join(trim_text(line) for line in f)
    return value


def load_fasta(path: Path) -> str:
    """Load sequence from FASTA file. All header lines are dropped and records concatenated."""
    with open(path, encoding='utf-8-sig') as f:
        return parse_fasta(f.read())


@dataclass
class AnalysisConfig:
    """Full analysis configuration."""
    reference: str  # DNA sequence or FASTA path
    mutations: str = ''  # Comma-separated tokens or path to a text file

    # Outputs
    output_tsv: Optional[Path] = None
    outcomes_tsv: Optional[Path] = None
    report: Optional[Path] = None

    log_level: str = 'INFO'

    @classmethod
    def from_yaml(cls, path: Path) -> 'AnalysisConfig':
        """Load configuration from YAML file."""
        with open(path, encoding='utf-8-sig') as f:
            data = yaml.safe_load(f) or {}

        if not data.get('reference'):
            raise ValueError(f"Config {path} must set 'reference'")

        mutations = data.get('mutations', '')
        if isinstance(mutations, list):
            mutations = ','.join(str(m) for m in mutations)

        return cls(
            reference=str(data['reference']),
            mutations=str(mutations),
            output_tsv=Path(data['output']) if data.get('output') else None,
            outcomes_tsv=Path(data['outcomes']) if data.get('outcomes') else None,
            report=Path(data['report']) if data.get('report') else None,
            log_level=str(data.get('log_level', 'INFO')).upper(),
        )

    def load_reference(self) -> str:
        """Resolve the reference to sequence text."""
        return parse_sequence_input(self.reference)

    def load_mutations(self) -> str:
        """Resolve the mutations to comma-separated text."""
        return parse_mutations_input(self.mutations)
