"""
Command-line interface for trinuc_context.
"""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import AnalysisConfig, parse_sequence_input


@click.group()
@click.version_option(version=__version__)
def cli():
    """Trinucleotide context analysis of point mutations."""
    pass


@cli.command()
@click.option('--reference', '-r', type=str,
              help='Reference sequence: DNA sequence (IUPAC letters allowed) or FASTA file path')
@click.option('--mutations', '-m', type=str,
              help='Comma-separated mutations (e.g. "G123C, A456T") or a file listing them')
@click.option('--output', '-o', type=click.Path(),
              help='Output TSV for the 192 context counts (default: print to stdout)')
@click.option('--outcomes', type=click.Path(),
              help='Optional TSV of per-mutation results')
@click.option('--report', type=click.Path(),
              help='Optional markdown summary report')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True),
              help='YAML config file (command-line options take precedence)')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Logging level (default: INFO)')
def run(reference, mutations, output, outcomes, report, config_path, log_level):
    """
    Contextualise mutations against a reference and count contexts.

    Every mutation is checked against the reference base at its 1-based
    position. Its flanking bases give the context, e.g. G3C in ACGTACGTAC
    is C[G>C]T. Counts cover all 192 contexts.

    \b
    Example with a DNA sequence:
      trinuc run -r ACGTACGTAC -m "G3C, A1T"

    \b
    Example with files:
      trinuc run -r reference.fasta -m mutations.txt -o counts.tsv --outcomes results.tsv
    """
    from .analysis import aggregate
    from .io.output import (
        format_outcome,
        generate_summary_report,
        render_tsv,
        write_counts_tsv,
        write_outcomes_tsv,
    )

    if config_path:
        try:
            config = AnalysisConfig.from_yaml(Path(config_path))
        except (ValueError, OSError) as e:
            click.echo(f"Error loading config: {e}", err=True)
            sys.exit(1)
    else:
        if not reference:
            click.echo("Error: Either --reference or --config must be provided", err=True)
            sys.exit(1)
        config = AnalysisConfig(reference=reference)

    # Command-line options override the config file
    if reference:
        config.reference = reference
    if mutations is not None:
        config.mutations = mutations
    if output:
        config.output_tsv = Path(output)
    if outcomes:
        config.outcomes_tsv = Path(outcomes)
    if report:
        config.report = Path(report)
    if log_level:
        config.log_level = log_level.upper()

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        sequence = config.load_reference()
    except (ValueError, OSError) as e:
        click.echo(f"Error loading reference sequence: {e}", err=True)
        sys.exit(1)

    try:
        mutations_text = config.load_mutations()
    except OSError as e:
        click.echo(f"Error loading mutations: {e}", err=True)
        sys.exit(1)

    result = aggregate(sequence, mutations_text)

    click.echo(f"Parsed sequence length: {result.sequence_length} bp", err=True)
    for outcome in result.outcomes:
        click.echo(format_outcome(outcome), err=True)

    if config.output_tsv:
        write_counts_tsv(result.counts, config.output_tsv)
        click.echo(f"Context counts written to: {config.output_tsv}", err=True)
    else:
        click.echo(render_tsv(result.counts))

    if config.outcomes_tsv:
        write_outcomes_tsv(result.outcomes, config.outcomes_tsv)
        click.echo(f"Mutation results written to: {config.outcomes_tsv}", err=True)

    if config.report:
        generate_summary_report(result, config.report)
        click.echo(f"Summary report written to: {config.report}", err=True)


@cli.command()
def contexts():
    """List the 192 trinucleotide contexts in canonical order."""
    from .core.catalog import ALL_CONTEXTS

    for context in ALL_CONTEXTS:
        click.echo(context)


@cli.command()
@click.option('--output', '-o', type=click.Path(), default='trinuc_config.yaml',
              help='Output config file path')
def init(output):
    """Generate a template configuration file."""
    template = '''# trinuc configuration template
# Edit this file to configure your analysis

# Required: reference sequence (DNA sequence or FASTA file)
reference: reference.fasta

# Mutations: comma-separated string, a list, or a text file
mutations: G123C, A456T, C789G
# mutations: mutations.txt

# Outputs (counts are printed to stdout if 'output' is not set)
output: context_counts.tsv
# outcomes: mutation_results.tsv
# report: summary.md

# Logging level: DEBUG, INFO, WARNING or ERROR
log_level: INFO
'''

    with open(output, 'w') as f:
        f.write(template)

    click.echo(f"Generated configuration template: {output}")
    click.echo("\nEdit this file and run:")
    click.echo(f"  trinuc run --config {output}")


@cli.command()
@click.option('--reference', '-r', type=str, required=True,
              help='Reference sequence: DNA sequence (IUPAC letters allowed) or FASTA file path')
def info(reference):
    """Display the parsed reference sequence length."""
    try:
        sequence = parse_sequence_input(reference)
    except ValueError as e:
        click.echo(f"Error loading reference sequence: {e}", err=True)
        sys.exit(1)

    click.echo(f"Parsed sequence length: {len(sequence)} bp")


if __name__ == '__main__':
    cli()
