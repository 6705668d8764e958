"""Tests for trinuc_context.io module."""

import pandas as pd
import pytest
from trinuc_context.analysis import aggregate, empty_counts
from trinuc_context.core.catalog import ALL_CONTEXTS
from trinuc_context.io.output import (
    TSV_HEADER,
    format_outcome,
    generate_summary_report,
    render_tsv,
    write_counts_tsv,
    write_outcomes_tsv,
)

FASTA = ">seq1\nACGTACGTAC"


class TestRenderTsv:
    """Test TSV rendering of counts."""

    def test_header_and_rows(self):
        """Test header plus exactly 192 rows."""
        lines = render_tsv(empty_counts()).split('\n')
        assert lines[0] == "Context\tCount"
        assert len(lines) == 193

    def test_every_context_once_in_order(self):
        """Test each canonical context appears once, in catalog order."""
        lines = render_tsv(empty_counts()).split('\n')[1:]
        assert [line.split('\t')[0] for line in lines] == list(ALL_CONTEXTS)

    def test_counts_rendered(self):
        """Test a counted context is rendered with its count."""
        tsv = render_tsv(aggregate(FASTA, "G3C, G3C").counts)
        assert "C[G>C]T\t2" in tsv.split('\n')
        assert "A[A>C]A\t0" in tsv.split('\n')

    def test_missing_counts_render_as_zero(self):
        """Test a partial mapping is zero-filled."""
        lines = render_tsv({'T[T>G]T': 4}).split('\n')
        assert len(lines) == 193
        assert lines[-1] == "T[T>G]T\t4"
        assert lines[1] == "A[A>C]A\t0"

    def test_no_trailing_newline(self):
        """Test the table ends on the last row."""
        assert not render_tsv(empty_counts()).endswith('\n')

    def test_empty_sequence_table(self):
        """Test empty reference still gives 192 zero rows."""
        lines = render_tsv(aggregate("", "G3C").counts).split('\n')
        assert len(lines) == 193
        assert all(line.endswith('\t0') for line in lines[1:])


class TestFormatOutcome:
    """Test outcome display lines."""

    def test_success(self):
        result = aggregate(FASTA, "G3C")
        assert format_outcome(result.outcomes[0]) == "G3C -> C[G>C]T"

    def test_error(self):
        result = aggregate(FASTA, "X1T")
        assert format_outcome(result.outcomes[0]) == "X1T -> Invalid mutation format"


class TestWriters:
    """Test file writers."""

    def test_write_counts_tsv_matches_render(self, tmp_path):
        """Test the written file equals the rendered table."""
        counts = aggregate(FASTA, "G3C, T4G").counts
        path = write_counts_tsv(counts, tmp_path / "counts.tsv")
        assert path.read_text() == render_tsv(counts) + '\n'

    def test_write_counts_tsv_readable(self, tmp_path):
        """Test the file reads back with pandas."""
        counts = aggregate(FASTA, "G3C").counts
        path = write_counts_tsv(counts, tmp_path / "counts.tsv")
        df = pd.read_csv(path, sep='\t')
        assert list(df.columns) == TSV_HEADER.split('\t')
        assert len(df) == 192
        assert df['Count'].sum() == 1

    def test_write_outcomes_tsv(self, tmp_path):
        """Test per-mutation results file."""
        result = aggregate(FASTA, "G3C, G5C, A1T")
        path = write_outcomes_tsv(result.outcomes, tmp_path / "outcomes.tsv")
        df = pd.read_csv(path, sep='\t', keep_default_na=False)
        assert df['mutation'].tolist() == ["G3C", "G5C", "A1T"]
        assert df['context'].tolist() == ["C[G>C]T", "", "N[A>T]C"]
        assert df.loc[1, 'error'] == "Reference mismatch at position 5: expected G, found A"

    def test_summary_report(self, tmp_path):
        """Test markdown summary content."""
        result = aggregate(FASTA, "G3C, G3C, T4G, A1T, X1T")
        path = generate_summary_report(result, tmp_path / "summary.md")
        text = path.read_text()
        assert "**Parsed sequence length:** 10 bp" in text
        assert "**Counted:** 3" in text
        assert "**Uncounted (edge or non-canonical context):** 1" in text
        assert "| X1T | Invalid mutation format |" in text
        # Sorted by count, descending
        assert text.index("| C[G>C]T | 2 |") < text.index("| G[T>G]A | 1 |")

    def test_summary_report_without_errors(self, tmp_path):
        """Test sections are omitted when empty."""
        result = aggregate(FASTA, "A1T")
        text = generate_summary_report(result, tmp_path / "summary.md").read_text()
        assert "Failed Mutations" not in text
        assert "Observed Contexts" not in text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
