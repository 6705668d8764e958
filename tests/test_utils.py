"""Tests for trinuc_context.utils module."""

import pytest
from trinuc_context.utils.sequence import is_dna_sequence, parse_fasta


class TestParseFasta:
    """Test FASTA/plain sequence parsing."""

    def test_header_dropped(self):
        """Test single header line is removed."""
        assert parse_fasta(">seq1\nACGTACGTAC") == "ACGTACGTAC"

    def test_headerless_input(self):
        """Test plain sequence without header."""
        assert parse_fasta("ACGT") == "ACGT"

    def test_multiline_concatenated(self):
        """Test sequence lines are trimmed and joined."""
        assert parse_fasta(">seq1\n  ACGT  \nGGCC\n\nTTAA\n") == "ACGTGGCCTTAA"

    def test_lowercase_uppercased(self):
        """Test lowercase sequence is uppercased."""
        assert parse_fasta(">chr\nacgtN") == "ACGTN"

    def test_all_headers_dropped(self):
        """Test every header line is dropped, records are concatenated."""
        text = ">rec1\nAAAA\n>rec2\nCCCC\n  >rec3\nGG"
        assert parse_fasta(text) == "AAAACCCCGG"

    def test_crlf_line_endings(self):
        """Test Windows line endings are stripped."""
        assert parse_fasta(">seq\r\nACGT\r\nTT\r\n") == "ACGTTT"

    def test_non_acgt_characters_kept(self):
        """Test ambiguity codes and other characters pass through."""
        assert parse_fasta("acgRYn-") == "ACGRYN-"

    def test_byte_order_mark_header_dropped(self):
        """Test a header after a leading byte order mark is still a header."""
        assert parse_fasta("\ufeff>seq1\nACGT") == "ACGT"

    def test_byte_order_mark_plain_sequence(self):
        """Test a byte order mark before a bare sequence is removed."""
        assert parse_fasta("\ufeffacgt\n") == "ACGT"

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", ">only_header", ">h1\n>h2\n  \n"])
    def test_empty_results(self, text):
        """Test input without sequence lines gives an empty sequence."""
        assert parse_fasta(text) == ""


class TestIsDnaSequence:
    """Test literal DNA detection."""

    def test_dna_string(self):
        """Test plain DNA is recognised."""
        assert is_dna_sequence("ACGTN")
        assert is_dna_sequence("acgtn")

    def test_iupac_codes(self):
        """Test IUPAC ambiguity codes count as a literal sequence."""
        assert is_dna_sequence("ACGTR")
        assert is_dna_sequence("acgtrykmswbdhvn")

    def test_file_path(self):
        """Test file paths are not DNA."""
        assert not is_dna_sequence("reference.fasta")
        assert not is_dna_sequence("/data/ref.fa")

    def test_empty_string(self):
        """Test empty string is not DNA."""
        assert not is_dna_sequence("")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
