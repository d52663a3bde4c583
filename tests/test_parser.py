# =============================================================================
# test_parser.py - Parser Unit Tests
# =============================================================================
# Tests for the Hack assembly parser.
#
# Test coverage includes:
#   - Classification of address, label and compute instructions
#   - Splitting compute instructions into dest/comp/jump
#   - Whitespace removal and comment stripping
#   - Stream reading, end of input and rewinding
# =============================================================================

import io

import pytest

from hackasm.assembler.parser import (
    Parser,
    AddressInstruction,
    ComputeInstruction,
    LabelInstruction,
    clean_line,
    is_decimal,
    parse_line,
    parse_source,
    strip_whitespace,
)
from hackasm.errors import AssemblySyntaxError


# =============================================================================
# Classification Tests
# =============================================================================

class TestClassification:
    """Test that each line shape yields the right instruction type."""

    def test_address_literal(self):
        """@ followed by digits is an address instruction."""
        assert parse_line("@21") == AddressInstruction("21")

    def test_address_symbol(self):
        """@ followed by a name keeps the name as the symbol."""
        assert parse_line("@LOOP") == AddressInstruction("LOOP")

    def test_label(self):
        """Parenthesised name is a label without the parentheses."""
        assert parse_line("(LOOP)") == LabelInstruction("LOOP")

    def test_label_with_dots_and_dollars(self):
        """Label text is taken verbatim between the parentheses."""
        assert parse_line("(Main.loop$if_1)") == LabelInstruction("Main.loop$if_1")

    def test_compute_dest_comp(self):
        """dest=comp has no jump."""
        assert parse_line("D=M") == ComputeInstruction(comp="M", dest="D", jump=None)

    def test_compute_comp_jump(self):
        """comp;jump has no dest."""
        assert parse_line("0;JMP") == ComputeInstruction(comp="0", dest=None, jump="JMP")

    def test_compute_all_fields(self):
        """dest=comp;jump fills every field."""
        assert parse_line("AM=M-1;JNE") == ComputeInstruction(
            comp="M-1", dest="AM", jump="JNE"
        )

    def test_compute_comp_only(self):
        """A bare computation is legal and has neither dest nor jump."""
        assert parse_line("D+1") == ComputeInstruction(comp="D+1")

    def test_mnemonics_not_validated(self):
        """Unknown mnemonics still parse; the encoder rejects them later."""
        assert parse_line("X=Q;JXX") == ComputeInstruction(comp="Q", dest="X", jump="JXX")

    def test_malformed_label(self):
        """A label without a closing parenthesis is a syntax error."""
        with pytest.raises(AssemblySyntaxError):
            parse_line("(LOOP")

    def test_empty_label(self):
        """An empty label is a syntax error."""
        with pytest.raises(AssemblySyntaxError):
            parse_line("()")

    def test_numeric_flag(self):
        """AddressInstruction knows whether its symbol is a literal."""
        assert AddressInstruction("123").is_numeric
        assert not AddressInstruction("i").is_numeric
        assert not AddressInstruction("R1").is_numeric


# =============================================================================
# Whitespace and Comment Tests
# =============================================================================

class TestWhitespaceAndComments:
    """Test that layout never changes the parsed instruction."""

    @pytest.mark.parametrize("line", [
        "  D = D + A ; JGT",
        "\tD=D+A;JGT\r\n",
        "D=D+A;JGT",
        "D =D+ A;  JGT   ",
        "  @ 100",
        "( LOOP )",
        "M = 1",
    ])
    def test_whitespace_insensitive(self, line):
        """Parsing a line equals parsing it with all whitespace removed."""
        assert parse_line(line) == parse_line(strip_whitespace(line))

    def test_blank_line(self):
        """Blank lines produce nothing."""
        assert parse_line("") is None
        assert parse_line("   \t \n") is None

    def test_full_line_comment(self):
        """// comment lines produce nothing."""
        assert parse_line("// Computes R0 = 2 + 3") is None

    def test_single_slash_is_comment(self):
        """One slash is enough to start a comment."""
        assert parse_line("/ not checked for a second slash") is None

    def test_indented_comment(self):
        """Leading whitespace before a comment is skipped."""
        assert parse_line("      // indented") is None

    def test_trailing_comment(self):
        """A comment after an instruction is removed."""
        assert parse_line("D=M // load") == ComputeInstruction(comp="M", dest="D")
        assert parse_line("@i// counter") == AddressInstruction("i")

    def test_clean_line(self):
        """clean_line strips whitespace and comments together."""
        assert clean_line("  D = A  // x\n") == "D=A"
        assert clean_line("//") == ""

    def test_is_decimal(self):
        """Only plain ASCII digit runs count as decimal literals."""
        assert is_decimal("0")
        assert is_decimal("32767")
        assert not is_decimal("")
        assert not is_decimal("-1")
        assert not is_decimal("1a")


# =============================================================================
# Stream Tests
# =============================================================================

class TestParserStream:
    """Test reading instructions off a stream."""

    SOURCE = (
        "// header comment\n"
        "\n"
        "@2\n"
        "   D=A   // load\n"
        "(END)\n"
        "@END\n"
        "0;JMP"
    )

    def test_next_instruction_sequence(self):
        """Instructions come back in source order, comments skipped."""
        parser = Parser(io.StringIO(self.SOURCE))
        assert parser.next_instruction() == AddressInstruction("2")
        assert parser.next_instruction() == ComputeInstruction(comp="A", dest="D")
        assert parser.next_instruction() == LabelInstruction("END")
        assert parser.next_instruction() == AddressInstruction("END")
        assert parser.next_instruction() == ComputeInstruction(comp="0", jump="JMP")
        assert parser.next_instruction() is None

    def test_end_of_input_is_sticky(self):
        """Reading past the end keeps returning None."""
        parser = Parser(io.StringIO("// only a comment\n"))
        assert parser.next_instruction() is None
        assert parser.next_instruction() is None

    def test_line_number(self):
        """The parser counts physical lines consumed."""
        parser = Parser(io.StringIO(self.SOURCE))
        parser.next_instruction()
        assert parser.line_number == 3

    def test_rewind(self):
        """Rewinding replays the same instructions."""
        parser = Parser(io.StringIO(self.SOURCE))
        first = list(parser)
        parser.rewind()
        second = list(parser)
        assert first == second
        assert len(first) == 5

    def test_rewind_returns_to_start_position(self):
        """Rewinding goes back to where the parser started, not offset 0."""
        stream = io.StringIO("@skipped\n@1\nD=A\n")
        stream.readline()
        parser = Parser(stream)
        first = list(parser)
        parser.rewind()
        assert list(parser) == first
        assert first == [AddressInstruction("1"), ComputeInstruction(comp="A", dest="D")]


    def test_parse_source(self):
        """parse_source returns the full instruction list."""
        instructions = parse_source("@x\nM=1\n")
        assert instructions == [
            AddressInstruction("x"),
            ComputeInstruction(comp="1", dest="M"),
        ]

    def test_instructions_are_immutable(self):
        """Instruction records cannot be modified."""
        instruction = AddressInstruction("x")
        with pytest.raises(AttributeError):
            instruction.symbol = "y"
