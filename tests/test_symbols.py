# =============================================================================
# test_symbols.py - Symbol Table Unit Tests
# =============================================================================
# Tests for the Hack symbol table.
#
# Test coverage includes:
#   - Predefined registers, VM pointers and I/O symbols
#   - Insert, contains and lookup
#   - Duplicate insertion policy
#   - Independence of separate tables
# =============================================================================

import pytest

from hackasm.assembler.symbols import SymbolTable
from hackasm.errors import DuplicateSymbolError


class TestPredefinedSymbols:
    """Test the symbols bound at construction."""

    def test_registers(self):
        """R0..R15 map to 0..15."""
        table = SymbolTable()
        for n in range(16):
            assert table.lookup(f"R{n}") == n

    def test_vm_pointers(self):
        """SP, LCL, ARG, THIS, THAT map to 0..4."""
        table = SymbolTable()
        assert [table.lookup(name) for name in ("SP", "LCL", "ARG", "THIS", "THAT")] \
            == [0, 1, 2, 3, 4]

    def test_io_symbols(self):
        """SCREEN and KBD map to their memory-mapped addresses."""
        table = SymbolTable()
        assert table.lookup("SCREEN") == 16384
        assert table.lookup("KBD") == 24576

    def test_predefined_count(self):
        """Exactly 23 symbols exist before assembly starts."""
        assert len(SymbolTable()) == 23
        assert SymbolTable().user_symbols() == {}


class TestInsertAndLookup:
    """Test growing and querying the table."""

    def test_insert_then_lookup(self):
        """Inserted symbols can be found."""
        table = SymbolTable()
        table.insert("LOOP", 4)
        assert table.contains("LOOP")
        assert "LOOP" in table
        assert table.lookup("LOOP") == 4

    def test_missing_symbol(self):
        """Looking up an absent symbol returns None."""
        table = SymbolTable()
        assert table.lookup("missing") is None
        assert not table.contains("missing")

    def test_case_sensitive(self):
        """Names differing only by case are distinct."""
        table = SymbolTable()
        table.insert("loop", 1)
        assert table.lookup("LOOP") is None
        assert table.lookup("loop") == 1
        assert table.lookup("screen") is None

    def test_duplicate_insert(self):
        """Binding a name twice raises DuplicateSymbolError."""
        table = SymbolTable()
        table.insert("END", 10)
        with pytest.raises(DuplicateSymbolError) as exc_info:
            table.insert("END", 12)
        assert exc_info.value.symbol == "END"
        assert exc_info.value.existing == 10
        assert table.lookup("END") == 10

    def test_predefined_cannot_be_rebound(self):
        """Predefined symbols count as already bound."""
        table = SymbolTable()
        with pytest.raises(DuplicateSymbolError):
            table.insert("SCREEN", 0)

    def test_user_symbols(self):
        """user_symbols leaves out the predefined entries."""
        table = SymbolTable()
        table.insert("i", 16)
        table.insert("LOOP", 2)
        assert table.user_symbols() == {"i": 16, "LOOP": 2}
        assert len(table) == 25

    def test_tables_are_independent(self):
        """Each table has its own storage."""
        first = SymbolTable()
        second = SymbolTable()
        first.insert("x", 16)
        assert "x" not in second

    def test_as_dict_is_a_copy(self):
        """Mutating the exported dictionary leaves the table alone."""
        table = SymbolTable()
        exported = table.as_dict()
        exported["x"] = 99
        assert "x" not in table
