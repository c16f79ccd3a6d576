# =============================================================================
# test_symbols.py - Symbol Table Unit Tests
# =============================================================================
# Test coverage includes:
#   - Predefined symbols present at construction
#   - contains / get / add / allocate
#   - Variable allocation order starting at RAM[16]
#   - Read-only views (labels, variables, as_dict)
# =============================================================================

import pytest

from hack_asm.assembler.symbols import SymbolKind, SymbolTable
from hack_asm.errors import SourceLocation, UndefinedSymbolError


# =============================================================================
# Predefined Symbols
# =============================================================================

class TestPredefinedSymbols:
    """The table starts out with the Hack architectural symbols."""

    @pytest.mark.parametrize("name,value", [
        ("SP", 0),
        ("LCL", 1),
        ("ARG", 2),
        ("THIS", 3),
        ("THAT", 4),
        ("SCREEN", 16384),
        ("KBD", 24576),
    ])
    def test_named_registers(self, name, value):
        table = SymbolTable()
        assert table.contains(name)
        assert table.get(name) == value

    def test_r0_to_r15(self):
        table = SymbolTable()
        for i in range(16):
            assert table.get(f"R{i}") == i

    def test_predefined_count(self):
        """5 pointers + 16 registers + SCREEN + KBD."""
        assert len(SymbolTable()) == 23

    def test_no_r16(self):
        assert not SymbolTable().contains("R16")

    def test_predefined_kind(self):
        table = SymbolTable()
        assert table.lookup("SP").kind is SymbolKind.PREDEFINED
        assert table.labels() == []
        assert table.variables() == []


# =============================================================================
# Core Operations
# =============================================================================

class TestOperations:
    """Test contains, get, add and allocate."""

    def test_get_unknown_raises(self):
        table = SymbolTable()
        with pytest.raises(UndefinedSymbolError) as exc_info:
            table.get("nothing")
        assert exc_info.value.symbol == "nothing"

    def test_add_label(self):
        table = SymbolTable()
        location = SourceLocation("<test>", 3)
        table.add("LOOP", 4, location=location)
        assert table.get("LOOP") == 4
        assert table.lookup("LOOP").kind is SymbolKind.LABEL
        assert table.lookup("LOOP").location == location

    def test_add_overwrites(self):
        table = SymbolTable()
        table.add("LOOP", 4)
        table.add("LOOP", 9)
        assert table.get("LOOP") == 9

    def test_add_does_not_advance_variables(self):
        table = SymbolTable()
        table.add("LOOP", 4)
        assert table.next_variable == 16

    def test_allocate_sequence(self):
        """The N-th new variable receives 16 + N - 1."""
        table = SymbolTable()
        assert table.allocate("i") == 16
        assert table.allocate("sum") == 17
        assert table.allocate("j") == 18
        assert table.next_variable == 19

    def test_allocated_symbol_resolves(self):
        table = SymbolTable()
        table.allocate("counter")
        assert table.contains("counter")
        assert table.get("counter") == 16
        assert table.lookup("counter").kind is SymbolKind.VARIABLE

    def test_in_operator(self):
        table = SymbolTable()
        assert "KBD" in table
        assert "foo" not in table


# =============================================================================
# Views
# =============================================================================

class TestViews:
    """Test the read-only helpers used for listings and symbol files."""

    def test_labels_and_variables(self):
        table = SymbolTable()
        table.add("START", 0)
        table.add("END", 7)
        table.allocate("x")
        assert [s.name for s in table.labels()] == ["START", "END"]
        assert [s.name for s in table.variables()] == ["x"]

    def test_as_dict_is_a_snapshot(self):
        table = SymbolTable()
        snapshot = table.as_dict()
        snapshot["SP"] = 99
        assert table.get("SP") == 0
        assert snapshot["KBD"] == 24576

    def test_iteration_yields_symbols(self):
        table = SymbolTable()
        table.allocate("x")
        names = {sym.name for sym in table}
        assert "x" in names
        assert "SCREEN" in names
