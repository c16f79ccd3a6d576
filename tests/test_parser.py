# =============================================================================
# test_parser.py - Parser Unit Tests
# =============================================================================
# Test coverage includes:
#   - A-instruction constants, predefined symbols, labels and variables
#   - Variable allocation order
#   - C-instruction field splitting (dest=comp;jump with optional parts)
#   - Malformed A-instruction operands and out-of-range constants
# =============================================================================

import pytest

from hack_asm.assembler.normalizer import CleanLine
from hack_asm.assembler.parser import AInstruction, CInstruction, Parser
from hack_asm.assembler.symbols import SymbolTable
from hack_asm.cpu import NULL
from hack_asm.errors import AddressRangeError, AssemblySyntaxError, SourceLocation


def line(text: str, number: int = 1) -> CleanLine:
    """Build a cleaned line as the normalizer would."""
    return CleanLine(text, SourceLocation("<test>", number), text)


def parse(text: str, table: SymbolTable | None = None):
    return Parser(table if table is not None else SymbolTable()).parse_line(line(text))


# =============================================================================
# A-Instructions
# =============================================================================

class TestAInstruction:
    """Test @value parsing and symbol resolution."""

    def test_decimal_constant(self):
        inst = parse("@21")
        assert isinstance(inst, AInstruction)
        assert inst.value == 21
        assert inst.symbol is None

    def test_zero(self):
        assert parse("@0").value == 0

    def test_leading_zeros(self):
        assert parse("@007").value == 7

    def test_largest_constant(self):
        assert parse("@32767").value == 32767

    def test_predefined_symbol(self):
        assert parse("@R5").value == 5
        assert parse("@SCREEN").value == 16384
        assert parse("@KBD").value == 24576

    def test_label_resolution(self):
        table = SymbolTable()
        table.add("LOOP", 4)
        inst = parse("@LOOP", table)
        assert inst.value == 4
        assert inst.symbol == "LOOP"
        assert table.next_variable == 16

    def test_variable_allocation_order(self):
        """@i, @sum, @i -> 16, 17, 16."""
        table = SymbolTable()
        parser = Parser(table)
        values = [parser.parse_line(line(t)).value for t in ("@i", "@sum", "@i")]
        assert values == [16, 17, 16]
        assert table.next_variable == 18

    def test_variable_records_location(self):
        table = SymbolTable()
        Parser(table).parse_line(line("@counter", 12))
        assert table.lookup("counter").location.line == 12

    def test_symbols_are_case_sensitive(self):
        table = SymbolTable()
        parser = Parser(table)
        assert parser.parse_line(line("@loop")).value == 16
        assert parser.parse_line(line("@LOOP")).value == 17

    def test_str(self):
        assert str(parse("@R1")) == "@1"


class TestAInstructionErrors:
    """Test malformed and out-of-range operands."""

    def test_out_of_range(self):
        with pytest.raises(AddressRangeError) as exc_info:
            Parser(SymbolTable()).parse_line(line("@32768", 7))
        assert exc_info.value.value == 32768
        assert exc_info.value.line == 7

    def test_missing_operand(self):
        with pytest.raises(AssemblySyntaxError):
            parse("@")

    def test_negative_constant(self):
        with pytest.raises(AssemblySyntaxError):
            parse("@-1")

    def test_symbol_starting_with_digit(self):
        with pytest.raises(AssemblySyntaxError) as exc_info:
            parse("@12abc")
        assert "12abc" in str(exc_info.value)

    def test_illegal_character(self):
        with pytest.raises(AssemblySyntaxError):
            parse("@a+b")

    def test_error_does_not_allocate(self):
        table = SymbolTable()
        with pytest.raises(AssemblySyntaxError):
            parse("@9lives", table)
        assert table.next_variable == 16


# =============================================================================
# C-Instructions
# =============================================================================

class TestCInstruction:
    """Test dest=comp;jump field splitting."""

    def test_dest_and_comp(self):
        inst = parse("D=M")
        assert isinstance(inst, CInstruction)
        assert (inst.dest, inst.comp, inst.jump) == ("D", "M", NULL)

    def test_comp_and_jump(self):
        inst = parse("D;JGT")
        assert (inst.dest, inst.comp, inst.jump) == (NULL, "D", "JGT")

    def test_all_fields(self):
        inst = parse("AM=M-1;JNE")
        assert (inst.dest, inst.comp, inst.jump) == ("AM", "M-1", "JNE")

    def test_comp_only(self):
        inst = parse("D+1")
        assert (inst.dest, inst.comp, inst.jump) == (NULL, "D+1", NULL)

    def test_unconditional_jump(self):
        inst = parse("0;JMP")
        assert (inst.dest, inst.comp, inst.jump) == (NULL, "0", "JMP")

    def test_fields_kept_verbatim(self):
        """Unknown mnemonics are left for the encoder to reject."""
        inst = parse("X=D*A;JJJ")
        assert (inst.dest, inst.comp, inst.jump) == ("X", "D*A", "JJJ")

    def test_location_and_source(self):
        inst = Parser(SymbolTable()).parse_line(line("D=M", 9))
        assert inst.location.line == 9
        assert inst.source == "D=M"

    @pytest.mark.parametrize("text", ["D=M", "D;JGT", "AM=M-1;JNE", "0;JMP", "M"])
    def test_str_round_trip(self, text):
        assert str(parse(text)) == text

    def test_parse_many(self):
        table = SymbolTable()
        instructions = Parser(table).parse([line("@x"), line("M=0"), line("@x")])
        assert [type(i) for i in instructions] == [AInstruction, CInstruction, AInstruction]
        assert instructions[0].value == instructions[2].value == 16
