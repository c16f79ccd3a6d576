# =============================================================================
# test_disassembler.py - Hack Disassembler Tests
# =============================================================================
# Test coverage includes:
#   - A- and C-instruction decoding
#   - Omission of null dest/jump fields
#   - Invalid words
#   - Round trip: assemble -> disassemble -> assemble
# =============================================================================

import pytest

from hack_asm.assembler import assemble
from hack_asm.disassembler import HackDisassembler, DisassembledInstruction
from hack_asm.errors import DisassemblerError


# =============================================================================
# Single Instruction Tests
# =============================================================================

class TestDisassembleOne:
    """Test decoding of individual words."""

    @pytest.mark.parametrize("word,text", [
        ("0000000000000000", "@0"),
        ("0000000000001010", "@10"),
        ("0111111111111111", "@32767"),
        ("1111110000010000", "D=M"),
        ("1111010011010000", "D=D-M"),
        ("1110001100000001", "D;JGT"),
        ("1110101010000111", "0;JMP"),
        ("1110011111001000", "M=D+1"),
        ("1111110010101000", "AM=M-1"),
        ("1111010101111101", "AMD=D|M;JNE"),
        ("1110101010000000", "0"),
    ])
    def test_words(self, word, text):
        instr = HackDisassembler().disassemble_one(word)
        assert instr.text == text
        assert instr.word == word

    def test_integer_word(self):
        instr = HackDisassembler().disassemble_one(0b0100000000000000)
        assert instr.text == "@16384"
        assert instr.is_a

    def test_c_instruction_flag(self):
        assert not HackDisassembler().disassemble_one("1110101010000111").is_a

    def test_str_and_dict(self):
        instr = HackDisassembler().disassemble_one("0000000000000101", address=3)
        assert str(instr) == "    3: 0000000000000101  @5"
        assert instr.to_dict() == {
            "address": 3,
            "word": "0000000000000101",
            "text": "@5",
            "type": "A",
        }


# =============================================================================
# Invalid Input Tests
# =============================================================================

class TestInvalidWords:
    """Test words that are not Hack instructions."""

    @pytest.mark.parametrize("word", [
        "",
        "010101",
        "00000000000000001",
        "000000000000000x",
    ])
    def test_malformed(self, word):
        with pytest.raises(DisassemblerError):
            HackDisassembler().disassemble_one(word)

    def test_bad_c_prefix(self):
        with pytest.raises(DisassemblerError) as exc_info:
            HackDisassembler().disassemble_one("1000101010000111", address=7)
        assert exc_info.value.address == 7
        assert "ROM[7]" in str(exc_info.value)

    def test_unknown_comp_bits(self):
        with pytest.raises(DisassemblerError):
            HackDisassembler().disassemble_one("1110111100000000")

    def test_m_form_of_constant(self):
        """a=1 is meaningless for comps that do not use A."""
        with pytest.raises(DisassemblerError):
            HackDisassembler().disassemble_one("1111101010000111")

    def test_integer_out_of_range(self):
        with pytest.raises(DisassemblerError):
            HackDisassembler().disassemble_one(1 << 16)


# =============================================================================
# Sequence Tests
# =============================================================================

class TestDisassemble:
    """Test disassembly of whole programs."""

    def test_addresses(self, max_hack):
        instructions = HackDisassembler().disassemble(max_hack)
        assert [i.address for i in instructions] == list(range(16))
        assert all(isinstance(i, DisassembledInstruction) for i in instructions)

    def test_start_address(self):
        instructions = HackDisassembler().disassemble(["0000000000000001"], start_address=100)
        assert instructions[0].address == 100

    def test_count(self, max_hack):
        assert len(HackDisassembler().disassemble(max_hack, count=3)) == 3

    def test_skips_blank_lines(self):
        lines = ["0000000000000001\n", "\n", "1110101010000111\n"]
        instructions = HackDisassembler().disassemble(lines)
        assert [i.text for i in instructions] == ["@1", "0;JMP"]
        assert instructions[1].address == 1

    def test_round_trip(self, max_source, sum_source):
        """Disassembled output re-assembles to the same words."""
        disasm = HackDisassembler()
        for source in (max_source, sum_source):
            words = assemble(source)
            assert assemble(disasm.to_source(words)) == words

    def test_round_trip_every_c_word(self):
        disasm = HackDisassembler()
        source = "\n".join([
            "AMD=!A;JLE", "MD=M+1;JGE", "A=D&A;JLT", "AD=-M;JEQ", "D=A-D",
        ])
        words = assemble(source)
        assert assemble(disasm.to_source(words)) == words
