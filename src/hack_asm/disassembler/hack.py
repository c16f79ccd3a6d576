"""
Hack Disassembler
=================

Disassembles Hack machine code back into assembly language. This is the
inverse of the assembler's encoder and uses the same tables from
``hack_asm.cpu``.

Symbols are not recovered: labels and variables come back as numeric
A-instructions, and absent dest/jump fields are omitted.

Usage:
    disasm = HackDisassembler()

    # Disassemble the lines of a .hack file
    instructions = disasm.disassemble(Path("Max.hack").read_text().splitlines())

    # Disassemble a single word
    instr = disasm.disassemble_one("1110001100000001")
    print(instr.text)     # D;JGT
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from hack_asm.cpu import (
    C_PREFIX,
    DEST_BY_BITS,
    JUMP_BY_BITS,
    NULL,
    WORD_BITS,
    comp_mnemonic,
)
from hack_asm.errors import DisassemblerError


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class DisassembledInstruction:
    """
    Represents a single disassembled Hack instruction.

    Attributes:
        address: ROM address of the instruction
        word: The 16-character binary word
        text: Assembly text (e.g. "@17", "D=D-M", "0;JMP")
        is_a: True for A-instructions
    """
    address: int
    word: str
    text: str
    is_a: bool

    def __str__(self) -> str:
        """Format as listing line: ADDRESS: WORD  TEXT"""
        return f"{self.address:5d}: {self.word}  {self.text}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "address": self.address,
            "word": self.word,
            "text": self.text,
            "type": "A" if self.is_a else "C",
        }


# =============================================================================
# Hack Disassembler
# =============================================================================

class HackDisassembler:
    """Disassembler for Hack machine code."""

    def disassemble_one(self, word: str | int, address: int = 0) -> DisassembledInstruction:
        """
        Disassemble a single instruction word.

        Args:
            word: A 16-character binary string or an integer 0..65535
            address: ROM address reported with the result

        Raises:
            DisassemblerError: If the word is not a valid Hack instruction
        """
        bits = self._normalize_word(word, address)

        if bits[0] == "0":
            return DisassembledInstruction(address, bits, f"@{int(bits[1:], 2)}", True)

        if not bits.startswith(C_PREFIX):
            raise DisassemblerError(
                f"C-instruction '{bits}' must start with {C_PREFIX}", address
            )

        comp = comp_mnemonic(bits[3:10])
        if comp is None:
            raise DisassemblerError(f"unknown comp bits {bits[3:10]}", address)
        dest = DEST_BY_BITS[bits[10:13]]
        jump = JUMP_BY_BITS[bits[13:16]]

        text = comp
        if dest != NULL:
            text = f"{dest}={text}"
        if jump != NULL:
            text = f"{text};{jump}"
        return DisassembledInstruction(address, bits, text, False)

    def disassemble(
        self,
        words: Iterable[str | int],
        start_address: int = 0,
        count: Optional[int] = None,
    ) -> list[DisassembledInstruction]:
        """
        Disassemble a sequence of words.

        Blank lines in a text source are skipped and do not consume an
        address.

        Args:
            words: Binary strings (e.g. lines of a .hack file) or integers
            start_address: ROM address of the first word
            count: Maximum number of instructions (None = all)
        """
        result = []
        address = start_address
        for word in words:
            if count is not None and len(result) >= count:
                break
            if isinstance(word, str):
                word = word.strip()
                if not word:
                    continue
            result.append(self.disassemble_one(word, address))
            address += 1
        return result

    def to_source(self, words: Iterable[str | int]) -> str:
        """Disassemble words into assembly source text."""
        return "".join(f"{instr.text}\n" for instr in self.disassemble(words))

    @staticmethod
    def _normalize_word(word: str | int, address: int) -> str:
        if isinstance(word, int):
            if not 0 <= word < (1 << WORD_BITS):
                raise DisassemblerError(f"word {word} does not fit in 16 bits", address)
            return format(word, f"0{WORD_BITS}b")

        word = word.strip()
        if len(word) != WORD_BITS or any(c not in "01" for c in word):
            raise DisassemblerError(
                f"'{word}' is not a {WORD_BITS}-bit binary word", address
            )
        return word
