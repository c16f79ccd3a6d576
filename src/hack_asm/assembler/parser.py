"""
Hack Assembly Language Parser
=============================

This module turns cleaned lines into typed instructions. It runs after the
label pass, so every label is already in the symbol table; any other symbol
that an A-instruction references becomes a new variable.

Instruction Types
-----------------
1. **AInstruction**: ``@value``
   ```asm
   @21         ; decimal constant
   @R0         ; predefined symbol
   @LOOP       ; label
   @counter    ; variable (allocated on first use)
   ```

2. **CInstruction**: ``dest=comp;jump``
   ```asm
   D=M         ; dest + comp
   D;JGT       ; comp + jump
   AM=M-1;JNE  ; all three fields
   0;JMP       ; unconditional jump
   ```

Fields that are absent take the value ``"null"``, which is also the key used
by the encoding tables. Field text is kept verbatim; validation against the
tables happens in the encoder.
"""

from dataclasses import dataclass
from typing import Iterable, Union
import logging

from hack_asm.cpu import MAX_ADDRESS, NULL, is_valid_symbol
from hack_asm.errors import (
    AddressRangeError,
    AssemblySyntaxError,
    SourceLocation,
)
from hack_asm.assembler.normalizer import CleanLine
from hack_asm.assembler.symbols import SymbolTable

logger = logging.getLogger(__name__)


# =============================================================================
# Instruction Data Classes
# =============================================================================

@dataclass
class AInstruction:
    """
    A-instruction with its resolved value.

    Attributes:
        value: Constant or symbol address, 0..32767
        location: Source location (None for synthesized instructions)
        source: Original source line
        symbol: Symbol name if the operand was symbolic
    """
    value: int
    location: SourceLocation | None = None
    source: str | None = None
    symbol: str | None = None

    def __str__(self) -> str:
        return f"@{self.value}"


@dataclass
class CInstruction:
    """
    C-instruction with its three mnemonic fields.

    Attributes:
        dest: Destination mnemonic or "null"
        comp: Computation mnemonic
        jump: Jump mnemonic or "null"
        location: Source location (None for synthesized instructions)
        source: Original source line
    """
    comp: str
    dest: str = NULL
    jump: str = NULL
    location: SourceLocation | None = None
    source: str | None = None

    def __str__(self) -> str:
        text = self.comp
        if self.dest != NULL:
            text = f"{self.dest}={text}"
        if self.jump != NULL:
            text = f"{text};{self.jump}"
        return text


Instruction = Union[AInstruction, CInstruction]


# =============================================================================
# Parser
# =============================================================================

class Parser:
    """
    Parses cleaned lines into instructions.

    The symbol table must already contain every label. Variables are
    allocated in parse order.

    Usage:
        parser = Parser(table)
        instructions = parser.parse(cleaned_lines)
    """

    def __init__(self, symbols: SymbolTable):
        self._symbols = symbols

    def parse(self, lines: Iterable[CleanLine]) -> list[Instruction]:
        """Parse every cleaned line, preserving order."""
        instructions = [self.parse_line(line) for line in lines]
        logger.debug(
            f"Parsed {len(instructions)} instructions, "
            f"{len(self._symbols.variables())} variables"
        )
        return instructions

    def parse_line(self, line: CleanLine) -> Instruction:
        """Classify and parse one cleaned line."""
        if line.text.startswith("@"):
            return self._parse_a(line)
        return self._parse_c(line)

    def _parse_a(self, line: CleanLine) -> AInstruction:
        operand = line.text[1:]

        if operand.isdigit() and operand.isascii():
            value = int(operand)
            if value > MAX_ADDRESS:
                raise AddressRangeError(
                    value,
                    location=line.location,
                    source_line=line.source,
                )
            return AInstruction(value, line.location, line.source)

        if not is_valid_symbol(operand):
            message = "missing operand after '@'" if not operand else (
                f"invalid A-instruction operand '{operand}'"
            )
            raise AssemblySyntaxError(
                message,
                location=line.location,
                hint="operand must be a decimal constant or a symbol "
                     "not starting with a digit",
                source_line=line.source,
            )

        if self._symbols.contains(operand):
            value = self._symbols.get(operand)
        else:
            value = self._symbols.allocate(operand, line.location)
        return AInstruction(value, line.location, line.source, symbol=operand)

    def _parse_c(self, line: CleanLine) -> CInstruction:
        text = line.text
        dest = NULL
        jump = NULL

        if "=" in text:
            dest, text = text.split("=", 1)
        if ";" in text:
            text, jump = text.split(";", 1)

        return CInstruction(
            comp=text,
            dest=dest,
            jump=jump,
            location=line.location,
            source=line.source,
        )


def parse_lines(lines: Iterable[CleanLine], symbols: SymbolTable) -> list[Instruction]:
    """Convenience wrapper around Parser.parse()."""
    return Parser(symbols).parse(lines)
