"""
Hack Source Normalizer
======================

First pass of the assembler. Turns raw source lines into cleaned lines and
records every label declaration in the symbol table.

Each source line goes through these steps, in order:

1. Drop the line if it is empty.
2. Remove all whitespace.
3. Drop the line if it starts with ``/`` (full-line comment).
4. Truncate at the first ``/`` (inline comment).
5. Drop the line if nothing is left.
6. ``(NAME)``: bind NAME to the instruction counter, emit nothing.
7. Anything else: emit it as a cleaned line and advance the counter.

The instruction counter is the ROM address the next emitted line will
occupy, so a label always points at the instruction that follows it.

Example
-------
Source::

    // Computes max(R0, R1)
    @R0
    D=M            // D = first number
    (LOOP)
    @LOOP
    0;JMP

Cleaned lines: ``@R0``, ``D=M``, ``@LOOP``, ``0;JMP``; LOOP -> 2.
"""

from dataclasses import dataclass
from typing import Iterable
import logging

from hack_asm.cpu import is_valid_symbol
from hack_asm.errors import (
    DuplicateSymbolError,
    InvalidLabelError,
    SourceLocation,
)
from hack_asm.assembler.symbols import SymbolKind, SymbolTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CleanLine:
    """
    A source line ready for the parser.

    Attributes:
        text: Line with comments and whitespace removed
        location: Where the line came from
        source: The original, unmodified line text
    """
    text: str
    location: SourceLocation
    source: str

    def __str__(self) -> str:
        return self.text


def clean_line(line: str) -> str:
    """
    Strip whitespace and comments from one line.

    Returns an empty string when nothing meaningful remains. Applying the
    function to its own output returns the same string.
    """
    line = "".join(line.split())
    if not line or line[0] == "/":
        return ""
    return line.split("/", 1)[0]


class Normalizer:
    """
    Normalizer and label pass.

    Usage:
        table = SymbolTable()
        lines = Normalizer(table).normalize(source.splitlines(), "Max.asm")
    """

    def __init__(self, symbols: SymbolTable):
        self._symbols = symbols
        self._counter = 0

    @property
    def instruction_counter(self) -> int:
        """ROM address of the next cleaned line."""
        return self._counter

    def normalize(
        self,
        lines: Iterable[str],
        filename: str = "<input>",
    ) -> list[CleanLine]:
        """
        Clean a sequence of source lines and collect labels.

        Args:
            lines: Source lines, with or without trailing newlines
            filename: Name used in error locations

        Returns:
            Cleaned lines in source order

        Raises:
            InvalidLabelError: For a malformed (LABEL) line
            DuplicateSymbolError: For a label declared twice
        """
        cleaned: list[CleanLine] = []

        for line_number, raw in enumerate(lines, start=1):
            text = clean_line(raw)
            if not text:
                continue

            location = SourceLocation(filename, line_number)
            if text[0] == "(":
                self._define_label(text, location, raw)
                continue

            cleaned.append(CleanLine(text, location, raw.rstrip("\r\n")))
            self._counter += 1

        logger.debug(
            f"Normalized {filename}: {len(cleaned)} instructions, "
            f"{len(self._symbols.labels())} labels"
        )
        return cleaned

    def _define_label(self, text: str, location: SourceLocation, raw: str) -> None:
        """Bind a (LABEL) declaration to the current instruction counter."""
        source_line = raw.rstrip("\r\n")

        if not text.endswith(")"):
            raise InvalidLabelError(
                f"label declaration '{text}' is missing ')'",
                location=location,
                source_line=source_line,
            )

        name = text[1:-1]
        if not name:
            raise InvalidLabelError(
                "empty label name",
                location=location,
                source_line=source_line,
            )
        if not is_valid_symbol(name):
            raise InvalidLabelError(
                f"invalid label name '{name}'",
                location=location,
                hint="labels use letters, digits, '_', '.', '$', ':' "
                     "and must not start with a digit",
                source_line=source_line,
            )

        existing = self._symbols.lookup(name)
        if existing is not None and existing.kind is SymbolKind.LABEL:
            raise DuplicateSymbolError(
                name,
                location=location,
                original_location=existing.location,
                source_line=source_line,
            )

        self._symbols.add(name, self._counter, SymbolKind.LABEL, location)
        logger.debug(f"Label '{name}' -> ROM[{self._counter}]")


def normalize(
    lines: Iterable[str],
    symbols: SymbolTable,
    filename: str = "<input>",
) -> list[CleanLine]:
    """Convenience wrapper around Normalizer.normalize()."""
    return Normalizer(symbols).normalize(lines, filename)
