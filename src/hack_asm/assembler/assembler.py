"""
Hack Assembler - Main Interface
===============================

This module provides the main Assembler class, which is the primary interface
for assembling Hack source code. It runs the normalizer, parser and encoder
over a fresh symbol table and writes the resulting .hack file.

Example Usage
-------------
>>> from hack_asm.assembler import Assembler
>>>
>>> asm = Assembler()
>>> words = asm.assemble_string('''
... @R0
... D=M
... (LOOP)
... @LOOP
... 0;JMP
... ''')
>>> words[0]
'0000000000000000'
>>> asm.write_hack("Loop.hack")

Command-Line Usage
------------------
    $ hackasm Max.asm -s Max.sym -l Max.lst

Options:
    -o, --output FILE      Output .hack file (default: input with .hack suffix)
    -s, --symbols FILE     Generate symbol file
    -l, --listing FILE     Generate listing file
    -v, --verbose          Verbose output
"""

from pathlib import Path
from typing import Iterable, Optional
import logging
import os
import tempfile

from hack_asm.assembler.encoder import Encoder
from hack_asm.assembler.normalizer import Normalizer
from hack_asm.assembler.parser import Instruction, Parser
from hack_asm.assembler.symbols import SymbolKind, SymbolTable

logger = logging.getLogger(__name__)


class Assembler:
    """
    Main Hack assembler class.

    Each assemble_* call starts from a fresh symbol table, so one instance
    can be reused for several sources. The results of the most recent run
    are available through the get_* and write_* methods.

    Attributes:
        verbose: If True, print progress messages
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the assembler.

        Args:
            verbose: Enable verbose output
        """
        self._verbose = verbose
        self._encoder = Encoder()
        self._symbols = SymbolTable()
        self._instructions: list[Instruction] = []
        self._words: list[str] = []
        self._source_file: Optional[Path] = None

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_lines(self, lines: Iterable[str], filename: str = "<input>") -> list[str]:
        """
        Assemble a sequence of source lines.

        The pipeline is:
        1. Normalize lines and collect labels (first pass)
        2. Parse cleaned lines, allocating variables (second pass)
        3. Encode instructions into 16-bit words

        Args:
            lines: Source lines
            filename: Name used in error messages

        Returns:
            Encoded words, one per instruction

        Raises:
            AssemblerError: On the first malformed line
        """
        symbols = SymbolTable()
        cleaned = Normalizer(symbols).normalize(lines, filename)

        if self._verbose:
            print(f"Pass 1: {len(cleaned)} instructions, {len(symbols.labels())} labels")

        instructions = Parser(symbols).parse(cleaned)
        words = self._encoder.encode_all(instructions)

        if self._verbose:
            print(f"Pass 2: {len(symbols.variables())} variables, {len(words)} words")

        # Only replace results once the whole run succeeded
        self._symbols = symbols
        self._instructions = instructions
        self._words = words
        return list(words)

    def assemble_string(self, source: str, filename: str = "<input>") -> list[str]:
        """
        Assemble source code from a string.

        Args:
            source: Assembly source code
            filename: Virtual filename for error messages

        Returns:
            Encoded words, one per instruction
        """
        return self.assemble_lines(source.splitlines(), filename)

    def assemble(self, source: str, filename: str = "<input>",
                 output_path: str | Path | None = None) -> list[str]:
        """
        Assemble source code and optionally write the .hack file.

        Args:
            source: Assembly source code
            filename: Virtual filename for error messages
            output_path: Optional .hack output path

        Returns:
            Encoded words, one per instruction
        """
        words = self.assemble_string(source, filename)
        if output_path:
            self.write_hack(output_path)
        return words

    def assemble_file(self, filepath: str | Path) -> list[str]:
        """
        Assemble source code from a file.

        Args:
            filepath: Path to assembly source file

        Returns:
            Encoded words, one per instruction

        Raises:
            AssemblerError: If assembly fails
            OSError: If the source file cannot be read
        """
        filepath = Path(filepath)
        self._source_file = filepath

        if self._verbose:
            print(f"Assembling {filepath}...")

        with open(filepath, encoding="utf-8") as f:
            return self.assemble_lines(f, str(filepath))

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_words(self) -> list[str]:
        """Return the encoded words of the last run."""
        return list(self._words)

    def get_code(self) -> str:
        """Return the .hack file contents of the last run."""
        return "".join(f"{word}\n" for word in self._words)

    def get_instructions(self) -> list[Instruction]:
        """Return the parsed instructions of the last run."""
        return list(self._instructions)

    def get_symbol_table(self) -> SymbolTable:
        return self._symbols

    def get_symbols(self) -> dict[str, int]:
        """
        Get the symbol table.

        Returns:
            Dictionary mapping symbol names (predefined included) to addresses
        """
        return self._symbols.as_dict()

    def get_listing(self) -> str:
        """
        Get the assembly listing as a string.

        Returns:
            Listing with ROM addresses, words, line numbers and source,
            followed by the labels and variables
        """
        lines = []
        lines.append("Hack Assembler Listing")
        lines.append("=" * 60)
        lines.append("")
        lines.append("ROM    Word              Line  Source")
        lines.append("-" * 60)
        for address, (inst, word) in enumerate(zip(self._instructions, self._words)):
            line_no = inst.location.line if inst.location else 0
            source = (inst.source or str(inst)).strip()
            lines.append(f"{address:5d}  {word}  {line_no:4d}  {source}")
        lines.append("")
        lines.append("Symbol Table")
        lines.append("-" * 30)
        for sym in self._user_symbols():
            lines.append(f"{sym.name:20s} = {sym.value:5d}  ({sym.kind})")
        return "\n".join(lines) + "\n"

    def write_hack(self, filepath: str | Path) -> None:
        """
        Write the encoded words to a .hack file.

        The file is written next to its final location and renamed into
        place, so an existing file is never left half-written.

        Args:
            filepath: Output file path
        """
        _write_text_atomic(Path(filepath), self.get_code())
        logger.debug(f"Wrote {len(self._words)} words to {filepath}")

        if self._verbose:
            print(f"Wrote {filepath}")

    def write_listing(self, filepath: str | Path) -> None:
        """
        Write assembly listing file.

        Args:
            filepath: Output file path
        """
        _write_text_atomic(Path(filepath), self.get_listing())

        if self._verbose:
            print(f"Wrote listing to {filepath}")

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write symbol table file.

        Format: name address kind (one per line, labels and variables only)
        """
        lines = ["# Symbol table", "# Generated by hackasm"]
        for sym in sorted(self._user_symbols(), key=lambda s: s.name):
            lines.append(f"{sym.name} {sym.value} {sym.kind}")
        _write_text_atomic(Path(filepath), "\n".join(lines) + "\n")

        if self._verbose:
            print(f"Wrote symbols to {filepath}")

    def _user_symbols(self):
        return [
            sym for sym in self._symbols
            if sym.kind is not SymbolKind.PREDEFINED
        ]


# =============================================================================
# File Helpers
# =============================================================================

def _write_text_atomic(filepath: Path, text: str) -> None:
    """Write text to a temporary file in the target directory, then rename."""
    directory = filepath.parent
    fd, tmp_name = tempfile.mkstemp(
        dir=directory, prefix=f".{filepath.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.replace(tmp_name, filepath)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, filename: str = "<input>") -> list[str]:
    """
    Convenience function to assemble source code.

    Args:
        source: Assembly source code
        filename: Virtual filename for errors

    Returns:
        Encoded words

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_string(source, filename)


def assemble_file(filepath: str | Path) -> list[str]:
    """
    Convenience function to assemble a file.

    Args:
        filepath: Path to source file

    Returns:
        Encoded words

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_file(filepath)
