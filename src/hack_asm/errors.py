"""
Hack SDK Error Hierarchy
========================

This module defines the exception hierarchy for the Hack assembler toolchain.
All exceptions inherit from HackError, allowing callers to catch all
toolchain errors with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
├── AssemblerError (assembler-related)
│   ├── AssemblySyntaxError - malformed A-instruction operand
│   ├── AddressRangeError - A-instruction constant does not fit in 15 bits
│   ├── InvalidLabelError - malformed (LABEL) declaration
│   ├── DuplicateSymbolError - label declared more than once
│   ├── UndefinedSymbolError - lookup of a symbol that is not in the table
│   └── InvalidMnemonicError - unknown comp, dest or jump field
└── DisassemblerError - word that does not decode to a Hack instruction

Error messages follow this format:
    filename:line: error: description
        source_line_text
    hint: suggestion for fixing (when available)

The assembler stops at the first error; there is no error collection.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all Hack toolchain errors.

        try:
            assembler.assemble_file("Max.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed), 0 when unknown
    """
    filename: str
    line: int
    column: int = 0

    def __str__(self) -> str:
        """Format as 'filename:line' or 'filename:line:column'."""
        if self.column > 0:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.filename}:{self.line}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for all assembler-related errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The original source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        """Line number of the error, if known."""
        return self.location.line if self.location else None

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Max.asm:7: error: unknown comp mnemonic 'D+X'
                D=D+X
            hint: valid comp mnemonics are ...
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line.strip()}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class AssemblySyntaxError(AssemblerError):
    """
    Syntax error in assembly source code.

    Raised when an A-instruction operand is neither a decimal literal nor a
    legal symbol, for example ``@`` on its own, ``@-1`` or ``@12abc``.
    """
    pass


class AddressRangeError(AssemblerError):
    """
    A-instruction constant does not fit in 15 bits.

    The A-instruction word reserves its MSB for the opcode, so the largest
    loadable constant is 32767.
    """

    def __init__(
        self,
        value: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.value = value
        super().__init__(
            f"constant {value} is out of range for an A-instruction",
            location=location,
            hint="A-instruction constants must be between 0 and 32767",
            source_line=source_line,
        )


class InvalidLabelError(AssemblerError):
    """
    Malformed label declaration.

    Examples:
        - ``(LOOP`` (missing closing parenthesis)
        - ``()`` (empty name)
        - ``(1ST)`` (name starts with a digit)
    """
    pass


class DuplicateSymbolError(AssemblerError):
    """
    Label declared more than once.

    Includes the location of the original declaration in the hint.
    """

    def __init__(
        self,
        symbol: str,
        location: Optional[SourceLocation] = None,
        original_location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        self.original_location = original_location

        hint = None
        if original_location:
            hint = f"'{symbol}' was first defined at {original_location}"

        super().__init__(
            f"duplicate label '{symbol}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UndefinedSymbolError(AssemblerError):
    """Lookup of a symbol that is not present in the symbol table."""

    def __init__(
        self,
        symbol: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        super().__init__(
            f"undefined symbol '{symbol}'",
            location=location,
            source_line=source_line,
        )


class InvalidMnemonicError(AssemblerError):
    """
    Unknown C-instruction mnemonic.

    Raised by the encoder when the comp, dest or jump field is not present
    in its encoding table. The offending field and token are kept as
    attributes for programmatic inspection.

    Example:
        D=D*A   ; Error: unknown comp mnemonic 'D*A'
    """

    def __init__(
        self,
        field: str,
        token: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        valid: Optional[list[str]] = None,
    ):
        self.field = field
        self.token = token
        self.valid = valid or []

        hint = None
        if self.valid:
            hint = f"valid {field} mnemonics: {', '.join(self.valid)}"

        super().__init__(
            f"unknown {field} mnemonic '{token}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


# =============================================================================
# Disassembler Exceptions
# =============================================================================

class DisassemblerError(HackError):
    """
    Word that does not decode to a Hack instruction.

    Raised when reading a .hack file that contains:
    - a line that is not exactly 16 binary digits
    - a C-instruction whose two bits after the leading 1 are not 11
    - a comp bit pattern that is not in the encoding table
    """

    def __init__(self, message: str, address: Optional[int] = None):
        self.address = address
        if address is not None:
            message = f"ROM[{address}]: {message}"
        super().__init__(message)
