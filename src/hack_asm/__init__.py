"""
Hack SDK - Assembler Toolchain for the Hack Computer
====================================================

This package provides an assembler and disassembler for the Hack computer,
the 16-bit machine built in the Nand2Tetris course ("The Elements of
Computing Systems").

Hack programs are written in a small assembly language (.asm) and loaded
into ROM as text files of binary words (.hack), one 16-bit instruction per
line.

Main Components
---------------
- **assembler**: Two-pass Hack assembler (hackasm)
    Converts assembly source files (.asm) to machine code (.hack)

- **disassembler**: Hack disassembler (hackdisasm)
    Converts machine code (.hack) back to assembly

- **cpu**: Encoding tables and predefined symbols shared by both

Quick Start
-----------
Assemble a program:
    >>> from hack_asm.assembler import Assembler
    >>> asm = Assembler()
    >>> words = asm.assemble_file("Max.asm")
    >>> asm.write_hack("Max.hack")

Disassemble it again:
    >>> from hack_asm.disassembler import HackDisassembler
    >>> print(HackDisassembler().to_source(words))

Or use the command-line tools:
    $ hackasm Max.asm
    $ hackdisasm Max.hack

Reference Documentation
-----------------------
- Nand2Tetris project 6: https://www.nand2tetris.org/project06

Version History
---------------
1.0.0 - Initial release with assembler and disassembler
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hack_asm.assembler import (
    Assembler,
    AInstruction,
    CInstruction,
    Encoder,
    Normalizer,
    Parser,
    SymbolTable,
    assemble,
    assemble_file,
)
from hack_asm.disassembler import HackDisassembler, DisassembledInstruction
from hack_asm.errors import (
    HackError,
    SourceLocation,
    AssemblerError,
    AssemblySyntaxError,
    AddressRangeError,
    InvalidLabelError,
    DuplicateSymbolError,
    UndefinedSymbolError,
    InvalidMnemonicError,
    DisassemblerError,
)

__all__ = [
    # Version info
    "__version__",
    # Assembler
    "Assembler",
    "AInstruction",
    "CInstruction",
    "Encoder",
    "Normalizer",
    "Parser",
    "SymbolTable",
    "assemble",
    "assemble_file",
    # Disassembler
    "HackDisassembler",
    "DisassembledInstruction",
    # Exception hierarchy
    "HackError",
    "SourceLocation",
    "AssemblerError",
    "AssemblySyntaxError",
    "AddressRangeError",
    "InvalidLabelError",
    "DuplicateSymbolError",
    "UndefinedSymbolError",
    "InvalidMnemonicError",
    "DisassemblerError",
]
