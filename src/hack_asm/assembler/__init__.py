"""
Hack Assembler
==============

This package provides a two-pass assembler for the Hack computer. It
converts Hack assembly source (.asm) into text machine code (.hack): one
line of sixteen '0'/'1' characters per instruction.

Main Components
---------------
- **Assembler**: Main assembler class that orchestrates the assembly process
- **Normalizer**: Strips comments and whitespace, records labels (pass 1)
- **SymbolTable**: Predefined symbols, labels and variables
- **Parser**: Parses cleaned lines into A- and C-instructions (pass 2)
- **Encoder**: Encodes instructions into 16-bit words

Assembly Process
----------------
1. **Label pass (Normalizer)**:
   - Drop blank lines and comments, remove whitespace
   - Bind each ``(LABEL)`` to the ROM address of the next instruction

2. **Parse pass (Parser)**:
   - Classify each line as A- or C-instruction
   - Resolve symbols; allocate unseen ones as variables from RAM[16]

3. **Encoding (Encoder)**:
   - Look up comp/dest/jump in the fixed tables
   - Fail on the first unknown mnemonic

Example Usage
-------------
>>> from hack_asm.assembler import Assembler
>>> asm = Assembler()
>>> asm.assemble_string("@SCREEN\\nM=-1")
['0100000000000000', '1110111010001000']
"""

from hack_asm.assembler.assembler import Assembler, assemble, assemble_file
from hack_asm.assembler.normalizer import CleanLine, Normalizer, clean_line, normalize
from hack_asm.assembler.symbols import Symbol, SymbolKind, SymbolTable
from hack_asm.assembler.parser import (
    AInstruction,
    CInstruction,
    Instruction,
    Parser,
    parse_lines,
)
from hack_asm.assembler.encoder import Encoder, encode_instruction

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Normalizer
    "CleanLine",
    "Normalizer",
    "clean_line",
    "normalize",
    # Symbol table
    "Symbol",
    "SymbolKind",
    "SymbolTable",
    # Parser
    "AInstruction",
    "CInstruction",
    "Instruction",
    "Parser",
    "parse_lines",
    # Encoder
    "Encoder",
    "encode_instruction",
]
