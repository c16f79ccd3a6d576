"""
Hack SDK CPU Package
====================

This package contains the Hack machine definitions shared by the assembler
and the disassembler.

Modules:
    hack: C-instruction field tables, predefined symbols, address limits,
          and helpers for encoding/decoding mnemonics.

Both the assembler (which encodes instructions) and the disassembler (which
decodes them) use the same tables, so the two can never disagree about a
mnemonic's spelling.

Usage:
    from hack_asm.cpu import (
        COMP_TABLE,
        DEST_TABLE,
        JUMP_TABLE,
        comp_bits,
    )
"""

# =============================================================================
# Public API Exports
# =============================================================================

from hack_asm.cpu.hack import (
    # Sentinel and limits
    NULL,
    WORD_BITS,
    MAX_ADDRESS,
    VARIABLE_BASE,
    A_PREFIX,
    C_PREFIX,
    # Encoding tables
    DEST_TABLE,
    JUMP_TABLE,
    COMP_TABLE,
    DEST_BY_BITS,
    JUMP_BY_BITS,
    COMP_BY_BITS,
    PREDEFINED_SYMBOLS,
    # Lookup functions
    is_valid_symbol,
    comp_bits,
    comp_mnemonic,
)

__all__ = [
    "NULL",
    "WORD_BITS",
    "MAX_ADDRESS",
    "VARIABLE_BASE",
    "A_PREFIX",
    "C_PREFIX",
    "DEST_TABLE",
    "JUMP_TABLE",
    "COMP_TABLE",
    "DEST_BY_BITS",
    "JUMP_BY_BITS",
    "COMP_BY_BITS",
    "PREDEFINED_SYMBOLS",
    "is_valid_symbol",
    "comp_bits",
    "comp_mnemonic",
]
