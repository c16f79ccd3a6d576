"""
Hack Instruction Set Definition
===============================

This module defines the Hack machine's instruction encoding: the three
C-instruction field tables, the predefined symbols, and the address limits
used by the assembler and the disassembler.

The Hack computer is the 16-bit machine built in the Nand2Tetris course.
Every instruction is exactly one 16-bit word.

Instruction Formats
-------------------
1. **A-instruction**: ``@value``
   - ``0vvv vvvv vvvv vvvv``
   - Loads a 15-bit constant into the A register.

2. **C-instruction**: ``dest=comp;jump``
   - ``111a cccc ccdd djjj``
   - ``a`` selects between A (0) and M (1) as the second ALU operand.
   - ``c1..c6`` select the ALU function.
   - ``d1..d3`` select the destination registers.
   - ``j1..j3`` select the jump condition.

The comp table is keyed by the A-form of each mnemonic. The M-form is
obtained by substituting ``M`` for ``A`` and setting the ``a`` bit.

Reference
---------
- The Elements of Computing Systems, chapter 6
- https://www.nand2tetris.org/project06
"""

# =============================================================================
# Sentinel and Limits
# =============================================================================

# Textual value of an absent dest or jump field. Doubles as the table key.
NULL = "null"

WORD_BITS = 16
MAX_ADDRESS = (1 << 15) - 1     # Largest A-instruction constant (32767)
VARIABLE_BASE = 16              # First RAM address handed out to variables

A_PREFIX = "0"
C_PREFIX = "111"


# =============================================================================
# C-Instruction Field Tables
# =============================================================================
# Keys are the mnemonic spellings as written in source; values are the bit
# strings that go into the instruction word, MSB first.
# =============================================================================

DEST_TABLE: dict[str, str] = {
    NULL:  "000",
    "M":   "001",
    "D":   "010",
    "MD":  "011",
    "A":   "100",
    "AM":  "101",
    "AD":  "110",
    "AMD": "111",
}

JUMP_TABLE: dict[str, str] = {
    NULL:  "000",
    "JGT": "001",
    "JEQ": "010",
    "JGE": "011",
    "JLT": "100",
    "JNE": "101",
    "JLE": "110",
    "JMP": "111",
}

# A-form only; the a bit is computed separately.
COMP_TABLE: dict[str, str] = {
    "0":   "101010",
    "1":   "111111",
    "-1":  "111010",
    "D":   "001100",
    "A":   "110000",
    "!D":  "001101",
    "!A":  "110001",
    "-D":  "001111",
    "-A":  "110011",
    "D+1": "011111",
    "A+1": "110111",
    "D-1": "001110",
    "A-1": "110010",
    "D+A": "000010",
    "D-A": "010011",
    "A-D": "000111",
    "D&A": "000000",
    "D|A": "010101",
}

# Reverse lookups for the disassembler
DEST_BY_BITS: dict[str, str] = {bits: name for name, bits in DEST_TABLE.items()}
JUMP_BY_BITS: dict[str, str] = {bits: name for name, bits in JUMP_TABLE.items()}
COMP_BY_BITS: dict[str, str] = {bits: name for name, bits in COMP_TABLE.items()}


# =============================================================================
# Predefined Symbols
# =============================================================================

PREDEFINED_SYMBOLS: dict[str, int] = {
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    **{f"R{i}": i for i in range(16)},
    "SCREEN": 16384,
    "KBD": 24576,
}


# =============================================================================
# Lookup Helpers
# =============================================================================

SYMBOL_START_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_.$:"
)
SYMBOL_CHARS = SYMBOL_START_CHARS | frozenset("0123456789")


def is_valid_symbol(name: str) -> bool:
    """
    Check whether a name is a legal Hack symbol.

    A symbol is a non-empty sequence of letters, digits, underscore, dot,
    dollar sign and colon that does not begin with a digit.
    """
    if not name or name[0] not in SYMBOL_START_CHARS:
        return False
    return all(c in SYMBOL_CHARS for c in name)


def comp_bits(comp: str) -> str | None:
    """
    Return the 7 comp bits (``a`` followed by ``c1..c6``) for a mnemonic.

    Mnemonics using M are looked up through their A-form with the a bit
    set. Returns None if the mnemonic is not in the table.
    """
    a_bit = "0"
    if "M" in comp:
        a_bit = "1"
        comp = comp.replace("M", "A")
    bits = COMP_TABLE.get(comp)
    if bits is None:
        return None
    return a_bit + bits


def comp_mnemonic(bits: str) -> str | None:
    """Inverse of comp_bits(); returns None for unused bit patterns."""
    name = COMP_BY_BITS.get(bits[1:])
    if name is None:
        return None
    if bits[0] == "1":
        if "A" not in name:
            return None
        name = name.replace("A", "M")
    return name
