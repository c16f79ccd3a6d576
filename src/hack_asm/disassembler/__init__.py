"""
Hack SDK Disassembler Module
============================

This module turns Hack machine code (.hack text files) back into assembly.
It is used to inspect assembler output and to check that encoding round-trips.

Usage:
    from hack_asm.disassembler import HackDisassembler

    disasm = HackDisassembler()
    for instr in disasm.disassemble(lines):
        print(instr)
"""

from .hack import HackDisassembler, DisassembledInstruction

__all__ = [
    "HackDisassembler",
    "DisassembledInstruction",
]
