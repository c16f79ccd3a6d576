# =============================================================================
# conftest.py - Shared Test Fixtures
# =============================================================================
# Sample programs used across the assembler, disassembler and CLI tests.
# =============================================================================

import pytest


MAX_ASM = """\
// Computes R2 = max(R0, R1)
   @R0
   D=M              // D = first number
   @R1
   D=D-M            // D = first number - second number
   @OUTPUT_FIRST
   D;JGT            // if D>0 (first is greater) goto output_first
   @R1
   D=M              // D = second number
   @OUTPUT_D
   0;JMP            // goto output_d
(OUTPUT_FIRST)
   @R0
   D=M              // D = first number
(OUTPUT_D)
   @R2
   M=D              // M[2] = D (greatest number)
(INFINITE_LOOP)
   @INFINITE_LOOP
   0;JMP            // infinite loop
"""

MAX_HACK = [
    "0000000000000000",
    "1111110000010000",
    "0000000000000001",
    "1111010011010000",
    "0000000000001010",
    "1110001100000001",
    "0000000000000001",
    "1111110000010000",
    "0000000000001100",
    "1110101010000111",
    "0000000000000000",
    "1111110000010000",
    "0000000000000010",
    "1110001100001000",
    "0000000000001110",
    "1110101010000111",
]

# Sums 1..100 into "sum" using variables "i" and "sum"
SUM_ASM = """\
    @i
    M=1         // i = 1
    @sum
    M=0         // sum = 0
(LOOP)
    @i
    D=M
    @100
    D=D-A
    @END
    D;JGT       // if (i - 100) > 0 goto END
    @i
    D=M
    @sum
    M=D+M       // sum += i
    @i
    M=M+1       // i++
    @LOOP
    0;JMP
(END)
    @END
    0;JMP
"""


@pytest.fixture
def max_source() -> str:
    return MAX_ASM


@pytest.fixture
def max_hack() -> list[str]:
    return list(MAX_HACK)


@pytest.fixture
def sum_source() -> str:
    return SUM_ASM


@pytest.fixture
def max_file(tmp_path):
    """Max.asm written to a temporary directory."""
    path = tmp_path / "Max.asm"
    path.write_text(MAX_ASM, encoding="utf-8")
    return path
