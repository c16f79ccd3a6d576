"""
Hack Instruction Encoder
========================

Maps parsed instructions to 16-character binary strings.

A-instruction::

    0vvv vvvv vvvv vvvv        value, MSB first

C-instruction::

    111a c1c2c3c4c5c6 d1d2d3 j1j2j3

If comp mentions M, the a bit is set and the A-form of the mnemonic is used
for the table lookup. Every field must be present in its table; unknown
mnemonics raise InvalidMnemonicError with the line they came from.
"""

from typing import Iterable

from hack_asm.cpu import (
    A_PREFIX,
    C_PREFIX,
    COMP_TABLE,
    DEST_TABLE,
    JUMP_TABLE,
    MAX_ADDRESS,
    WORD_BITS,
    comp_bits,
)
from hack_asm.errors import AddressRangeError, InvalidMnemonicError
from hack_asm.assembler.parser import AInstruction, CInstruction, Instruction


class Encoder:
    """
    Encodes instructions into Hack machine words.

    The encoder is stateless; one instance can be shared across runs.

    Usage:
        encoder = Encoder()
        word = encoder.encode(CInstruction(comp="D+1", dest="M"))
        # '1110011111001000'
    """

    def encode(self, instruction: Instruction) -> str:
        """
        Encode one instruction.

        Returns:
            Exactly 16 characters of '0'/'1'

        Raises:
            InvalidMnemonicError: If a C-instruction field is unknown
            AddressRangeError: If an A-instruction value exceeds 15 bits
        """
        if isinstance(instruction, AInstruction):
            return self._encode_a(instruction)
        return self._encode_c(instruction)

    def encode_all(self, instructions: Iterable[Instruction]) -> list[str]:
        """Encode a sequence of instructions in order."""
        return [self.encode(inst) for inst in instructions]

    def _encode_a(self, inst: AInstruction) -> str:
        if not 0 <= inst.value <= MAX_ADDRESS:
            raise AddressRangeError(
                inst.value,
                location=inst.location,
                source_line=inst.source,
            )
        return A_PREFIX + format(inst.value, f"0{WORD_BITS - 1}b")

    def _encode_c(self, inst: CInstruction) -> str:
        comp = comp_bits(inst.comp)
        if comp is None:
            raise self._unknown("comp", inst.comp, inst, list(COMP_TABLE))

        dest = DEST_TABLE.get(inst.dest)
        if dest is None:
            raise self._unknown("dest", inst.dest, inst, list(DEST_TABLE))

        jump = JUMP_TABLE.get(inst.jump)
        if jump is None:
            raise self._unknown("jump", inst.jump, inst, list(JUMP_TABLE))

        return C_PREFIX + comp + dest + jump

    @staticmethod
    def _unknown(
        field: str,
        token: str,
        inst: CInstruction,
        valid: list[str],
    ) -> InvalidMnemonicError:
        return InvalidMnemonicError(
            field,
            token,
            location=inst.location,
            source_line=inst.source,
            valid=valid,
        )


_ENCODER = Encoder()


def encode_instruction(instruction: Instruction) -> str:
    """Encode one instruction with a shared Encoder."""
    return _ENCODER.encode(instruction)
