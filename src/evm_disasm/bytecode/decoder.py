"""Linear-sweep EVM instruction decoder."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from .errors import DisassemblyError, IncompletePush, UnknownOpcode
from .hexcodec import decode_hex, encode_hex
from .opcodes import OpCode, is_push, mnemonic, push_immediate_length, resolve

__all__ = [
    "DecoderState",
    "Disassembly",
    "Instruction",
    "InstructionDecoder",
    "disassemble",
    "disassemble_hex",
    "iter_instructions",
]

logger = logging.getLogger(__name__)

_NO_OPERAND = memoryview(b"")


@dataclass(slots=True, frozen=True, repr=False)
class Instruction:
    offset: int
    opcode: OpCode
    # Read-only view into the decoded buffer, empty unless PUSH1..PUSH32.
    operand: memoryview = _NO_OPERAND

    @property
    def mnemonic(self) -> str:
        return mnemonic(self.opcode)

    @property
    def size(self) -> int:
        return 1 + len(self.operand)

    @property
    def next_offset(self) -> int:
        return self.offset + self.size

    @property
    def operand_hex(self) -> str:
        return encode_hex(self.operand)

    @property
    def push_value(self) -> int | None:
        if not self.operand:
            return None
        return int.from_bytes(self.operand, "big", signed=False)

    def __repr__(self) -> str:
        return f"Instruction(offset={self.offset}, opcode={self.mnemonic}, operand={bytes(self.operand)!r})"


class DecoderState(Enum):
    NOT_STARTED = "not_started"
    POSITIONED = "positioned"
    ERRORED = "errored"
    EXHAUSTED = "exhausted"


class InstructionDecoder:
    """Lazy, fail-stop decoder over a borrowed byte buffer.

    Iterating yields :class:`Instruction` objects in ascending offset order.
    Iteration ends quietly at end of input or at the first malformed byte;
    in the latter case the error is kept on :attr:`error` instead of being
    raised, and instructions already produced remain valid. A decoder is
    single-use: once drained it yields nothing further.
    """

    def __init__(self, code: bytes | bytearray | memoryview) -> None:
        self._code = memoryview(code).toreadonly().cast("B")
        self._pc = 0
        self._operand_length = 0
        self._state = DecoderState.NOT_STARTED
        self._error: DisassemblyError | None = None

    @property
    def code(self) -> memoryview:
        return self._code

    @property
    def pc(self) -> int:
        return self._pc

    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def error(self) -> DisassemblyError | None:
        return self._error

    @property
    def ok(self) -> bool:
        return self._error is None

    def raise_for_error(self) -> None:
        if self._error is not None:
            raise self._error

    def __iter__(self) -> Iterator[Instruction]:
        return self

    def __next__(self) -> Instruction:
        if self._state in (DecoderState.ERRORED, DecoderState.EXHAUSTED):
            raise StopIteration

        if self._state is DecoderState.NOT_STARTED:
            self._state = DecoderState.POSITIONED
        else:
            self._pc += 1 + self._operand_length

        pc = self._pc
        length = len(self._code)
        if pc >= length:
            self._state = DecoderState.EXHAUSTED
            raise StopIteration

        raw_opcode = self._code[pc]
        try:
            opcode = resolve(raw_opcode)
        except UnknownOpcode:
            self._fail(UnknownOpcode(raw_opcode, pc))
            raise StopIteration from None

        if is_push(opcode):
            end = pc + 1 + push_immediate_length(opcode)
            if end > length:
                self._fail(IncompletePush(pc, opcode))
                raise StopIteration
            operand = self._code[pc + 1 : end]
        else:
            operand = _NO_OPERAND

        self._operand_length = len(operand)
        return Instruction(offset=pc, opcode=opcode, operand=operand)

    def _fail(self, error: DisassemblyError) -> None:
        logger.debug("decoding stopped at offset %d: %s", self._pc, error)
        self._error = error
        self._state = DecoderState.ERRORED


@dataclass(slots=True)
class Disassembly:
    """A drained decode: every instruction produced plus the terminal error, if any."""

    instructions: list[Instruction] = field(default_factory=list)
    error: DisassemblyError | None = None
    size: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)


def iter_instructions(code: bytes | bytearray | memoryview) -> InstructionDecoder:
    return InstructionDecoder(code)


def disassemble(code: bytes | bytearray | memoryview) -> Disassembly:
    """Decode ``code`` completely and return the instructions with the terminal error."""
    decoder = InstructionDecoder(code)
    instructions = list(decoder)
    return Disassembly(instructions=instructions, error=decoder.error, size=len(decoder.code))


def disassemble_hex(text: str) -> Disassembly:
    """Hex-decode ``text`` and disassemble it. Raises ``HexDecodeError`` for malformed hex."""
    return disassemble(decode_hex(text))
