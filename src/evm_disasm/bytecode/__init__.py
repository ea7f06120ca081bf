"""EVM bytecode decoding package."""

from __future__ import annotations

from .decoder import (
    DecoderState,
    Disassembly,
    Instruction,
    InstructionDecoder,
    disassemble,
    disassemble_hex,
    iter_instructions,
)
from .errors import DisassemblyError, HexDecodeError, IncompletePush, UnknownOpcode
from .hexcodec import decode_hex, encode_hex, strip_hex_prefix
from .opcodes import (
    MNEMONICS,
    OPCODES_BY_VALUE,
    PUSH_IMMEDIATE_SIZES,
    OpCode,
    is_push,
    mnemonic,
    push_immediate_length,
    resolve,
)

__all__ = [
    "MNEMONICS",
    "OPCODES_BY_VALUE",
    "PUSH_IMMEDIATE_SIZES",
    "DecoderState",
    "Disassembly",
    "DisassemblyError",
    "HexDecodeError",
    "IncompletePush",
    "Instruction",
    "InstructionDecoder",
    "OpCode",
    "UnknownOpcode",
    "decode_hex",
    "disassemble",
    "disassemble_hex",
    "encode_hex",
    "is_push",
    "iter_instructions",
    "mnemonic",
    "push_immediate_length",
    "resolve",
    "strip_hex_prefix",
]
