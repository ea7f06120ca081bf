"""Linear disassembler for EVM bytecode."""

from __future__ import annotations

from .bytecode import (
    Disassembly,
    DisassemblyError,
    HexDecodeError,
    IncompletePush,
    Instruction,
    InstructionDecoder,
    OpCode,
    UnknownOpcode,
    disassemble,
    disassemble_hex,
)

__version__ = "0.1.0"

__all__ = [
    "Disassembly",
    "DisassemblyError",
    "HexDecodeError",
    "IncompletePush",
    "Instruction",
    "InstructionDecoder",
    "OpCode",
    "UnknownOpcode",
    "__version__",
    "disassemble",
    "disassemble_hex",
]
