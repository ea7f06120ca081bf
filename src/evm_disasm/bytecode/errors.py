"""Decode and boundary errors."""
from __future__ import annotations

__all__ = ["DisassemblyError", "HexDecodeError", "IncompletePush", "UnknownOpcode"]


class DisassemblyError(ValueError):
    """Terminal error recorded by a decoder."""

    kind = "disassembly"

    def _key(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class UnknownOpcode(DisassemblyError):
    kind = "unknown_opcode"

    def __init__(self, value: int, offset: int | None = None) -> None:
        self.value = value
        self.offset = offset
        message = f"opcode 0x{value:02x} does not exist"
        if offset is not None:
            message = f"{message} at offset {offset}"
        super().__init__(message)

    def __reduce__(self):
        return type(self), (self.value, self.offset)

    # Offset is context only; equality follows the byte value.
    def _key(self) -> tuple:
        return (self.value,)


class IncompletePush(DisassemblyError):
    kind = "incomplete_push"

    def __init__(self, offset: int, opcode: int | None = None) -> None:
        self.offset = offset
        self.opcode = opcode
        super().__init__(f"incomplete push instruction at {offset}")

    def __reduce__(self):
        return type(self), (self.offset, self.opcode)

    def _key(self) -> tuple:
        return (self.offset,)


class HexDecodeError(ValueError):
    """Raised for malformed hex input before any byte reaches the decoder."""

    def __init__(self, message: str, position: int | None = None) -> None:
        self.position = position
        super().__init__(message)

    def __reduce__(self):
        return type(self), (str(self), self.position)
