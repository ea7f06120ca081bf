"""Listing generator - text, JSON and Markdown output."""
from __future__ import annotations

import json
from typing import Any

from ..bytecode.decoder import Disassembly, Instruction
from ..bytecode.errors import DisassemblyError

__all__ = ["ListingGenerator"]


class ListingGenerator:
    OFFSET_DIGITS = 6

    def __init__(self, name: str = "bytecode") -> None:
        self.name = name

    @classmethod
    def format_offset(cls, offset: int) -> str:
        return f"{offset:#0{cls.OFFSET_DIGITS + 2}x}"

    @classmethod
    def format_instruction(cls, instr: Instruction) -> str:
        line = f"{cls.format_offset(instr.offset)}:  {instr.mnemonic}"
        if instr.operand:
            line = f"{line} 0x{instr.operand_hex}"
        return line

    @staticmethod
    def _error_to_dict(error: DisassemblyError | None) -> dict[str, Any] | None:
        if error is None:
            return None
        return {
            "kind": error.kind,
            "message": str(error),
            "offset": getattr(error, "offset", None),
            "value": getattr(error, "value", None),
        }

    @staticmethod
    def _instruction_to_dict(instr: Instruction) -> dict[str, Any]:
        return {
            "offset": instr.offset,
            "opcode": int(instr.opcode),
            "mnemonic": instr.mnemonic,
            "operand": instr.operand_hex if instr.operand else None,
        }

    def to_text(self, disasm: Disassembly) -> str:
        """Render one line per instruction, followed by the terminal error if decoding stopped early."""
        lines = [self.format_instruction(instr) for instr in disasm]
        if disasm.error is not None:
            lines.append(f"error: {disasm.error}")
        return "\n".join(lines)

    def to_dict(self, disasm: Disassembly) -> dict[str, Any]:
        return {
            "name": self.name,
            "size": disasm.size,
            "total": len(disasm),
            "instructions": [self._instruction_to_dict(instr) for instr in disasm],
            "error": self._error_to_dict(disasm.error),
        }

    def to_json(self, disasm: Disassembly) -> str:
        """Return the listing as a pretty-printed JSON string."""
        return json.dumps(self.to_dict(disasm), indent=2)

    @staticmethod
    def _markdown_table(headers: list[str], rows: list[list[str]]) -> list[str]:
        sep = "|".join("-" * max(len(h), 3) for h in headers)
        lines = [
            "| " + " | ".join(headers) + " |",
            "|" + sep + "|",
        ]
        for row in rows:
            lines.append("| " + " | ".join(row) + " |")
        return lines

    def to_markdown(self, disasm: Disassembly) -> str:
        """Render the listing as a Markdown document."""
        lines = [
            f"# Disassembly: {self.name}",
            "",
            f"- **Size:** {disasm.size} bytes",
            f"- **Instructions:** {len(disasm)}",
            f"- **Complete:** {'Yes' if disasm.ok else 'No'}",
            "",
            "## Instructions\n",
        ]
        if disasm.instructions:
            lines.extend(self._markdown_table(
                ["Offset", "Mnemonic", "Operand"],
                [
                    [
                        self.format_offset(instr.offset),
                        instr.mnemonic,
                        f"0x{instr.operand_hex}" if instr.operand else "-",
                    ]
                    for instr in disasm
                ],
            ))
        else:
            lines.append("- none")
        if disasm.error is not None:
            lines.append("")
            lines.append("## Error\n")
            lines.append(f"- **Kind:** {disasm.error.kind}")
            lines.append(f"- **Message:** {disasm.error}")
        return "\n".join(lines)
