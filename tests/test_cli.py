"""CLI behavior tests."""
from __future__ import annotations

import json
import logging
import warnings

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from evm_disasm import __version__
from evm_disasm.bytecode.opcodes import OpCode
from evm_disasm.cli import main


@pytest.fixture(autouse=True)
def _restore_package_logger():
    package_logger = logging.getLogger("evm_disasm")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


def test_cli_reports_package_version():
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_disassembles_hex_argument():
    runner = CliRunner()
    result = runner.invoke(main, ["disasm", "600160020100"])

    assert result.exit_code == 0
    assert "0x000000:  PUSH1 0x01" in result.output
    assert "0x000005:  STOP" in result.output


def test_cli_accepts_prefixed_hex_from_stdin():
    runner = CliRunner()
    result = runner.invoke(main, ["disasm"], input="0x5f00\n")

    assert result.exit_code == 0
    assert "0x000000:  PUSH0" in result.output
    assert "0x000001:  STOP" in result.output


def test_cli_rejects_malformed_hex():
    runner = CliRunner()
    result = runner.invoke(main, ["disasm", "601"])

    assert result.exit_code == 1
    assert "Failed to decode hex input" in result.output


def test_cli_exits_with_code_3_on_decode_error():
    runner = CliRunner()
    result = runner.invoke(main, ["disasm", "016100"])

    assert result.exit_code == 3
    assert "0x000000:  ADD" in result.output
    assert "incomplete push instruction at 1" in result.output


def test_cli_reads_binary_file_and_writes_json(tmp_path):
    code_path = tmp_path / "contract.bin"
    out_path = tmp_path / "listing.json"
    code_path.write_bytes(bytes([OpCode.PUSH2, 0xBE, 0xEF, OpCode.JUMP]))

    runner = CliRunner()
    result = runner.invoke(
        main,
        ["disasm", "--file", str(code_path), "--binary", "--format", "json", "--output", str(out_path)],
    )

    assert result.exit_code == 0
    assert "Listing saved" in result.output
    report = json.loads(out_path.read_text())
    assert report["name"] == "contract"
    assert [ins["mnemonic"] for ins in report["instructions"]] == ["PUSH2", "JUMP"]
    assert report["instructions"][0]["operand"] == "beef"


def test_cli_reads_hex_file_as_markdown(tmp_path):
    code_path = tmp_path / "runtime.hex"
    code_path.write_text("6080604052\n")

    runner = CliRunner()
    result = runner.invoke(main, ["disasm", "-f", str(code_path), "--format", "markdown"])

    assert result.exit_code == 0
    assert "# Disassembly: runtime" in result.output
    assert "MSTORE" in result.output


def test_cli_rejects_code_and_file_together(tmp_path):
    code_path = tmp_path / "runtime.hex"
    code_path.write_text("00")

    runner = CliRunner()
    result = runner.invoke(main, ["disasm", "00", "--file", str(code_path)])

    assert result.exit_code == 2
    assert "either CODE or --file" in result.output


def test_cli_binary_requires_file():
    runner = CliRunner()
    result = runner.invoke(main, ["disasm", "--binary", "00"])

    assert result.exit_code == 2
    assert "--binary requires --file" in result.output


def test_cli_verbose_still_reports_unknown_opcode():
    runner = CliRunner()
    result = runner.invoke(main, ["disasm", "--verbose", "0c"])

    assert result.exit_code == 3
    assert "opcode 0x0c does not exist" in result.output


def test_cli_verbose_logging_stays_on_package_logger():
    root_handlers = list(logging.getLogger().handlers)

    runner = CliRunner()
    result = runner.invoke(main, ["disasm", "-v", "6001"])

    assert result.exit_code == 0
    assert logging.getLogger().handlers == root_handlers
    package_handlers = logging.getLogger("evm_disasm").handlers
    assert sum(isinstance(h, RichHandler) for h in package_handlers) == 1


def test_cli_reports_non_ascii_hex_file(tmp_path):
    code_path = tmp_path / "garbage.hex"
    code_path.write_bytes(b"\xff\xfe60")

    runner = CliRunner()
    result = runner.invoke(main, ["disasm", "--file", str(code_path)])

    assert result.exit_code == 1
    assert "Failed to decode hex input" in result.output


def test_cli_reads_stdin_dash_without_deprecation_warnings():
    runner = CliRunner()
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = runner.invoke(main, ["disasm", "-"], input="6001\n")

    assert result.exit_code == 0
    assert "0x000000:  PUSH1 0x01" in result.output
    assert not [
        w for w in caught if issubclass(w.category, DeprecationWarning) and "evm_disasm" in w.filename
    ]
