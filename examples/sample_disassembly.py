"""Sample script demonstrating programmatic usage."""
from evm_disasm.bytecode.decoder import disassemble_hex, iter_instructions
from evm_disasm.bytecode.opcodes import OpCode
from evm_disasm.report.listing import ListingGenerator

# Two DELEGATECALLs to hard-coded addresses, each checked with ISZERO.
CALL_FORWARDER = (
    "6000808080739caf77e5b32583fd5aee70acef5deaed67059622602b5a03f415"
    "80808073c3eba2e7e18ffa583e05fad4f2fa1f63374a0fe0602b5a03f415"
)


def demo_listing():
    result = disassemble_hex(CALL_FORWARDER)
    gen = ListingGenerator("CallForwarder")
    print(gen.to_text(result))
    if not result.ok:
        print(f"stopped early: {result.error}")


def demo_lazy_scan():
    """Stop at the first CALL without decoding the rest."""
    script = bytes([OpCode.PUSH1, 0x00, OpCode.DUP1, OpCode.CALL, OpCode.STOP])
    decoder = iter_instructions(script)
    for instr in decoder:
        if instr.opcode == OpCode.CALL:
            print(f"first CALL at offset {instr.offset}")
            break


if __name__ == "__main__":
    demo_listing()
    demo_lazy_scan()
