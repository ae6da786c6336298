# tests/core/test_decoder.py
"""
retro_chip8.core.instructions.decode_opcode の単体テスト。
"""
import pytest

from retro_chip8.common.errors import DecodeError
from retro_chip8.core.instruction import (
    ClearScreen, SetRegisterImmediate, SetIndexImmediate, DrawSprite, Jump,
    AddImmediateToRegister, CallSubroutine, INSTRUCTION_TYPES,
)
from retro_chip8.core.instructions import decode_opcode
from retro_chip8.core.instructions.maps import EXECUTE_MAP

# @intent:test_suite オペコードから型付き命令へのデコード規則の検証。

@pytest.mark.parametrize("opcode, expected", [
    (0x00E0, ClearScreen()),
    (0x1234, Jump(address=0x234)),
    (0x2ABC, CallSubroutine(address=0xABC)),
    (0x6A42, SetRegisterImmediate(register=0xA, value=0x42)),
    (0x73FF, AddImmediateToRegister(register=0x3, value=0xFF)),
    (0xA210, SetIndexImmediate(value=0x210)),
    (0xD125, DrawSprite(x_register=1, y_register=2, height=5)),
    (0xDFE0, DrawSprite(x_register=0xF, y_register=0xE, height=0)),
])
def test_decode_known_opcodes(opcode, expected):
    assert decode_opcode(opcode) == expected

@pytest.mark.parametrize("opcode", [0x0000, 0x00E1, 0x00EE, 0x3000, 0x8123, 0xF00A, 0xE09E, 0xB123])
def test_decode_unknown_opcode(opcode):
    with pytest.raises(DecodeError) as excinfo:
        decode_opcode(opcode, 0x2F0)
    assert excinfo.value.opcode == opcode
    assert excinfo.value.address == 0x2F0

def test_return_from_subroutine_is_never_decoded():
    # 0x00EE は RET ではなく未知のオペコードとして扱われる
    with pytest.raises(DecodeError):
        decode_opcode(0x00EE)

def test_execute_map_covers_all_instruction_types():
    assert set(EXECUTE_MAP) == set(INSTRUCTION_TYPES)

def test_instruction_text():
    assert str(decode_opcode(0x00E0)) == "CLS"
    assert str(decode_opcode(0x6A42)) == "LD VA, $42"
    assert str(decode_opcode(0xA210)) == "LD I, $210"
    assert str(decode_opcode(0xD125)) == "DRW V1, V2, 5"
    assert str(decode_opcode(0x2ABC)) == "CALL $ABC"
