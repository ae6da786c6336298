# tests/core/test_disassembler.py
"""
retro_chip8.core.disassemblerモジュールの単体テスト。
"""
from retro_chip8.core.disassembler import disassemble
from retro_chip8.core.system import System
from retro_chip8.transport.memory import Memory

def test_disassemble_program():
    memory = Memory()
    memory.load_block(0x200, [0x00, 0xE0, 0x60, 0x05, 0xA2, 0x10, 0xD0, 0x15,
                              0x12, 0x00, 0x23, 0x40, 0x7F, 0x01, 0x00, 0xEE])
    assert disassemble(memory, 0x200, 16) == [
        (0x200, "00 E0", "CLS"),
        (0x202, "60 05", "LD V0, $05"),
        (0x204, "A2 10", "LD I, $210"),
        (0x206, "D0 15", "DRW V0, V1, 5"),
        (0x208, "12 00", "JP $200"),
        (0x20A, "23 40", "CALL $340"),
        (0x20C, "7F 01", "ADD VF, $01"),
        (0x20E, "00 EE", "UNKNOWN $00EE"),
    ]

def test_disassemble_does_not_log_access():
    memory = Memory()
    disassemble(memory, 0x200, 4)
    assert memory.get_and_clear_activity_log() == []

def test_disassemble_memory_end():
    memory = Memory()
    memory.write(0xFFD, 0x61)
    memory.write(0xFFE, 0x02)
    memory.write(0xFFF, 0xAB)
    memory.get_and_clear_activity_log()
    assert disassemble(memory, 0xFFD, 16) == [
        (0xFFD, "61 02", "LD V1, $02"),
        (0xFFF, "AB", "DB $AB"),
    ]

def test_system_disassemble_delegates():
    system = System()
    system.load_program(bytes([0x6A, 0x42]))
    assert system.disassemble(0x200, 2) == [(0x200, "6A 42", "LD VA, $42")]

def test_disassemble_odd_length_stays_in_range():
    memory = Memory()
    memory.load_block(0x200, [0x6A, 0x42, 0x12, 0x00])
    assert disassemble(memory, 0x200, 1) == [(0x200, "6A", "DB $6A")]
    assert disassemble(memory, 0x200, 3) == [
        (0x200, "6A 42", "LD VA, $42"),
        (0x202, "12", "DB $12"),
    ]
