# retro_chip8/core/disassembler.py
"""
Disassembler

メモリ上のバイナリデータを解析し、ニーモニックに変換します。
デコードロジックは命令実行と共通ですが、アクセスログを汚さないように peek を使用します。
"""
from typing import List, Tuple

from retro_chip8.common.errors import DecodeError
from retro_chip8.core.instructions import decode_opcode
from retro_chip8.transport.memory import Memory

# @intent:responsibility 指定されたメモリ範囲を逆アセンブルし、表示用データを生成します。
def disassemble(memory: Memory, start_addr: int, length: int) -> List[Tuple[int, str, str]]:
    """
    指定された範囲のメモリを2バイト単位で逆アセンブルします。
    範囲外のバイトは読まず、末尾に1バイトだけ残る場合は DB として表示します。

    Returns:
        List of (address, hex_bytes, mnemonic) tuples.
    """
    result = []
    current_addr = start_addr
    end_addr = min(start_addr + length, memory.get_size())

    while current_addr < end_addr:
        # 範囲末尾（またはメモリ末尾）の端数バイト
        if current_addr + 1 >= end_addr:
            value = memory.peek(current_addr)
            result.append((current_addr, f"{value:02X}", f"DB ${value:02X}"))
            break

        high = memory.peek(current_addr)
        low = memory.peek(current_addr + 1)
        opcode = (high << 8) | low
        try:
            mnemonic_str = str(decode_opcode(opcode, current_addr))
        except DecodeError:
            mnemonic_str = f"UNKNOWN ${opcode:04X}"

        result.append((current_addr, f"{high:02X} {low:02X}", mnemonic_str))
        current_addr += 2

    return result
