# retro_chip8/core/instructions/__init__.py
"""
命令セット実装パッケージ。
"""
import logging
from typing import Optional

from retro_chip8.common.errors import DecodeError
from retro_chip8.core.draw import DrawAction
from retro_chip8.core.instruction import Instruction
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory
from . import display
from .maps import CLEAR_SCREEN_OPCODE, DECODE_MAP, EXECUTE_MAP

_logger = logging.getLogger(__name__)

# @intent:responsibility 16bitオペコードをデコードし、型付きのInstructionを返します。
# @intent:post-condition 未知のオペコードの場合は元の値を保持した DecodeError を送出します。
def decode_opcode(opcode: int, address: Optional[int] = None) -> Instruction:
    """
    16bitオペコードをデコードします。
    0x00E0 は完全一致で CLS、それ以外は上位ニブルで分岐します。
    """
    if opcode == CLEAR_SCREEN_OPCODE:
        return display.decode_cls(opcode)
    decoder = DECODE_MAP.get((opcode & 0xF000) >> 12)
    if decoder:
        return decoder(opcode)
    raise DecodeError(opcode, address)

# @intent:responsibility デコードされた命令を実行し、必要であれば描画要求を返します。
def execute_instruction(instr: Instruction, state: Chip8CpuState, memory: Memory,
                        logger: Optional[logging.Logger] = None) -> Optional[DrawAction]:
    """
    デコードされた命令を実行し、CPUの状態を変更します。
    DRW命令の場合のみ DrawAction を返します。
    """
    executor = EXECUTE_MAP.get(type(instr))
    if executor is None:
        raise TypeError(f"No executor registered for instruction {instr!r}")
    return executor(state, memory, instr, logger or _logger)
