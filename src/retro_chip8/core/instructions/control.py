# retro_chip8/core/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン呼び出し・復帰）の実装。
"""
import logging
from typing import Optional

from retro_chip8.core.draw import DrawAction
from retro_chip8.core.instruction import Jump, CallSubroutine, ReturnFromSubroutine
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory

_logger = logging.getLogger(__name__)

# --- JP ---
# @intent:responsibility 1nnn (JP addr) 命令をデコードします。
def decode_jp(opcode: int) -> Jump:
    return Jump(address=opcode & 0x0FFF)

# @intent:responsibility JP命令を実行し、フェッチ時の暫定的なPC加算を破棄してジャンプします。
def execute_jp(state: Chip8CpuState, memory: Memory, instr: Jump,
               logger: logging.Logger = _logger) -> Optional[DrawAction]:
    logger.debug("Jumping to %#05x", instr.address)
    state.pc = instr.address
    return None

# --- CALL ---
# @intent:responsibility 2nnn (CALL addr) 命令をデコードします。
def decode_call(opcode: int) -> CallSubroutine:
    return CallSubroutine(address=opcode & 0x0FFF)

# @intent:responsibility CALL命令を実行し、戻りアドレスをプッシュしてからジャンプします。
# @intent:rationale state.pc はフェッチ後の値（呼び出し命令の次）を指しています。
#                  プッシュする値はさらに +2 した値であり、復帰時には呼び出し直後の命令が1つ読み飛ばされます。
#                  この挙動は観測された通りに再現しています。
def execute_call(state: Chip8CpuState, memory: Memory, instr: CallSubroutine,
                 logger: logging.Logger = _logger) -> Optional[DrawAction]:
    logger.debug("Jumping to subroutine %#05x", instr.address)
    state.push(state.pc + 2)
    state.pc = instr.address
    return None

# --- RET ---
# @intent:responsibility RET命令を実行し、スタックから戻りアドレスをポップしてPCに設定します。
# @intent:post-condition スタックが空の場合は StackUnderflowError を送出し、PCは変更しません。
def execute_ret(state: Chip8CpuState, memory: Memory, instr: ReturnFromSubroutine,
                logger: logging.Logger = _logger) -> Optional[DrawAction]:
    return_address = state.pop()
    logger.debug("Return from subroutine. Stack front: %#05x", return_address)
    state.pc = return_address
    return None
