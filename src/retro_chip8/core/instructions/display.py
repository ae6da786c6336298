# retro_chip8/core/instructions/display.py
"""
画面関連命令（画面消去、スプライト描画）の実装。

画面の状態はこのコアの管轄外です。DRW命令は DrawAction を生成して呼び出し元へ返すだけで、
XOR合成や衝突フラグ(VF)の計算は行いません。
"""
import logging
from typing import Optional

from retro_chip8.core.draw import DrawAction, expand_sprite_byte
from retro_chip8.core.instruction import ClearScreen, DrawSprite
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory

_logger = logging.getLogger(__name__)

# --- CLS ---
def decode_cls(opcode: int) -> ClearScreen:
    return ClearScreen()

# @intent:responsibility CLS命令を実行します。内部状態は変化せず、描画要求も生成しません。
def execute_cls(state: Chip8CpuState, memory: Memory, instr: ClearScreen,
                logger: logging.Logger = _logger) -> Optional[DrawAction]:
    logger.debug("Clearing screen")
    return None

# --- DRW ---
# @intent:responsibility Dxyn (DRW Vx, Vy, nibble) 命令をデコードします。
def decode_drw(opcode: int) -> DrawSprite:
    return DrawSprite(
        x_register=(opcode & 0x0F00) >> 8,
        y_register=(opcode & 0x00F0) >> 4,
        height=opcode & 0x000F,
    )

# @intent:responsibility DRW命令を実行し、Iレジスタが指すスプライトデータから描画要求を生成します。
# @intent:post-condition スプライトがメモリ範囲外にかかる場合は MemoryAccessError を送出し、描画要求は生成しません。
def execute_drw(state: Chip8CpuState, memory: Memory, instr: DrawSprite,
                logger: logging.Logger = _logger) -> Optional[DrawAction]:
    x = state.v[instr.x_register]
    y = state.v[instr.y_register]
    logger.debug("Drawing sprite to screen v[%d] = %#04x, v[%d] = %#04x, n = %d",
                 instr.x_register, x, instr.y_register, y, instr.height)
    rows = []
    for sprite_row in range(instr.height):
        row_byte = memory.read(state.index + sprite_row)
        logger.debug("Processing %#04x", row_byte)
        rows.append(expand_sprite_byte(row_byte))
    return DrawAction(x=x, y=y, pixels=tuple(rows))
