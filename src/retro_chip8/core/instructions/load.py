# retro_chip8/core/instructions/load.py
"""
レジスタへの即値ロード・加算命令の実装。
"""
import logging
from typing import Optional

from retro_chip8.core.draw import DrawAction
from retro_chip8.core.instruction import SetRegisterImmediate, SetIndexImmediate, AddImmediateToRegister
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory

_logger = logging.getLogger(__name__)

# --- LD Vx, byte ---
# @intent:responsibility 6xkk (LD Vx, byte) 命令をデコードします。
def decode_ld_vx_byte(opcode: int) -> SetRegisterImmediate:
    return SetRegisterImmediate(register=(opcode & 0x0F00) >> 8, value=opcode & 0x00FF)

def execute_ld_vx_byte(state: Chip8CpuState, memory: Memory, instr: SetRegisterImmediate,
                       logger: logging.Logger = _logger) -> Optional[DrawAction]:
    logger.debug("Loading normal register: %2d with value %#04x", instr.register, instr.value)
    state.v[instr.register] = instr.value
    return None

# --- LD I, addr ---
# @intent:responsibility Annn (LD I, addr) 命令をデコードします。
def decode_ld_i_addr(opcode: int) -> SetIndexImmediate:
    return SetIndexImmediate(value=opcode & 0x0FFF)

def execute_ld_i_addr(state: Chip8CpuState, memory: Memory, instr: SetIndexImmediate,
                      logger: logging.Logger = _logger) -> Optional[DrawAction]:
    logger.debug("Loading index register: %#05x", instr.value)
    state.index = instr.value
    return None

# --- ADD Vx, byte ---
# @intent:responsibility 7xkk (ADD Vx, byte) 命令をデコードします。
def decode_add_vx_byte(opcode: int) -> AddImmediateToRegister:
    return AddImmediateToRegister(register=(opcode & 0x0F00) >> 8, value=opcode & 0x00FF)

# @intent:responsibility ADD命令を実行します。オーバーフローは256を法として折り返し、エラーにはしません。
# @intent:rationale キャリーフラグ(VF)は更新しません。
def execute_add_vx_byte(state: Chip8CpuState, memory: Memory, instr: AddImmediateToRegister,
                        logger: logging.Logger = _logger) -> Optional[DrawAction]:
    before = state.v[instr.register]
    state.v[instr.register] = (before + instr.value) & 0xFF
    logger.debug("Add %#04x to v[%d] (%#04x) => %#04x",
                 instr.value, instr.register, before, state.v[instr.register])
    return None
