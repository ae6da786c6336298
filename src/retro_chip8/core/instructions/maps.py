# retro_chip8/core/instructions/maps.py
"""
オペコードと命令実装のマッピング定義。
"""
from retro_chip8.core import instruction as ins
from . import control
from . import display
from . import load

# @intent:constant 上位ニブルに関係なく完全一致で判定するオペコード。
CLEAR_SCREEN_OPCODE = 0x00E0

# @intent:map オペコードの上位ニブル（ビット12-15）からデコード関数へのマッピングテーブル。
DECODE_MAP = {
    0x1: control.decode_jp,
    0x2: control.decode_call,
    0x6: load.decode_ld_vx_byte,
    0x7: load.decode_add_vx_byte,
    0xA: load.decode_ld_i_addr,
    0xD: display.decode_drw,
}

# @intent:map 命令の型から実行関数へのマッピングテーブル。
# @intent:rationale instruction.INSTRUCTION_TYPES の全バリアントを網羅する必要があります。
EXECUTE_MAP = {
    ins.ClearScreen: display.execute_cls,
    ins.SetRegisterImmediate: load.execute_ld_vx_byte,
    ins.SetIndexImmediate: load.execute_ld_i_addr,
    ins.DrawSprite: display.execute_drw,
    ins.Jump: control.execute_jp,
    ins.AddImmediateToRegister: load.execute_add_vx_byte,
    ins.CallSubroutine: control.execute_call,
    ins.ReturnFromSubroutine: control.execute_ret,
}
