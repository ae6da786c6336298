# retro_chip8/core/instruction.py
"""
デコード済み命令の型定義。

Instruction は閉じた直和型として扱います。新しいオペコードを追加する場合は、
ここにバリアントを追加し、instructions.maps のデコード表と実行表に対応を追加します。
"""
from dataclasses import dataclass
from typing import List


# @intent:responsibility 全ての命令バリアントの基底となる不変データクラスです。
@dataclass(frozen=True)
class Instruction:
    mnemonic = "???"

    # @intent:responsibility 逆アセンブル表示用のオペランド文字列を返します。
    @property
    def operands(self) -> List[str]:
        return []

    def __str__(self) -> str:
        if self.operands:
            return f"{self.mnemonic} " + ", ".join(self.operands)
        return self.mnemonic


@dataclass(frozen=True)
class ClearScreen(Instruction):
    mnemonic = "CLS"


@dataclass(frozen=True)
class SetRegisterImmediate(Instruction):
    register: int
    value: int
    mnemonic = "LD"

    @property
    def operands(self) -> List[str]:
        return [f"V{self.register:X}", f"${self.value:02X}"]


@dataclass(frozen=True)
class SetIndexImmediate(Instruction):
    value: int
    mnemonic = "LD"

    @property
    def operands(self) -> List[str]:
        return ["I", f"${self.value:03X}"]


@dataclass(frozen=True)
class DrawSprite(Instruction):
    x_register: int
    y_register: int
    height: int
    mnemonic = "DRW"

    @property
    def operands(self) -> List[str]:
        return [f"V{self.x_register:X}", f"V{self.y_register:X}", f"{self.height}"]


@dataclass(frozen=True)
class Jump(Instruction):
    address: int
    mnemonic = "JP"

    @property
    def operands(self) -> List[str]:
        return [f"${self.address:03X}"]


@dataclass(frozen=True)
class AddImmediateToRegister(Instruction):
    register: int
    value: int
    mnemonic = "ADD"

    @property
    def operands(self) -> List[str]:
        return [f"V{self.register:X}", f"${self.value:02X}"]


@dataclass(frozen=True)
class CallSubroutine(Instruction):
    address: int
    mnemonic = "CALL"

    @property
    def operands(self) -> List[str]:
        return [f"${self.address:03X}"]


# @intent:rationale デコーダはこの命令を生成しません（0x00EE は未知のオペコードとして扱われます）。
#                  実行系は直接渡された場合に備えて実装されています。
@dataclass(frozen=True)
class ReturnFromSubroutine(Instruction):
    mnemonic = "RET"


# @intent:constant 閉じた直和型を構成する全バリアント。
INSTRUCTION_TYPES = (
    ClearScreen,
    SetRegisterImmediate,
    SetIndexImmediate,
    DrawSprite,
    Jump,
    AddImmediateToRegister,
    CallSubroutine,
    ReturnFromSubroutine,
)
