# retro_chip8/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CPUのレジスタ群とコールスタックを保持するデータ構造を定義します。
"""
from dataclasses import dataclass, field
from typing import List

from retro_chip8.common.errors import StackUnderflowError

# @intent:constant 汎用レジスタの本数。
REGISTER_COUNT = 16


# @intent:responsibility CPUの全てのレジスタ（PC, I, V0-VF）とコールスタックの状態を保持します。
@dataclass
class Chip8CpuState:
    """
    CPUのレジスタ状態を保持するデータクラス。
    stack は末尾が最後にプッシュされた戻りアドレスです。
    """
    pc: int = 0x0000     # Program Counter
    index: int = 0x0000  # Index Register (I)
    stack: List[int] = field(default_factory=list)
    v: List[int] = field(default_factory=lambda: [0x00] * REGISTER_COUNT)

    # @intent:accessor スタックの深さをSP相当の値として公開します。
    @property
    def sp(self) -> int:
        return len(self.stack)

    def push(self, address: int) -> None:
        self.stack.append(address & 0xFFFF)

    # @intent:responsibility 最後にプッシュされた戻りアドレスを取り出します。
    # @intent:post-condition スタックが空の場合は StackUnderflowError を発生させ、状態は変更しません。
    def pop(self) -> int:
        if not self.stack:
            raise StackUnderflowError()
        return self.stack.pop()
