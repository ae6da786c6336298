# retro_chip8/core/snapshot.py
"""
実行状態の不変スナップショット

このモジュールは、1サイクルの実行結果（CPU状態、デコード結果、描画要求、エラー、
メモリアクセス）を記録した不変のデータ構造を定義します。
トレース用コールバックやテストへの情報提供に用いる責務を負います。
"""
from dataclasses import dataclass, field
from typing import List, Optional

from retro_chip8.common.errors import Chip8Error
from retro_chip8.core.draw import DrawAction
from retro_chip8.core.instruction import Instruction
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import MemoryAccess


# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True) # 不変データ構造
class Metadata:
    cycle_count: int
    initial_pc: int
    opcode: Optional[int] = None # フェッチに失敗した場合は None

# @intent:responsibility 1サイクル実行後のCPUとメモリアクセスの状態を不変に記録します。
@dataclass(frozen=True) # 不変データ構造
class Snapshot:
    """
    ある一時点における、CPUの状態と直前のサイクルの実行結果を記録した不変のデータ構造。
    state はサイクル終了時点のコピーであり、以降の実行で変化しません。
    """
    state: Chip8CpuState
    metadata: Metadata
    instruction: Optional[Instruction] = None
    draw_action: Optional[DrawAction] = None
    error: Optional[Chip8Error] = None
    memory_activity: List[MemoryAccess] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None
