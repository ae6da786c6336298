# retro_chip8/common/errors.py
"""
共通の例外定義を提供するモジュール。

コアエンジンで発生するエラーはすべて Chip8Error を基底とし、
1サイクル単位で回復可能な条件として扱われます。
"""
from typing import Optional


# @intent:responsibility コアエンジン全体の例外の基底クラスです。
class Chip8Error(Exception):
    pass


# @intent:responsibility 未知のオペコードをデコードしようとしたことを表します。
# @intent:rationale 診断用に元のオペコードとフェッチ元アドレスを保持します。
class DecodeError(Chip8Error):
    def __init__(self, opcode: int, address: Optional[int] = None):
        self.opcode = opcode
        self.address = address
        location = f" at {address:#05x}" if address is not None else ""
        super().__init__(f"Unknown opcode {opcode:#06x}{location}")


# @intent:responsibility メモリ範囲外へのアクセスを表します。
# @intent:rationale 既存の IndexError ハンドリングとも互換性を保つため IndexError も継承します。
class MemoryAccessError(Chip8Error, IndexError):
    def __init__(self, address: int, size: int):
        self.address = address
        self.size = size
        super().__init__(f"Address {address:#06x} out of bounds for memory of size {size}.")


# @intent:responsibility 空のコールスタックから戻りアドレスを取り出そうとしたことを表します。
class StackUnderflowError(Chip8Error):
    def __init__(self):
        super().__init__("Return from subroutine with an empty call stack.")
