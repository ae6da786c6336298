# retro_chip8/transport/memory.py
"""
Transport Layer (メモリ)

このモジュールは、マシン全体のアドレス空間（4096バイトのフラットなメモリ）を抽象化し、
境界チェック付きの読み書きアクセスとアクセスログを提供する責務を負います。
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Iterable

from retro_chip8.common.errors import MemoryAccessError

# @intent:constant CHIP-8のアドレス空間サイズとプログラム配置開始アドレス。
MEMORY_SIZE = 0x1000
PROGRAM_START = 0x200


# @intent:responsibility メモリアクセスを記録するためのタイプを定義します。
class MemoryAccessType(Enum):
    READ = "READ"
    WRITE = "WRITE"


# @intent:responsibility 個々のメモリアクセス操作を記録します。
@dataclass(frozen=True) # 不変データ構造
class MemoryAccess:
    """
    メモリ上で行われた単一のアクセス（読み込みまたは書き込み）を記録するデータクラス。
    """
    address: int
    data: int # 8bit value
    access_type: MemoryAccessType


# @intent:responsibility 固定長のバイト配列としてアドレス空間を保持し、全てのアクセスを境界チェックします。
# @intent:rationale 範囲外アクセスはプロセスレベルの障害ではなく MemoryAccessError として呼び出し元に返します。
class Memory:
    """
    バイト単位でアドレス指定可能なフラットメモリ。
    read/write はアクセスログに記録され、peek はログを残しません。
    """
    # @intent:responsibility 指定されたサイズのメモリ領域をゼロで初期化します。
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int = MEMORY_SIZE):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("Memory size must be a positive integer.")
        self._memory = bytearray(size)
        self._size = size
        self._activity_log: List[MemoryAccess] = []

    def get_size(self) -> int:
        return self._size

    def _check_address(self, address: int) -> None:
        if not 0 <= address < self._size:
            raise MemoryAccessError(address, self._size)

    # @intent:responsibility メモリアクセスをログに記録します。
    def _log_access(self, address: int, data: int, access_type: MemoryAccessType) -> None:
        self._activity_log.append(MemoryAccess(address=address, data=data, access_type=access_type))

    # @intent:responsibility 記録されたアクセスログを取得し、クリアします。
    def get_and_clear_activity_log(self) -> List[MemoryAccess]:
        """
        現在のアクセスログを返し、内部ログをクリアします。
        """
        log = self._activity_log
        self._activity_log = [] # ログをクリア
        return log

    # @intent:responsibility 指定されたアドレスから8bitのデータを読み出します。
    # @intent:post-condition 範囲外の場合は MemoryAccessError を発生させます。
    def read(self, address: int) -> int:
        self._check_address(address)
        data = self._memory[address]
        self._log_access(address, data, MemoryAccessType.READ)
        return data

    # @intent:responsibility ログを記録せずに指定されたアドレスからデータを読み出します。
    def peek(self, address: int) -> int:
        """
        指定されたアドレスから8bitのデータを読み出します（ログ記録なし）。
        逆アセンブラなどのインスペクタ用。
        """
        self._check_address(address)
        return self._memory[address]

    # @intent:responsibility 指定されたアドレスに8bitのデータを書き込みます。
    # @intent:pre-condition データは8bit値である必要があります。
    def write(self, address: int, data: int) -> None:
        self._check_address(address)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")
        self._memory[address] = data
        self._log_access(address, data, MemoryAccessType.WRITE)

    # @intent:responsibility バイト列を指定アドレスから一括でコピーします。
    # @intent:rationale プログラムロード用。途中で範囲外になる場合は一切書き込まずに MemoryAccessError を発生させます。
    def load_block(self, start_address: int, data: Iterable[int]) -> None:
        """
        バイト列を start_address から連続して書き込みます（ログ記録なし）。
        """
        block = bytes(data)
        if not block:
            return
        self._check_address(start_address)
        self._check_address(start_address + len(block) - 1)
        self._memory[start_address:start_address + len(block)] = block

    # @intent:responsibility 16bitワードをビッグエンディアン形式で読み込みます。
    # @intent:post-condition 2バイトのどちらかが範囲外の場合は、読み込み（ログ記録）を行わずに MemoryAccessError を発生させます。
    def read_word(self, address: int) -> int:
        """Big-endian 16-bit read."""
        self._check_address(address)
        self._check_address(address + 1)
        return (self.read(address) << 8) | self.read(address + 1)
