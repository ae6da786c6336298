# retro_chip8/loader/program.py
"""
プログラムローダーモジュール。
生バイナリ形式（.ch8）のプログラムファイルを読み込み、System にロードします。
"""
from pathlib import Path
from typing import Union

from retro_chip8.core.system import System

class ProgramLoader:
    """
    バイナリファイルをそのままプログラム領域へコピーするローダー。
    """
    # @intent:responsibility ファイルを読み込み、プログラム領域に収まることを確認してからロードします。
    # @intent:post-condition 収まらない場合は ValueError を送出し、メモリは変更されません。
    def load_file(self, file_path: Union[str, Path], system: System) -> int:
        with open(file_path, 'rb') as f:
            program = f.read()

        capacity = system.get_memory().get_size() - system.program_start
        if len(program) > capacity:
            raise ValueError(
                f"Program {file_path} is {len(program)} bytes, "
                f"but only {capacity} bytes are available from {system.program_start:#05x}."
            )

        system.load_program(program)
        return len(program)
