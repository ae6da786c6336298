# retro_chip8/core/system.py
"""
Core Layer (システム)

このモジュールは、CPU状態とメモリを所有し、命令サイクル（フェッチ→デコード→実行）を
駆動する System を提供します。外部との境界は load_program と step の2つです。
"""
import copy
import logging
from typing import Callable, Dict, List, Optional, Tuple

from retro_chip8.common.errors import Chip8Error, DecodeError, MemoryAccessError
from retro_chip8.core import disassembler
from retro_chip8.core.draw import DrawAction
from retro_chip8.core.instruction import Instruction
from retro_chip8.core.instructions import decode_opcode, execute_instruction
from retro_chip8.core.snapshot import Metadata, Snapshot
from retro_chip8.core.state import Chip8CpuState, REGISTER_COUNT
from retro_chip8.transport.memory import Memory, PROGRAM_START

Tracer = Callable[[Snapshot], None]


# @intent:responsibility CPU状態とメモリを排他的に所有し、1命令サイクルの実行を提供します。
class System:
    """
    CPUとメモリを合成した仮想マシン。

    外部のドライバループが step() を繰り返し呼び出します。step() は描画命令の場合のみ
    DrawAction を返し、それ以外は None を返します。
    デコードや実行で発生したエラーはサイクル内で処理され、例外としては伝播しません。
    直前のサイクルのエラーは last_error で参照できます。
    """
    # @intent:responsibility メモリ、CPU状態、観測用のロガーとトレーサを初期化します。
    # @intent:pre-condition program_start はメモリ範囲内である必要があります。
    def __init__(self, memory: Optional[Memory] = None, program_start: int = PROGRAM_START,
                 logger: Optional[logging.Logger] = None, tracer: Optional[Tracer] = None):
        self._memory = memory if memory is not None else Memory()
        if not 0 <= program_start < self._memory.get_size():
            raise ValueError(f"Program start {program_start:#05x} is outside of memory.")
        self._program_start = program_start
        self._logger = logger or logging.getLogger(__name__)
        self._tracer = tracer
        self._state: Chip8CpuState = self._create_initial_state()
        self._cycle_count: int = 0
        self._last_snapshot: Optional[Snapshot] = None

    def _create_initial_state(self) -> Chip8CpuState:
        return Chip8CpuState(pc=self._program_start)

    # @intent:responsibility CPUをリセットし、初期状態に戻します。メモリ内容は保持されます。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._cycle_count = 0
        self._last_snapshot = None

    def get_state(self) -> Chip8CpuState:
        return self._state

    def get_memory(self) -> Memory:
        return self._memory

    @property
    def program_start(self) -> int:
        return self._program_start

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    @property
    def last_snapshot(self) -> Optional[Snapshot]:
        return self._last_snapshot

    @property
    def last_error(self) -> Optional[Chip8Error]:
        return self._last_snapshot.error if self._last_snapshot else None

    def set_tracer(self, tracer: Optional[Tracer]) -> None:
        self._tracer = tracer

    # @intent:responsibility プログラムをメモリのプログラム領域へそのままコピーし、PCを先頭に設定します。
    # @intent:pre-condition プログラム長はメモリ末尾を超えてはいけません（呼び出し元の責務）。
    #                      超えた場合は MemoryAccessError が送出され、メモリとPCは変更されません。
    def load_program(self, program: bytes) -> None:
        self._memory.load_block(self._program_start, program)
        self._state.pc = self._program_start
        self._logger.debug("Loaded %d bytes at %#05x", len(program), self._program_start)

    # @intent:responsibility PCから2バイトをフェッチします。
    # @intent:rationale PCはフェッチの成否にかかわらず、命令固有の処理の前に無条件で2進みます。
    #                  制御命令は後からこの暫定的な値を上書きします。
    def _fetch(self) -> int:
        pc = self._state.pc
        self._state.pc = (pc + 2) & 0xFFFF
        return self._memory.read_word(pc)

    def _decode(self, opcode: int, address: int) -> Instruction:
        self._logger.debug("Decoding %#06x", opcode)
        return decode_opcode(opcode, address)

    def _execute(self, instr: Instruction) -> Optional[DrawAction]:
        return execute_instruction(instr, self._state, self._memory, self._logger)

    # @intent:responsibility 1命令サイクルを実行し、描画要求があればそれを返します。
    # @intent:flow フェッチ(PC更新) -> デコード -> 実行 -> スナップショット生成 の順序で処理を行います。
    def step(self) -> Optional[DrawAction]:
        """
        フェッチ・デコード・実行を1回だけ行います。
        未知のオペコード、範囲外アクセス、空スタックからの復帰はこのサイクルの失敗として
        記録され、次のサイクルは進んだPCから継続します。
        """
        self._memory.get_and_clear_activity_log()
        initial_pc = self._state.pc
        opcode: Optional[int] = None
        instr: Optional[Instruction] = None
        draw_action: Optional[DrawAction] = None
        error: Optional[Chip8Error] = None

        try:
            opcode = self._fetch()
            instr = self._decode(opcode, initial_pc)
        except (DecodeError, MemoryAccessError) as e:
            self._logger.warning("Error decoding: %s", e)
            error = e
        else:
            try:
                draw_action = self._execute(instr)
            except Chip8Error as e:
                self._logger.warning("Error executing %s at %#05x: %s", instr, initial_pc, e)
                error = e

        self._cycle_count += 1
        self._last_snapshot = Snapshot(
            state=copy.deepcopy(self._state),
            metadata=Metadata(cycle_count=self._cycle_count, initial_pc=initial_pc, opcode=opcode),
            instruction=instr,
            draw_action=draw_action,
            error=error,
            memory_activity=self._memory.get_and_clear_activity_log(),
        )
        if self._tracer is not None:
            self._tracer(self._last_snapshot)
        return draw_action

    # @intent:responsibility インスペクタ表示用に、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {f"V{i:X}": s.v[i] for i in range(REGISTER_COUNT)}
        registers.update({"I": s.index, "PC": s.pc, "SP": s.sp})
        return registers

    # @intent:responsibility 指定範囲のメモリを逆アセンブルします。
    def disassemble(self, start_addr: int, length: int) -> List[Tuple[int, str, str]]:
        return disassembler.disassemble(self._memory, start_addr, length)
