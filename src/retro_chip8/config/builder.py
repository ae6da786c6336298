import logging
from typing import Optional

from retro_chip8.core.system import System, Tracer
from retro_chip8.transport.memory import Memory
from .models import SystemConfig, CpuInitialState

# @intent:responsibility システム構成（Config）に基づいて、Memory と System を生成・接続し、初期状態を適用します。
class SystemBuilder:
    def build_system(self, config: SystemConfig, logger: Optional[logging.Logger] = None,
                     tracer: Optional[Tracer] = None) -> System:
        # @intent:rationale ログレベルは呼び出し元が渡したロガーにのみ適用し、プロセス全体のロガー設定は変更しません。
        if logger is not None:
            logger.setLevel(config.log_level)

        memory = Memory(config.memory_size)
        system = System(memory, program_start=config.program_start, logger=logger, tracer=tracer)

        # 初期状態の適用
        self.apply_initial_state(system, config.initial_state)
        return system

    # @intent:responsibility Configで定義された初期状態をCPUに適用します。
    def apply_initial_state(self, system: System, config_state: CpuInitialState) -> None:
        """
        CPUをリセットし、Configから指定された初期値を適用します。
        """
        system.reset()
        state = system.get_state()
        state.index = config_state.index
        for reg_name, value in config_state.registers.items():
            state.v[int(reg_name[1:])] = value
