from dataclasses import dataclass, field
from typing import Dict

from retro_chip8.transport.memory import MEMORY_SIZE, PROGRAM_START

@dataclass
class CpuInitialState:
    index: int = 0x000
    registers: Dict[str, int] = field(default_factory=dict) # 例: {"v0": 5}

@dataclass
class SystemConfig:
    memory_size: int = MEMORY_SIZE
    program_start: int = PROGRAM_START
    initial_state: CpuInitialState = field(default_factory=CpuInitialState)
    log_level: str = "WARNING"
