import re
import yaml
from typing import Dict, Any
from .models import SystemConfig, CpuInitialState

# @intent:constant 初期状態で指定可能な汎用レジスタ名 (v0-v15 または vA-vF)。
_REGISTER_NAME = re.compile(r"^v([0-9]|1[0-5]|[a-f])$", re.IGNORECASE)

class ConfigLoader:
    def load_from_file(self, path: str) -> SystemConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> SystemConfig:
        defaults = SystemConfig()

        initial_state_data = data.get("initial_state") or {}
        registers = {}
        for name, value in (initial_state_data.get("registers") or {}).items():
            registers[self._parse_register_name(name)] = self._parse_byte(value)

        initial_state = CpuInitialState(
            index=self._parse_address(initial_state_data.get("index", 0)),
            registers=registers
        )

        return SystemConfig(
            memory_size=self._parse_int(data.get("memory_size", defaults.memory_size)),
            program_start=self._parse_int(data.get("program_start", defaults.program_start)),
            initial_state=initial_state,
            log_level=str(data.get("log_level", defaults.log_level)).upper()
        )

    # @intent:responsibility レジスタ名を正規化し、"v0".."v15" の形に揃えます。
    def _parse_register_name(self, name: Any) -> str:
        match = _REGISTER_NAME.match(str(name))
        if not match:
            raise ValueError(f"Unknown register: {name}")
        number = match.group(1)
        return f"v{int(number) if number.isdigit() else int(number, 16)}"

    def _parse_byte(self, value: Any) -> int:
        parsed = self._parse_int(value)
        if not 0 <= parsed <= 0xFF:
            raise ValueError(f"Register value {value} is not an 8-bit value.")
        return parsed

    def _parse_address(self, value: Any) -> int:
        parsed = self._parse_int(value)
        if not 0 <= parsed <= 0xFFFF:
            raise ValueError(f"Index value {value} is not a 16-bit value.")
        return parsed

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
