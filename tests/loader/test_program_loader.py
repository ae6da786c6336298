# tests/loader/test_program_loader.py
"""
retro_chip8.loader.programモジュールの単体テスト。
"""
import pytest

from retro_chip8.core.system import System
from retro_chip8.loader.program import ProgramLoader

class TestProgramLoader:
    @pytest.fixture
    def setup_loader(self, tmp_path):
        return ProgramLoader(), System(), tmp_path

    def test_load_binary_file(self, setup_loader):
        loader, system, tmp_path = setup_loader
        rom = tmp_path / "logo.ch8"
        rom.write_bytes(bytes([0x60, 0x05, 0xA2, 0x10, 0xD0, 0x01]))

        assert loader.load_file(rom, system) == 6
        memory = system.get_memory()
        assert [memory.peek(a) for a in range(0x200, 0x206)] == [0x60, 0x05, 0xA2, 0x10, 0xD0, 0x01]
        assert system.get_state().pc == 0x200

    def test_file_too_large(self, setup_loader):
        loader, system, tmp_path = setup_loader
        rom = tmp_path / "big.ch8"
        rom.write_bytes(bytes([0x11]) * (4096 - 0x200 + 1))

        with pytest.raises(ValueError):
            loader.load_file(str(rom), system)
        assert system.get_memory().peek(0x200) == 0

    def test_missing_file(self, setup_loader):
        loader, system, tmp_path = setup_loader
        with pytest.raises(FileNotFoundError):
            loader.load_file(tmp_path / "missing.ch8", system)
