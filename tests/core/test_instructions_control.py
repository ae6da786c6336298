import unittest
from retro_chip8.common.errors import StackUnderflowError
from retro_chip8.core.instruction import Jump, CallSubroutine, ReturnFromSubroutine
from retro_chip8.core.instructions import decode_opcode, execute_instruction
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory

class TestControlInstructions(unittest.TestCase):
    def setUp(self):
        self.memory = Memory()
        self.state = Chip8CpuState(pc=0x200)

    def _execute(self, opcode, current_pc=0x200):
        self.state.pc = current_pc
        instr = decode_opcode(opcode, current_pc)
        # フェッチ時と同様に、実行前にPCを次の命令へ進める
        self.state.pc = (self.state.pc + 2) & 0xFFFF
        return execute_instruction(instr, self.state, self.memory)

    def test_jp_overrides_provisional_advance(self):
        result = self._execute(0x1456, current_pc=0x200)
        self.assertIsNone(result)
        self.assertEqual(self.state.pc, 0x456)

    def test_call_pushes_post_fetch_pc_plus_two(self):
        # CALL $300 at 0x200 -> post-fetch PC 0x202 -> pushed 0x204
        self._execute(0x2300, current_pc=0x200)
        self.assertEqual(self.state.pc, 0x300)
        self.assertEqual(self.state.stack, [0x204])

    def test_nested_calls(self):
        self._execute(0x2300, current_pc=0x200)
        self._execute(0x2400, current_pc=0x300)
        self.assertEqual(self.state.stack, [0x204, 0x304])
        self.assertEqual(self.state.pc, 0x400)

    def test_call_then_ret_restores_pushed_address(self):
        self._execute(0x2300, current_pc=0x200)
        # RET はデコーダが生成しないため、直接実行する
        self.state.pc = 0x302
        execute_instruction(ReturnFromSubroutine(), self.state, self.memory)
        self.assertEqual(self.state.pc, 0x204)
        self.assertEqual(self.state.stack, [])

    def test_ret_with_empty_stack(self):
        self.state.pc = 0x202
        with self.assertRaises(StackUnderflowError):
            execute_instruction(ReturnFromSubroutine(), self.state, self.memory)
        self.assertEqual(self.state.pc, 0x202)

    def test_decode_types(self):
        self.assertIsInstance(decode_opcode(0x1FFF), Jump)
        self.assertIsInstance(decode_opcode(0x2FFF), CallSubroutine)

if __name__ == '__main__':
    unittest.main()
