import subprocess
import unittest
from unittest.mock import patch

from shpiller import toolchain
from shpiller.common import CompilerError
from shpiller.toolchain import ToolchainError


def completed(returncode, stdout='', stderr=''):
    return subprocess.CompletedProcess([], returncode, stdout, stderr)


@patch('shpiller.toolchain.subprocess.run')
class ToolchainTestCase(unittest.TestCase):
    """ Test invocation of nasm and ld, without running them """
    def test_assemble(self, mock_run):
        mock_run.return_value = completed(0)
        obj_path = toolchain.assemble('out/prog.asm')
        self.assertEqual('out/prog.o', obj_path)
        args = mock_run.call_args[0][0]
        self.assertEqual(
            ['nasm', '-felf64', 'out/prog.asm', '-o', 'out/prog.o'], args)

    def test_link(self, mock_run):
        mock_run.return_value = completed(0)
        exe_path = toolchain.link('out/prog.o')
        self.assertEqual('out/prog', exe_path)
        args = mock_run.call_args[0][0]
        self.assertEqual(['ld', 'out/prog.o', '-o', 'out/prog'], args)

    def test_assemble_and_link(self, mock_run):
        mock_run.return_value = completed(0)
        exe_path = toolchain.assemble_and_link('prog.asm', 'a.out')
        self.assertEqual('a.out', exe_path)
        self.assertEqual(2, mock_run.call_count)
        self.assertEqual('nasm', mock_run.call_args_list[0][0][0][0])
        self.assertEqual('ld', mock_run.call_args_list[1][0][0][0])

    def test_other_tools(self, mock_run):
        mock_run.return_value = completed(0)
        toolchain.assemble_and_link('p.asm', nasm='yasm', ld='ld.gold')
        self.assertEqual('yasm', mock_run.call_args_list[0][0][0][0])
        self.assertEqual('ld.gold', mock_run.call_args_list[1][0][0][0])

    def test_assembler_fails(self, mock_run):
        mock_run.return_value = completed(1, stderr='p.asm:1: error')
        with self.assertLogs('shpiller.toolchain', level='ERROR'):
            with self.assertRaises(ToolchainError) as cm:
                toolchain.assemble_and_link('p.asm')
        self.assertEqual('assembler', cm.exception.stage)
        self.assertIn('assembler', cm.exception.msg)
        self.assertEqual(1, mock_run.call_count)

    def test_linker_fails(self, mock_run):
        mock_run.side_effect = [completed(0), completed(1)]
        with self.assertRaises(ToolchainError) as cm:
            toolchain.assemble_and_link('p.asm')
        self.assertEqual('linker', cm.exception.stage)

    def test_tool_not_installed(self, mock_run):
        mock_run.side_effect = FileNotFoundError('nasm')
        with self.assertRaises(CompilerError) as cm:
            toolchain.assemble('p.asm')
        self.assertIn('Could not run assembler', cm.exception.msg)


class HasToolchainTestCase(unittest.TestCase):
    @patch('shpiller.toolchain.shutil.which')
    def test_missing(self, mock_which):
        mock_which.return_value = None
        self.assertFalse(toolchain.has_toolchain())

    @patch('shpiller.toolchain.shutil.which')
    def test_present(self, mock_which):
        mock_which.side_effect = lambda name: '/usr/bin/' + name
        self.assertTrue(toolchain.has_toolchain())


if __name__ == '__main__':
    unittest.main()
