""" Invoke the external assembler and linker.

Generated assembly is turned into an executable by nasm and ld.
"""

import logging
import os
import shutil
import subprocess
from .common import CompilerError

logger = logging.getLogger('shpiller.toolchain')

NASM = 'nasm'
LD = 'ld'


class ToolchainError(CompilerError):
    """ An external tool failed """
    def __init__(self, stage, msg):
        super().__init__(msg)
        self.stage = stage


def has_toolchain(nasm=NASM, ld=LD):
    """ Determine if both assembler and linker are installed """
    return bool(shutil.which(nasm)) and bool(shutil.which(ld))


def run_tool(stage, args):
    """ Run an external tool, raise ToolchainError when it fails """
    logger.debug('Running %s: %s', stage, ' '.join(args))
    try:
        res = subprocess.run(
            args, stdout=subprocess.PIPE, stderr=subprocess.PIPE,
            universal_newlines=True)
    except OSError as err:
        raise ToolchainError(
            stage, 'Could not run {} ({}): {}'.format(stage, args[0], err))

    if res.stdout:
        logger.debug(res.stdout)
    if res.returncode != 0:
        if res.stderr:
            logger.error(res.stderr)
        raise ToolchainError(
            stage, 'The {} failed with exit code {}'.format(
                stage, res.returncode))


def assemble(asm_path, obj_path=None, nasm=NASM):
    """ Assemble an assembly file into an elf64 object file """
    if obj_path is None:
        obj_path = os.path.splitext(asm_path)[0] + '.o'
    run_tool('assembler', [nasm, '-felf64', asm_path, '-o', obj_path])
    return obj_path


def link(obj_path, exe_path=None, ld=LD):
    """ Link an object file into an executable """
    if exe_path is None:
        exe_path = os.path.splitext(obj_path)[0]
    run_tool('linker', [ld, obj_path, '-o', exe_path])
    return exe_path


def assemble_and_link(asm_path, exe_path=None, nasm=NASM, ld=LD):
    """ Turn the assembly file into an executable """
    obj_path = assemble(asm_path, nasm=nasm)
    exe_path = link(obj_path, exe_path, ld=ld)
    logger.info('Created executable %s', exe_path)
    return exe_path
