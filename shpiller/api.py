"""
The api module contains a set of handy functions to invoke the compiler
stages one by one, or to compile a source file into an executable.
"""

import logging
import os
from .codegen import CodeGenerator
from .common import CompilerError, DiagnosticsManager, get_file
from .lang import Lexer, Parser
from .toolchain import assemble_and_link

# When using 'from shpiller.api import *' include the following:
__all__ = [
    'tokenize', 'parse', 'generate', 'compile_source', 'shc']

logger = logging.getLogger('shpiller.api')


def tokenize(source: str):
    """ Split source text into a list of tokens """
    return Lexer().tokenize(source)


def parse(tokens, bindings=None):
    """ Parse tokens into an exit program.

    bindings is an optional BindingTable which receives the 'let'
    bindings. A fresh table is used when it is not given.
    """
    return Parser(bindings).parse(tokens)


def generate(program, output_file=None):
    """ Generate x86_64 assembly text for a parsed program """
    return CodeGenerator().generate(program, output_file=output_file)


def compile_source(source: str) -> str:
    """ Compile source text into assembly text.

    Example:

    >>> asm = compile_source('let x = 3; exit(x);')
    >>> 'mov rdi, 3' in asm
    True

    """
    tokens = tokenize(source)
    program = parse(tokens)
    return generate(program)


def shc(source, exe_path=None, asm_path=None, link=True, diag=None):
    """ Compile a source file into an executable.

    source can be a filename or a file like object. The assembly is
    written next to the source file, unless asm_path is given. When link
    is False, no assembler or linker is run. Errors are reported to
    diag, a DiagnosticsManager, before they are raised.

    Returns the path of the executable, or of the assembly file
    when not linking.
    """
    if diag is None:
        diag = DiagnosticsManager()

    if isinstance(source, str):
        filename = source
    else:
        filename = getattr(source, 'name', None)

    if asm_path is None:
        if not filename:
            raise ValueError('Cannot determine assembly filename')
        asm_path = os.path.splitext(filename)[0] + '.asm'
    if link and exe_path is None:
        exe_path = os.path.splitext(asm_path)[0]

    try:
        check_output_path(filename, asm_path)
        if link:
            check_output_path(filename, exe_path)

        f = get_file(source)
        try:
            src = f.read()
        finally:
            if f is not source:
                f.close()

        if not src:
            raise CompilerError('Input file is empty', loc=filename)

        logger.info('Compiling %s', filename)
        try:
            asm = compile_source(src)
        except CompilerError as ex:
            # Errors from the front-end do not know the file they are in:
            if ex.loc is None:
                ex.loc = filename
            raise

        # Only write output after the whole source compiled:
        with open(asm_path, 'w') as f:
            f.write(asm)
        logger.debug('Wrote assembly to %s', asm_path)

        if link:
            return assemble_and_link(asm_path, exe_path)
        else:
            return asm_path
    except CompilerError as ex:
        diag.add_diag(ex)
        raise


def check_output_path(filename, path):
    """ Refuse to write an output file over the source file """
    if filename and os.path.abspath(path) == os.path.abspath(filename):
        raise CompilerError(
            'Output file {} would overwrite the source'.format(path),
            loc=filename)
