""" Assembly code generator for x86-64 linux.

The output is nasm syntax assembly text, which defines the '_start'
entry point and calls the exit system call.
"""

import logging
from .lang.nodes import ExitProgram


# Linux x86-64 system call number of exit:
SYS_EXIT = 60

ASM_TEMPLATE = """global _start
_start:
    mov rax, {syscall}
    mov rdi, {status}
    syscall
"""


class CodeGenerator:
    """ Assembly code generator """
    logger = logging.getLogger('shpiller.codegen')

    def generate(self, program: ExitProgram, output_file=None) -> str:
        """ Generate assembly text for the program.

        When output_file is given, the text is written to it as well.
        """
        assert isinstance(program, ExitProgram)
        status = program.expr.int_value
        self.logger.info('Generating x86_64 code exiting with %s', status)
        text = ASM_TEMPLATE.format(syscall=SYS_EXIT, status=status)
        if output_file is not None:
            output_file.write(text)
        return text
