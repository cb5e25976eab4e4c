""" A minimal ahead-of-time compiler which turns tiny exit programs into
x86-64 assembly, implemented in pure Python.

Example usage:

>>> from shpiller.api import compile_source
>>> print(compile_source('exit(42);'), end='')
global _start
_start:
    mov rax, 60
    mov rdi, 42
    syscall

"""

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))
