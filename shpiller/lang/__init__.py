""" Front-end of the compiler: lexer, parser and ast nodes. """

from .lexer import Lexer
from .parser import Parser
from .nodes import Expression, ExitProgram
from .bindings import BindingTable


__all__ = ["Lexer", "Parser", "Expression", "ExitProgram", "BindingTable"]
