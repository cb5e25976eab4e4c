""" A recursive descent parser for the exit language.

Grammar::

    program    := statement*
    statement  := binding | exitStmt
    binding    := "let" identifier "=" intLiteral
    exitStmt   := "exit" "(" operand ")" ";"
    operand    := intLiteral | identifier

"""

import logging
from .tools.recursivedescent import RecursiveDescentParser
from .bindings import BindingTable
from .lexer import NUMERAL, parse_int64
from .nodes import Expression, ExitProgram


class Parser(RecursiveDescentParser):
    """ Parses a list of tokens into a single exit program.

    Bindings are resolved while parsing, so the resulting tree only
    contains integers. Tokens which do not start a statement are skipped.
    """

    logger = logging.getLogger("shpiller.parser")

    def __init__(self, bindings=None):
        super().__init__()
        self.given_bindings = bindings
        self.bindings = None

    def parse(self, tokens):
        """ Parse a program from tokens """
        self.logger.debug("Parsing source")
        self.init_lexer(tokens)
        if self.given_bindings is None:
            self.bindings = BindingTable()
        else:
            self.bindings = self.given_bindings

        program = None
        while not self.at_end:
            if self.peek == "let":
                self.parse_binding()
            elif self.peek == "exit":
                program = self.parse_exit()
            else:
                skipped = self.next_token()
                self.logger.debug("Skipping %s", skipped)

        if program is None:
            self.logger.warning("No exit statement found, exiting with 0")
            program = ExitProgram(Expression(0))
        self.logger.debug("Parsing complete")
        return program

    def parse_binding(self):
        """ Parse a binding of the form 'let' ID '=' NUMBER """
        self.consume("let")
        name = self.consume("ID").val
        self.consume("=")
        if self.peek == "ID":
            self.check_overflow(self.token.val)
        value = self.consume("NUMBER").val
        self.logger.debug("Binding %s to %s", name, value)
        self.bindings.bind(name, value)

    def parse_exit(self):
        """ Parse the exit statement: 'exit' '(' operand ')' """
        self.consume("exit")
        self.consume("(")
        expr = self.parse_expression()
        if expr is None:
            self.error("Invalid expression after exit")
        self.consume(")")
        return ExitProgram(expr)

    def parse_expression(self):
        """ Parse an integer literal or a reference to a binding.

        Returns None when the current token can not start an expression.
        """
        if self.peek == "NUMBER":
            return Expression(self.consume("NUMBER").val)
        elif self.peek == "ID":
            name = self.consume("ID").val
            if name not in self.bindings:
                self.check_overflow(name)
                self.error("Undefined identifier {}".format(name))
            return Expression(self.bindings[name])

    def check_overflow(self, name):
        """ The lexer turns numerals which do not fit into identifiers """
        if NUMERAL.fullmatch(name) and parse_int64(name) is None:
            self.error(
                "Integer literal {} does not fit in 64 bits".format(name))
