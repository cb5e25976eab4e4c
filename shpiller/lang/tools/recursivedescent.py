from ..common import Token
from ...common import ParseError


def make_comma_or(parts):
    parts = list(map(lambda x: f'"{x}"', parts))
    if len(parts) > 1:
        last = parts[-1]
        first = parts[:-1]
        return ", ".join(first) + " or " + last
    else:
        return "".join(parts)


class RecursiveDescentParser:
    """Base class for recursive descent parsers over a list of tokens"""

    def __init__(self):
        self.tokens = []  # Sequence of tokens
        self.index = 0  # Cursor into the tokens

    def init_lexer(self, tokens):
        """Initialize the parser with the given tokens"""
        self.tokens = list(tokens)
        self.index = 0

    def error(self, msg):
        """Raise an error"""
        raise ParseError(msg)

    @property
    def token(self):
        """The current token under cursor, None at the end"""
        return self.look_ahead(0)

    # Lexer helpers:
    def consume(self, typ) -> Token:
        """Assert that the next token is typ, and if so, return it.

        If typ is a list or tuple, consume one of the given types.
        """
        assert typ is not None
        expected_types = typ if isinstance(typ, (list, tuple, set)) else [typ]

        expected = make_comma_or(expected_types)
        if self.at_end:
            self.error(f"Expected {expected}, got end of input")
        elif self.peek in expected_types:
            return self.next_token()
        else:
            self.error(f'Expected {expected}, got "{self.peek}"')

    def next_token(self) -> Token:
        """Advance to the next token"""
        tok = self.token
        self.index += 1
        return tok

    @property
    def peek(self):
        """Look at the next token to parse without popping it"""
        if self.token:
            return self.token.typ

    def look_ahead(self, amount: int):
        """Take a look at x tokens ahead"""
        if self.index + amount < len(self.tokens):
            return self.tokens[self.index + amount]

    @property
    def at_end(self):
        return self.peek is None
