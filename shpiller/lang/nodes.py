""" Abstract syntax tree nodes.

After parsing only integers remain: identifiers are resolved against the
bindings while parsing.
"""


class Expression:
    """ An integer valued expression """

    def __init__(self, int_value):
        assert isinstance(int_value, int)
        self.int_value = int_value

    def __eq__(self, other):
        if isinstance(other, Expression):
            return self.int_value == other.int_value
        return NotImplemented

    def __repr__(self):
        return "Expression({})".format(self.int_value)


class ExitProgram:
    """ A complete program, which exits with the value of expr """

    def __init__(self, expr):
        assert isinstance(expr, Expression)
        self.expr = expr

    def __eq__(self, other):
        if isinstance(other, ExitProgram):
            return self.expr == other.expr
        return NotImplemented

    def __repr__(self):
        return "EXIT {}".format(self.expr)
