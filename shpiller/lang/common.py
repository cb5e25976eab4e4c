class Token:
    """
    Token is used in the lexical analyzer. The lexical analyzer takes
    a text and splits it into tokens.

    Tokens do not remember where in the source they came from.
    """

    __slots__ = ["typ", "val"]

    def __init__(self, typ, val):
        self.typ = typ
        self.val = val

    def __eq__(self, other):
        if isinstance(other, Token):
            return (self.typ, self.val) == (other.typ, other.val)
        return NotImplemented

    def __hash__(self):
        return hash((self.typ, self.val))

    def __repr__(self):
        return "Token({}, {})".format(self.typ, self.val)
