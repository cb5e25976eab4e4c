""" Lexer for the exit language. """

import logging
import re
from .tools.baselex import SimpleLexer, on


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
NUMERAL = re.compile(r"[+-]?[0-9]+")


def parse_int64(txt):
    """ Parse txt as a signed 64 bit integer.

    Returns None when txt is not a decimal numeral, or when its value
    does not fit in 64 bits.
    """
    if not NUMERAL.fullmatch(txt):
        return None
    value = int(txt)
    if INT64_MIN <= value <= INT64_MAX:
        return value


class Lexer(SimpleLexer):
    """ Splits source text into a list of tokens.

    Spaces, newlines and the glyphs ``; ( ) =`` delimit words. Each word
    becomes a keyword, an integer literal or, failing both, an identifier.
    The lexer never fails.
    """

    logger = logging.getLogger("shpiller.lexer")

    keywords = ["exit", "let"]
    glyphs = (";", "(", ")", "=")
    delimiters = " \n" + "".join(glyphs)
    word_txt = "[^{}]+".format(re.escape(delimiters))

    def tokenize(self, text):
        """ Return the complete list of tokens in text """
        tokens = list(super().tokenize(text))
        self.logger.debug("Lexed %s tokens", len(tokens))
        return tokens

    @on(r"[ \n]+")
    def handle_skip(self, val):
        pass

    @on("|".join(re.escape(g) for g in glyphs))
    def handle_glyph(self, val):
        return val, val

    @on(word_txt)
    def handle_word(self, val):
        if val in self.keywords:
            return val, val
        value = parse_int64(val)
        if value is not None:
            return "NUMBER", value
        return "ID", val.strip()
