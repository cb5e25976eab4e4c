import re
from ..common import Token


def on(pattern, flags=0, order=0):
    """ Register method to the given pattern """
    prog = re.compile(pattern, flags=flags)

    def wrapper(f):
        setattr(f, '$lex', (prog, order))
        return f
    return wrapper


class LexMeta(type):
    """ Meta class which inspects the functions decorated with 'on' """
    def __new__(cls, name, bases, attrs):
        lexmap = []
        for n, value in attrs.items():
            if n.startswith('__'):
                continue
            if hasattr(value, '$lex'):
                prog, order = getattr(value, '$lex')
                lexmap.append((prog, order, value))
        lexmap.sort(key=lambda l: l[1])
        attrs['lexmap'] = lexmap
        return type.__new__(cls, name, bases, attrs)


class SimpleLexer(metaclass=LexMeta):
    """ Simple class for lexing.

    Use this class by subclassing it and decorating handler methods
    with the 'on' function. Every position in the text must be matched
    by one of the handlers.
    """
    def gettok(self):
        """ Find a match at the given position """
        for prog, _, func in self.lexmap:
            mo = prog.match(self.txt, self.pos)
            if mo:
                self.pos = mo.end()
                res = func(self, mo.group(0))
                if res:
                    typ, val = res
                    return Token(typ, val)
                else:
                    return

        # No handler matched. Subclasses are expected to cover every
        # character, so this is a bug in the lexer definition:
        raise AssertionError(
            'No lexer rule for {!r} at {}'.format(self.txt[self.pos], self.pos))

    def tokenize(self, txt):
        """ Generator that generates lexical tokens from text. """
        self.pos = 0
        self.txt = txt
        while len(txt) != self.pos:
            tok = self.gettok()
            if tok:
                yield tok
