"""
   Error handling routines
   Diagnostic utils
"""


import logging


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


def get_file(f, mode='r'):
    """ Determine if argument is a file like object or make it so! """
    if hasattr(f, 'read'):
        # Assume this is a file like object
        return f
    elif isinstance(f, str):
        return open(f, mode, encoding='utf-8')
    else:
        raise FileNotFoundError('Cannot open {}'.format(f))


class CompilerError(Exception):
    def __init__(self, msg, loc=None):
        super().__init__(msg)
        self.msg = msg
        self.loc = loc

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def print(self, file=None):
        """ Print the error, prefixed with its location if known """
        if self.loc:
            print('{}: {}'.format(self.loc, self.msg), file=file)
        else:
            print(self.msg, file=file)


class ParseError(CompilerError):
    pass


class DiagnosticsManager:
    """ Collects the errors of a compilation and prints them """
    def __init__(self):
        self.diags = []
        self.logger = logging.getLogger('diagnostics')

    def add_diag(self, d):
        """ Add a diagnostic message """
        self.logger.debug('Reported: %s', d.msg)
        self.diags.append(d)

    def print_errors(self, file=None):
        """ Print all errors reported """
        for d in self.diags:
            d.print(file=file)
