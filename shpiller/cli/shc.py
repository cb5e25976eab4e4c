""" Exit language compiler.

Compile a source file into an x86-64 linux executable which exits with
the given status code. The assembly is written next to the source file,
and is assembled with nasm and linked with ld.
"""


import argparse
from .base import base_parser, LogSetup
from .. import api


parser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    parents=[base_parser],
)
parser.add_argument("source", help="source file (*.hy)")
parser.add_argument(
    "-S",
    action="store_true",
    default=False,
    help="Do not assemble, but output assembly language",
)
parser.add_argument(
    "--ast",
    action="store_true",
    default=False,
    help="Output the tokens and the parsed program, do not generate code",
)
parser.add_argument(
    "--output",
    "-o",
    help="executable file, defaults to the source name without extension",
    metavar="output-file",
)


def shc(args=None):
    """ Exit language compiler """
    args = parser.parse_args(args)
    with LogSetup(args) as log:
        if args.ast:
            with open(args.source, "r", encoding="utf-8") as f:
                src = f.read()
            tokens = api.tokenize(src)
            for token in tokens:
                print(token)
            print(api.parse(tokens))
        else:
            api.shc(
                args.source, exe_path=args.output, link=not args.S,
                diag=log.diag)


if __name__ == "__main__":
    shc()
