""" Main entry point """

from shpiller.cli.shc import shc


if __name__ == "__main__":
    shc()
