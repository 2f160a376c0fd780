# Copyright (c) 2023 zcat-lines contributors

# This file is part of zcat-lines which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

import argparse
import sys

from .pipeline import zcat_lines
from .reader import DEFAULT_FILENAME, FatalInputError


def _argument_parser():
    parser = argparse.ArgumentParser(prog="zcat-lines")
    parser.description = (
        f"Decompress {DEFAULT_FILENAME} and write its lines to standard "
        f"output. Concatenated gzip members are read as one stream.")
    return parser


def main(argv=None):
    _argument_parser().parse_args(argv)
    try:
        zcat_lines(DEFAULT_FILENAME, sys.stdout.buffer)
    except FatalInputError as error:
        sys.exit(str(error))


if __name__ == "__main__":  # pragma: no cover
    main()
