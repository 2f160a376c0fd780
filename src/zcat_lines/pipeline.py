# Copyright (c) 2023 zcat-lines contributors

# This file is part of zcat-lines which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

from .reader import iter_lines, open_gzip
from .writer import write_lines

__all__ = ["zcat_lines"]


def zcat_lines(filename, out):
    """Decompress filename and write its lines to the binary stream out.

    Returns the number of lines written. Raises FatalInputError when the
    file cannot be opened or a line cannot be read. Output errors are
    raised as they are.
    """
    with open_gzip(filename) as in_file:
        return write_lines(iter_lines(in_file, filename), out)
