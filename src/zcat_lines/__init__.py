# Copyright (c) 2023 zcat-lines contributors

# This file is part of zcat-lines which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

"""Print the lines of a (multi-member) gzip file to standard output."""

from .pipeline import zcat_lines
from .reader import DEFAULT_FILENAME, FatalInputError, iter_lines, open_gzip
from .writer import write_lines

__all__ = ["zcat_lines", "open_gzip", "iter_lines", "write_lines",
           "FatalInputError", "DEFAULT_FILENAME"]

__version__ = "0.1.0"
