# Copyright (c) 2023 zcat-lines contributors

# This file is part of zcat-lines which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

__all__ = ["write_lines"]


def write_lines(lines, out):
    """Write (lineno, line) tuples to the binary stream out, each line
    terminated with a single newline. Return the number of lines written.

    out is flushed once at the end, also when pulling a line fails, so lines
    that were already read reach the output. Errors from writing or flushing
    are not caught.
    """
    written = 0
    try:
        for _, line in lines:
            out.write((line + "\n").encode("utf-8"))
            written += 1
    finally:
        out.flush()
    return written
