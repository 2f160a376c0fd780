# Copyright (c) 2023 zcat-lines contributors

# This file is part of zcat-lines which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

"""Open gzip files and iterate over their decoded lines.

Files may contain several gzip members back to back. They are decoded as
one continuous stream by zlib_ng's gzip_ng module.
"""

from zlib_ng import gzip_ng, zlib_ng

__all__ = ["FatalInputError", "open_gzip", "iter_lines", "DEFAULT_FILENAME"]

DEFAULT_FILENAME = "test-multi.txt.gz"

# Everything that can go wrong while pulling a line out of a gzip stream.
# BadGzipFile is an OSError, truncated streams raise EOFError.
_READ_ERRORS = (OSError, EOFError, UnicodeDecodeError, zlib_ng.error)


class FatalInputError(Exception):
    """The input file could not be opened or one of its lines could not be
    read. The run cannot continue."""

    def __init__(self, filename, cause, lineno=None):
        self.filename = filename
        self.cause = cause
        self.lineno = lineno
        super().__init__(self._message())

    def _message(self):
        if self.lineno is None:
            return (f"Cannot open file '{self.filename}', "
                    f"Error: {self.cause}")
        return (f"Cannot read line {self.lineno} of {self.filename}, "
                f"Error: {self.cause}")


def open_gzip(filename):
    """Open a gzip-compressed file for line-wise reading.

    The filename argument can be a str, bytes or os.PathLike object.
    Returns a GzipNGFile, which buffers the decompressed contents of all
    gzip members in the file. Raises FatalInputError when the file cannot be
    opened.
    """
    try:
        return gzip_ng.GzipNGFile(filename, mode="rb")
    except OSError as error:
        raise FatalInputError(filename, error) from error


def _strip_terminator(raw_line):
    if raw_line.endswith(b"\n"):
        raw_line = raw_line[:-1]
        if raw_line.endswith(b"\r"):
            raw_line = raw_line[:-1]
    return raw_line


def iter_lines(stream, filename):
    """Yield (lineno, line) tuples from a binary stream.

    Lines are decoded as UTF-8 and returned without their "\\n" or "\\r\\n"
    terminator. lineno starts at 1 and is counted before each read, so a
    FatalInputError raised for a failing read names the line that failed.
    """
    lineno = 0
    while True:
        lineno += 1
        try:
            raw_line = stream.readline()
            if not raw_line:
                return
            line = _strip_terminator(raw_line).decode("utf-8")
        except _READ_ERRORS as error:
            raise FatalInputError(filename, error, lineno) from error
        yield lineno, line
