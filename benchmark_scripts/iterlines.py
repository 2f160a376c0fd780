import sys

from zcat_lines import iter_lines, open_gzip

with open_gzip(sys.argv[1]) as in_file:
    for _ in iter_lines(in_file, sys.argv[1]):
        pass
