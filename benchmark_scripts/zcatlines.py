import os
import sys

from zcat_lines import zcat_lines

with open(os.devnull, "wb") as out_file:
    zcat_lines(sys.argv[1], out_file)
