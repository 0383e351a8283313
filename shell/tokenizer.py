import re

from shell.errors import OutOfMemory

TOKEN_DELIMITERS = " \t\r\n\a"

_DELIM_RE = re.compile("[" + re.escape(TOKEN_DELIMITERS) + "]+")


def split_line(line):
    # Runs of delimiters collapse, so empty strings only appear at the edges
    try:
        return [token for token in _DELIM_RE.split(line) if token]
    except MemoryError:
        raise OutOfMemory("allocation error") from None
