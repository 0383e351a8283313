import os
import sys

from shell.dispatch import execute
from shell.errors import ShellError, report
from shell.reader import LineReader
from shell.status import STATUS_CONTINUE, STATUS_EXIT
from shell.tokenizer import split_line

PROMPT = "{{{status}}} > "


def shell(fd_in=0):
    """Prompt, read, split and run commands until `exit` or end of input.

    The status returned by each command is shown in the next prompt. `exit`
    ends the loop with its own status; end of input counts as an `exit`.
    """
    reader = LineReader(fd_in)
    status = 0  # nothing has run yet
    while True:
        try:
            os.write(1, PROMPT.format(status=status).encode())
            tokens = split_line(reader.read_line())
        except KeyboardInterrupt:
            os.write(1, b"\n")
            continue
        except ShellError as e:
            report(e)
            status = STATUS_CONTINUE
        else:
            status = execute(tokens)
            if status == STATUS_EXIT:
                return status

        if reader.eof:
            os.write(1, b"\n")
            return STATUS_EXIT


def main():
    sys.exit(shell())
