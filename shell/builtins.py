import os

from shell.errors import report
from shell.status import STATUS_CONTINUE, STATUS_EXIT


def builtin_cd(tokens):
    if len(tokens) < 2:
        report('expected argument to "cd"')
        return STATUS_CONTINUE
    try:
        os.chdir(tokens[1])
    except OSError as e:
        report(f"cd: {e.strerror}: {tokens[1]}")
    return STATUS_CONTINUE


def builtin_help(tokens):
    lines = [
        "status-shell",
        "Type program names and arguments, and hit enter.",
        "The following are built in:",
    ]
    lines += [f"  {name}" for name, _ in BUILTINS]
    lines.append("Use the man command for information on other programs.")
    os.write(1, ("\n".join(lines) + "\n").encode())
    return STATUS_CONTINUE


def builtin_exit(tokens):
    return STATUS_EXIT


# Scanned in order, first match wins
BUILTINS = (
    ("cd", builtin_cd),
    ("help", builtin_help),
    ("exit", builtin_exit),
)
