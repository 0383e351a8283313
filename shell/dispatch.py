from shell.builtins import BUILTINS
from shell.launcher import launch
from shell.status import STATUS_CONTINUE


def find_builtin(name):
    for builtin_name, handler in BUILTINS:
        if builtin_name == name:
            return handler
    return None


def execute(tokens):
    if not tokens:
        return STATUS_CONTINUE

    handler = find_builtin(tokens[0])
    if handler is not None:
        return handler(tokens)
    return launch(tokens)
