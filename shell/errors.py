import os


class ShellError(Exception):
    """Recoverable interpreter error, reported by the loop which then continues."""


class OutOfMemory(ShellError):
    pass


def report(message):
    os.write(2, f"shell: {message}\n".encode())
