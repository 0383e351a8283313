import os

from shell.errors import report
from shell.status import STATUS_CONTINUE, STATUS_FORK_FAILED

EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


def launch(tokens):
    """Run tokens[0] from PATH in a child process and wait for it to finish."""
    try:
        rc = os.fork()
    except OSError as e:
        report(f"fork failed: {e.strerror}")
        return STATUS_FORK_FAILED

    if rc == 0:  # Child process
        try:
            os.execvp(tokens[0], tokens)
        except FileNotFoundError:
            report(f"{tokens[0]}: command not found")
            os._exit(EXIT_NOT_FOUND)
        except OSError as e:
            report(f"{tokens[0]}: {e.strerror}")
            os._exit(EXIT_NOT_EXECUTABLE)
        except ValueError as e:  # embedded null byte
            report(f"{tokens[0]}: {e}")
            os._exit(EXIT_NOT_EXECUTABLE)

    # Parent process
    status = wait_for(rc)
    if os.WIFEXITED(status) and os.WEXITSTATUS(status) != 0:
        report(f"Program terminated with exit code {os.WEXITSTATUS(status)}")
    elif os.WIFSIGNALED(status):
        report(f"Program terminated by signal {os.WTERMSIG(status)}")
    return STATUS_CONTINUE


def wait_for(pid):
    """Wait on pid until it exits or is killed, skipping stop notifications."""
    while True:
        try:
            _, status = os.waitpid(pid, os.WUNTRACED)
        except KeyboardInterrupt:
            continue  # Ctrl-C reaches the child too
        if os.WIFEXITED(status) or os.WIFSIGNALED(status):
            return status
