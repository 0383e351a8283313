# Values returned by builtins and the launcher. Only STATUS_EXIT ends the loop;
# the rest are shown in the next prompt.
STATUS_EXIT = 0
STATUS_CONTINUE = 1
STATUS_FORK_FAILED = 2
