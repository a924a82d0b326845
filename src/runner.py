""" Execute an external command. """
import logging
import os
import subprocess
import sys

from command import open_redirect_target, resolve_redirection
from constants import SEARCH_PREFIXES
from exceptions import report_error
from shell_state import ShellState

logger = logging.getLogger(__name__)


def find_executable(name: str, state: ShellState) -> str|None:
    """
    Return the first SEARCH_PREFIXES candidate that is an executable file.

    The prefix and the name are concatenated as-is, so a name containing
    a leading '/' does not resolve. Relative candidates are taken from
    the shell's working directory.
    """
    for prefix in SEARCH_PREFIXES:
        candidate = state.resolve(prefix + name)
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    return None


def spawn(path: str, argv: list[str], stdout=None, cwd=None) -> int:
    """
    Run `path` with `argv` as a child process and wait for it to finish.

    `stdout` is a file descriptor (or None to inherit ours). argv[0] is
    passed through unchanged. Returns the child's exit status; raises
    OSError if the child cannot be started, ValueError for a NUL in argv.
    """
    completed = subprocess.run(argv, executable=path, stdout=stdout, cwd=cwd)
    return completed.returncode


def execute_command(tokens: list[str], state: ShellState) -> int|None:
    """
    Run a non-builtin command line. Returns the child's exit status, or
    None if no child was started. Failures are reported, not raised.
    """
    cmd = resolve_redirection(tokens)
    if cmd.redirect_error:
        report_error()

    stdout_fd = None
    try:
        if cmd.stdout is not None:
            stdout_fd = open_redirect_target(cmd.stdout, state)

        if cmd.name is None:
            report_error()
            return None

        path = find_executable(cmd.name, state)
        if path is None:
            logger.debug("%s: not found in %r", cmd.name, SEARCH_PREFIXES)
            report_error()
            return None

        # Keep our buffered output ahead of the child's.
        sys.stdout.flush()
        try:
            status = spawn(path, cmd.argv, stdout=stdout_fd, cwd=state.cwd)
        except (OSError, ValueError) as e:
            logger.debug("cannot start %s: %s", path, e)
            report_error()
            return None

        logger.debug("%s exited with status %d", path, status)
        return status
    finally:
        if stdout_fd is not None:
            os.close(stdout_fd)
