""" Command to be executed, and its output redirection. """
import logging
import os

from constants import REDIRECT_MARKER, REDIRECT_MODE
from exceptions import report_error
from shell_state import ShellState

logger = logging.getLogger(__name__)


class Command:
    """ A command line with redirection syntax removed. """
    def __init__(self, name, args, stdout=None, redirect_error=False):
        self.name = name          # None if nothing but redirection was given
        self.args = args
        self.stdout = stdout      # filename or None

        # True for a trailing '>' with no filename
        self.redirect_error = redirect_error

    @property
    def argv(self) -> list[str]:
        return [self.name] + self.args


def resolve_redirection(tokens: list[str]) -> Command:
    """
    Strip the first '>' and the filename after it from the token list.

    Tokens after the filename stay arguments. A second '>' is an ordinary
    argument.
    """
    tokens = list(tokens)
    stdout = None
    redirect_error = False

    if REDIRECT_MARKER in tokens:
        i = tokens.index(REDIRECT_MARKER)
        if i + 1 < len(tokens):
            stdout = tokens[i + 1]
            del tokens[i:i + 2]
        else:
            redirect_error = True
            del tokens[i]

    if not tokens:
        return Command(None, [], stdout, redirect_error)
    return Command(tokens[0], tokens[1:], stdout, redirect_error)


def open_redirect_target(filename: str, state: ShellState) -> int|None:
    """
    Open (create, truncate) the redirection target for the child.

    Returns a raw file descriptor the caller must close, or None after
    reporting an error.
    """
    path = state.resolve(filename)
    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, REDIRECT_MODE)
    except (OSError, ValueError) as e:
        logger.debug("cannot open redirect target %s: %s", path, e)
        report_error()
        return None
    logger.debug("redirecting stdout to %s (fd %d)", path, fd)
    return fd
