""" Shell exceptions and the error channel. """
import sys

from constants import ERROR_MESSAGE


class ShellExit(Exception):
    """ Raised by exit/quit to leave the read loop. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


def report_error():
    # Every failure gets the same line, no detail.
    sys.stderr.write(ERROR_MESSAGE)
    sys.stderr.flush()
