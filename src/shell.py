""" Implement the core of the shell. """
import logging

from constants import MAX_COMMAND_SIZE, PROMPT
from exceptions import ShellExit, report_error
from lexer import tokenize
from runner import execute_command
from shell_builtins import handle_builtin
from shell_state import ShellState

logger = logging.getLogger(__name__)


def read_command(infile=None, prompt=PROMPT):
    """
    Read one command line.

    With no infile, read interactively with a prompt. Otherwise read the
    next line of the batch file. Raises EOFError at end of input.
    """
    if infile is None:
        return input(prompt)

    line = infile.readline()
    if not line:
        raise EOFError
    return line


class Shell:
    def __init__(self, infile=None):
        self.state = ShellState()
        self.infile = infile

    def run_line(self, line):
        """ Tokenize and run a single command line. """
        tokens = tokenize(line[:MAX_COMMAND_SIZE])
        if not tokens:
            return
        if not handle_builtin(tokens, self.state):
            execute_command(tokens, self.state)

    def run(self):
        while True:
            try:
                try:
                    line = read_command(self.infile)
                except (OSError, UnicodeDecodeError) as e:
                    logger.debug("read failed: %s", e)
                    report_error()
                    continue
                self.run_line(line)

            except ShellExit as e:
                return e.status

            except EOFError:
                if self.infile is None:
                    print()
                return 0

            except KeyboardInterrupt:
                print()
