""" Current state of the shell. """
import os


class ShellState:
    """
    Working-directory context shared by the builtins and the runner.

    `cwd` mirrors the process working directory after every `cd`, and is
    what relative executable and redirection paths are resolved against.
    """
    def __init__(self, cwd=None):
        self.cwd = cwd if cwd is not None else os.getcwd()

    def resolve(self, path: str) -> str:
        return os.path.join(self.cwd, path)

    def chdir(self, target: str):
        # Raises OSError, or ValueError for a NUL; cwd is unchanged on failure.
        os.chdir(self.resolve(target))
        self.cwd = os.getcwd()
