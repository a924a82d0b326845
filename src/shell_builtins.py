""" Registry of builtin commands. """
import logging

from exceptions import ShellExit, report_error

logger = logging.getLogger(__name__)

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


@builtin("cd")
def builtin_cd(args, state):
    if len(args) != 1:
        report_error()
        return 1

    try:
        state.chdir(args[0])
    except (OSError, ValueError) as e:
        logger.debug("cd %s failed: %s", args[0], e)
        report_error()
        return 1
    return 0


@builtin("quit")
@builtin("exit")
def builtin_exit(args, state):
    # Arguments are ignored; always a clean exit.
    raise ShellExit(0)


def handle_builtin(tokens: list[str], state) -> bool:
    """ Run tokens as a builtin if the name is one. Returns True if handled. """
    func = BUILTINS.get(tokens[0])
    if func is None:
        return False
    logger.debug("builtin %s %r", tokens[0], tokens[1:])
    func(tokens[1:], state)
    return True
