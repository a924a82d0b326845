#!/usr/bin/env python3
""" Command-line entry point for msh. """
import logging
import os
import sys

from constants import DEBUG_ENV_VAR, INPUT_ERRORS
from exceptions import report_error
from shell import Shell


def configure_logging():
    level = logging.DEBUG if os.environ.get(DEBUG_ENV_VAR) else logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(name)s: %(levelname)s: %(message)s",
    )


def main(argv=None) -> int:
    """
    Run msh interactively with no arguments, or in batch mode with one
    argument naming the command file. Returns the exit status.
    """
    if argv is None:
        argv = sys.argv[1:]

    configure_logging()

    if len(argv) > 1:
        report_error()
        return 1

    if not argv:
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors=INPUT_ERRORS)
        return Shell().run()

    try:
        infile = open(argv[0], "r", errors=INPUT_ERRORS)
    except OSError:
        report_error()
        return 1

    with infile:
        return Shell(infile).run()


if __name__ == "__main__":
    sys.exit(main())
