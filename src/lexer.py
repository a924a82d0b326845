""" Lexical analysis for shell commands. """
import logging
import re

from constants import MAX_COMMAND_SIZE, MAX_NUM_TOKENS, WHITESPACE

logger = logging.getLogger(__name__)

DELIMITER_RX = re.compile("[" + re.escape(WHITESPACE) + "]")


def tokenize(line: str) -> list[str]:
    """
    Split a raw command line on single space, tab or newline characters.

    Empty fields from consecutive delimiters are dropped, so the result has
    no gaps. At most MAX_NUM_TOKENS tokens are returned and each one is cut
    to MAX_COMMAND_SIZE characters. No quoting or escaping is recognized.
    """
    tokens = []
    for field in DELIMITER_RX.split(line):
        if len(tokens) >= MAX_NUM_TOKENS:
            break
        if field:
            tokens.append(field[:MAX_COMMAND_SIZE])

    logger.debug("tokenized %r -> %r", line, tokens)
    return tokens
