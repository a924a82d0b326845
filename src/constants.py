WHITESPACE = " \t\n"
MAX_COMMAND_SIZE = 255
# command plus up to 10 arguments
MAX_NUM_TOKENS = 11

REDIRECT_MARKER = ">"
# owner read/write
REDIRECT_MODE = 0o600

SEARCH_PREFIXES = ("/bin/", "/usr/bin/", "/usr/local/bin/", "./")

PROMPT = "msh> "
ERROR_MESSAGE = "An error has occurred\n"
DEBUG_ENV_VAR = "MSH_DEBUG"
# undecodable input bytes become part of a token instead of a read error
INPUT_ERRORS = "surrogateescape"
