import os

VERSION = "1.0.0"

# maximal number of digits of an array index in a pointer
MAX_INDEX_DIGITS = 8
END_OF_ARRAY_TOKEN = "-"

LOGLEVEL_ENV_VAR = "JSONPTR_LOGLEVEL"
DEFAULT_LOGLEVEL = os.environ.get(LOGLEVEL_ENV_VAR, "warning")
