"""
Console output helpers.

Messages go to stderr so bundled output piped to stdout stays clean.
"""
import sys
from enum import IntEnum


class Verbosity(IntEnum):
    NONE = 0
    ERRORS = 8
    VERBOSE = 256


# Global verbosity level and debug flag
_VERBOSITY = Verbosity.VERBOSE
_DEBUG = False


def set_verbosity(value):
    """Set the global verbosity level."""
    global _VERBOSITY
    _VERBOSITY = Verbosity(value)


def get_verbosity():
    return _VERBOSITY


def set_debug(value):
    """Enable or disable resolution tracing."""
    global _DEBUG
    _DEBUG = bool(value)


def parse_verbosity(name):
    """Convert 'None' / 'Errors' / 'Verbose' (any case) or a number into a Verbosity."""
    if isinstance(name, Verbosity):
        return name
    if isinstance(name, int):
        return Verbosity(name)
    try:
        return Verbosity[str(name).strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown verbosity '{name}'. Use one of: None, Errors, Verbose") from None


def log(message):
    """Log informational messages to stderr."""
    if _VERBOSITY >= Verbosity.VERBOSE:
        print(f"\033[92m\033[1mINFO:\033[0m {message}", file=sys.stderr)


def debug_log(message):
    """Log a debug message to stderr if debug tracing is enabled."""
    if _DEBUG:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)


def error_log(message):
    """Log an error to stderr unless output is silenced."""
    if _VERBOSITY >= Verbosity.ERRORS:
        print(f"\033[91m\033[1mERROR:\033[0m {message}", file=sys.stderr)
