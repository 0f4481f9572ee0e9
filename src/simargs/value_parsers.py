
"""
Value parsers for option tokens.

Each parser is a pure function from a raw textual token to a validated value.
They are kept apart from the dispatcher because they can be used to parse any
string input, not only command-line arguments (e.g. values read from a
parameter file).

All parsers report failure the same way: by raising a subclass of
:class:`ValueParseError`, which is itself a :class:`~simargs.user_error.UserError`.
"""

import logging
import os
from pathlib import Path
from typing import Sequence, Tuple
from lark import Lark, Transformer, Token
from lark.exceptions import LarkError

from .user_error import UserError


# Accepted on every platform, whatever the width of the destination.
INT32_MAX = 2**31 - 1
INT32_MIN = -INT32_MAX


class ValueParseError(UserError):
    pass


class NotAnInteger(ValueParseError):
    def __init__(self, token: str) -> None:
        self.token = token
        self._init("%r is not an integer in the range [%d, %d].",
                   token, INT32_MIN, INT32_MAX)


class FileNotAccessible(ValueParseError):
    def __init__(self, token: str) -> None:
        self.token = token
        self._init("File %r is not accessible.", token)


class DirectoryNotWritable(ValueParseError):
    def __init__(self, token: str, directory: Path) -> None:
        self.token = token
        self._init("Cannot write %r: directory %r is not writable.",
                   token, str(directory))


class EmptyValue(ValueParseError):
    def __init__(self) -> None:
        self._init("Expected a non-empty value.")


class UnknownLogLevel(ValueParseError):
    def __init__(self, token: str) -> None:
        self.token = token
        self._init("Unknown log level %r, expected one of %s.",
                   token, ", ".join(LOG_LEVELS))


# ------------------------------------------------------------------------------
# Integers
# ------------------------------------------------------------------------------

INTEGER_GRAMMAR = r"""
start: SIGN? DIGITS

SIGN:   /[+-]/
DIGITS: /[0-9]+/
"""


# Digits of INT32_MAX, for comparing magnitudes before any conversion.
_INT32_MAX_DIGITS = str(INT32_MAX)


class _IntegerTransformer(Transformer[Token, Tuple[str, str]]):
    def start(self, items: Sequence[Token]) -> Tuple[str, str]:
        sign = ""
        digits = ""
        for tok in items:
            if tok.type == "SIGN":
                sign = tok.value
            else:
                digits = tok.value
        return sign, digits


_integer_parser = Lark(
    INTEGER_GRAMMAR,
    parser="lalr",
    propagate_positions=False,
    maybe_placeholders=False,
)


def _parse_bounded(token: str) -> int:
    try:
        tree = _integer_parser.parse(token)
    except LarkError as ex:
        raise NotAnInteger(token) from ex

    sign, digits = _IntegerTransformer().transform(tree)
    magnitude = digits.lstrip("0") or "0"
    if (len(magnitude), magnitude) > (len(_INT32_MAX_DIGITS), _INT32_MAX_DIGITS):
        raise NotAnInteger(token)
    return int(sign + magnitude)


def parse_integer(token: str) -> int:
    """
    Parse a 32-bit signed integer.

    Accepts ``[+-]?[0-9]+`` with no surrounding whitespace and fails when
    ``N > 2**31 - 1`` or ``N < -(2**31 - 1)``.
    """
    return _parse_bounded(token)


def parse_long(token: str) -> int:
    """
    Parse a wide integer.

    Python integers have no platform-dependent width, so this accepts exactly
    what :func:`parse_integer` accepts. The range stays fixed at
    ``[-(2**31 - 1), 2**31 - 1]`` so results are identical everywhere.
    """
    return _parse_bounded(token)


# ------------------------------------------------------------------------------
# Paths
# ------------------------------------------------------------------------------

def parse_read_file(token: str) -> str:
    """Check that ``token`` names a readable file on disk. Nothing is read."""
    path = Path(token)
    if not token or not path.is_file() or not os.access(path, os.R_OK):
        raise FileNotAccessible(token)
    return token


def parse_write_dir_prefix(token: str) -> str:
    """
    Check that ``token`` can be used as an output path prefix, i.e. that the
    directory it points into exists and is writable.
    """
    if not token:
        raise EmptyValue()
    directory = Path(os.path.dirname(token) or ".")
    if not directory.is_dir() or not os.access(directory, os.W_OK):
        raise DirectoryNotWritable(token, directory)
    return token


# ------------------------------------------------------------------------------
# Misc
# ------------------------------------------------------------------------------

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_string(token: str) -> str:
    if not token:
        raise EmptyValue()
    return token


def parse_log_level(token: str) -> int:
    try:
        return LOG_LEVELS[token.lower()]
    except KeyError:
        raise UnknownLogLevel(token)
