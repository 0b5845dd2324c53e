"""Argument checks run before any request is built."""
import re
from typing import List, Optional

from .exceptions import InputFormatError, UsageError

# ASCII digits only: no underscores, whitespace or non-Latin numerals
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
NON_NEGATIVE_RE = re.compile(r"[0-9]+")


def check_args_num(args: Optional[List[str]], expected: int) -> List[str]:
    """Ensure exactly ``expected`` positional arguments were given."""
    args = list(args or [])
    if len(args) != expected:
        raise UsageError(expected, len(args))
    return args


def parse_size(value: str, what: str = "size") -> int:
    """Parse a volume size in GB.

    Raises:
        InputFormatError: if the value is not a positive integer
    """
    if not isinstance(value, str) or not INTEGER_RE.fullmatch(value):
        raise InputFormatError(f"input {what} is not valid. It only support integer.")
    size = int(value)
    if size <= 0:
        raise InputFormatError(f"input {what} must be a positive integer, got {size}.")
    return size


def parse_non_negative(value: str, flag: str) -> str:
    """Check that a pagination flag holds a non-negative integer and return it as given."""
    if not NON_NEGATIVE_RE.fullmatch(value):
        raise InputFormatError(f"--{flag} must be a non-negative integer, got '{value}'.")
    return value
