"""
Helpers Module - Utility functions for common operations
"""

import re
from .errors import MalformedIdentifierError

_INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')

# Matches the interpreter's default int/str conversion limit
_MAX_IDENTIFIER_LENGTH = 4300


def parse_identifier(value, label='ID'):
    """
    Parse an identifier supplied by a client into an int

    Accepts ints (but not bools), integral floats such as the JSON number 1.0,
    and ASCII decimal strings such as "12" or " 7 ". Anything else, including
    "abc", "1.5", "12abc", non-ASCII digits and None, raises
    MalformedIdentifierError.
    """
    if isinstance(value, bool):
        raise MalformedIdentifierError(f'Invalid {label}')
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        candidate = value.strip()
        if len(candidate) <= _MAX_IDENTIFIER_LENGTH and _INTEGER_PATTERN.fullmatch(candidate):
            try:
                return int(candidate)
            except ValueError:
                # conversion limit lowered via sys.set_int_max_str_digits
                pass
    raise MalformedIdentifierError(f'Invalid {label}')


def split_list(value):
    """Split a comma-delimited string into trimmed, non-empty entries"""
    if not value:
        return []
    return [item.strip() for item in value.split(',') if item.strip()]
