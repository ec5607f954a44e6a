"""
Utils Package - Centralized utility modules initialization
"""

from .errors import (
    FieldError,
    ValidationError,
    NotFoundError,
    MalformedIdentifierError,
    UnexpectedError
)
from .helpers import parse_identifier, split_list

__all__ = [
    # Errors
    'FieldError',
    'ValidationError',
    'NotFoundError',
    'MalformedIdentifierError',
    'UnexpectedError',

    # Helpers
    'parse_identifier',
    'split_list'
]
