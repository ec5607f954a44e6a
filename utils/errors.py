"""
Errors Module - Error taxonomy shared by the schema layer and the API blueprint
Every error is a werkzeug HTTP exception so the app-level handlers can turn it
into a JSON response with the right status code.
"""

from typing import NamedTuple
from werkzeug.exceptions import BadRequest, NotFound, InternalServerError


class FieldError(NamedTuple):
    field: str
    message: str


class ValidationError(BadRequest):
    """One or more fields of a payload failed their schema rule"""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(self.summary())

    @property
    def fields(self):
        """Set of failing field paths, e.g. {'name', 'projects[0].title'}"""
        return {error.field for error in self.errors}

    def summary(self):
        parts = []
        for error in self.errors:
            if error.field:
                parts.append(f'{error.message} at "{error.field}"')
            else:
                parts.append(error.message)
        return 'Validation error: ' + '; '.join(parts)

    def to_list(self):
        return [{'field': e.field, 'message': e.message} for e in self.errors]


class NotFoundError(NotFound):
    """A lookup by identifier found no matching record"""


class MalformedIdentifierError(BadRequest):
    """An identifier that must be an integer could not be parsed as one"""


class UnexpectedError(InternalServerError):
    """Any other failure while handling a request"""


__all__ = [
    'FieldError',
    'ValidationError',
    'NotFoundError',
    'MalformedIdentifierError',
    'UnexpectedError'
]
