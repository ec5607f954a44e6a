"""
Decorators Module - Error translation for JSON endpoints
"""

from functools import wraps
from flask import current_app, request
from werkzeug.exceptions import HTTPException
from .errors import UnexpectedError


def handle_errors(failure_message):
    """
    Log rejected requests and turn unexpected exceptions into a generic 500

    HTTP errors raised by the view (validation, not found, malformed id) pass
    through unchanged. Anything else is logged and replaced by an
    UnexpectedError carrying failure_message, so no internal detail reaches
    the client.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except HTTPException as e:
                current_app.logger.warning(f"{request.endpoint} rejected ({e.code}): {e.description}")
                raise
            except Exception as e:
                current_app.logger.error(f"{request.endpoint} failed: {str(e)}")
                raise UnexpectedError(failure_message) from e
        return decorated_function
    return decorator
