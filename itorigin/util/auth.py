"""
Admin access gate.

The real identity provider lives outside this service; the admin API only
checks the bearer token it was configured with (ADMIN_API_TOKEN).
"""

# Python Packages
import hmac
from functools import wraps

from flask import request

# Constants
from ..base import constants

# Exceptions & messages
from .exceptions import AppException, UnauthorizedException, ForbiddenException
from . import messages





def admin_required(func):
    """ Reject the request unless it carries the admin bearer token... """

    @wraps(func)
    def wrapper(*args, **kwargs):
        # CORS preflight carries no credentials
        if request.method == "OPTIONS":
            return func(*args, **kwargs)

        try:
            verify_admin_token(request.headers.get("Authorization", ""))
        except AppException as error:
            return error.to_dict(), error.status_code

        return func(*args, **kwargs)

    return wrapper



def verify_admin_token(header: str) -> None:
    scheme, _, token = header.partition(" ")

    if scheme.lower() != "bearer" or not token.strip():
        raise UnauthorizedException(messages.ERROR["MISSING_TOKEN"])

    expected = constants.ADMIN_API_TOKEN
    if not expected or not hmac.compare_digest(token.strip(), expected):
        raise ForbiddenException(messages.ERROR["INVALID_TOKEN"])
