# catalog/api/errors.py
"""
Errors raised by resolvers. The GraphQL engine copies ``extensions`` from the
original exception into the formatted error, so clients see a stable ``code``.
"""
from typing import Any, Dict, Optional


class CatalogError(Exception):
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, extensions: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extensions = {"code": self.code}
        if extensions:
            self.extensions.update(extensions)


class NotAuthenticated(CatalogError):
    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class InvalidToken(CatalogError):
    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "invalid token"):
        super().__init__(message)


class InvalidCredentials(CatalogError):
    code = "BAD_USER_INPUT"

    def __init__(self, message: str = "Wrong credentials"):
        super().__init__(message)


class InvalidInput(CatalogError):
    code = "BAD_USER_INPUT"

    def __init__(self, message: str, invalid_args: Optional[Dict[str, Any]] = None):
        super().__init__(message, {"invalidArgs": invalid_args or {}})
        self.invalid_args = invalid_args or {}

