"""
Shared error handling package.

One place translates blogging domain errors into HTTP responses,
so every route answers failures with the same body shape.
"""

from app.shared.errors.handlers import (
    UnhandledErrorMiddleware,
    register_error_handlers,
    status_for,
)

__all__ = ["UnhandledErrorMiddleware", "register_error_handlers", "status_for"]
