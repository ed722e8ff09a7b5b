"""
Snippetbox Backend - Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the two request-level failures.
How:   Each exception carries the HTTP status, a plain-text body and any
       response headers it requires. Global exception handlers (registered
       in main.py) turn them into responses.
Who:   Raised by the snippet handlers; caught by the global handlers.
When:  During request processing, as soon as a precondition fails. Both
       kinds end the request: nothing runs after the raise.

Exception Hierarchy:
    SnippetboxError (base)
    ├── NotFoundError            → 404 Not Found
    └── MethodNotAllowedError    → 405 Method Not Allowed (+ Allow header)
"""

from typing import Dict, Iterable, Optional

NOT_FOUND_BODY = "404 page not found"
METHOD_NOT_ALLOWED_BODY = "Method Not Allowed"


class SnippetboxError(Exception):
    """
    Base exception for all Snippetbox request errors.

    Attributes:
        status_code: HTTP status the error maps to
        message:     Plain-text response body
        headers:     Extra response headers
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "Internal Server Error",
        headers: Optional[Dict[str, str]] = None,
    ):
        self.message = message
        self.headers = headers or {}
        super().__init__(self.message)


class NotFoundError(SnippetboxError):
    """
    Raised when a path has no handler or required query data is invalid.

    Covers unmatched paths, sub-paths of ``/``, and a snippet ``id`` that is
    missing, non-numeric or below 1.
    """

    status_code = 404

    def __init__(self, message: str = NOT_FOUND_BODY):
        super().__init__(message=message)


class MethodNotAllowedError(SnippetboxError):
    """
    Raised when a route is called with an HTTP method it does not accept.

    The response always carries an ``Allow`` header naming the accepted
    methods, e.g. ``Allow: POST`` for snippet creation.
    """

    status_code = 405

    def __init__(self, allowed: Iterable[str] = ("POST",)):
        self.allowed = tuple(allowed)
        super().__init__(
            message=METHOD_NOT_ALLOWED_BODY,
            headers={"Allow": ", ".join(self.allowed)},
        )
