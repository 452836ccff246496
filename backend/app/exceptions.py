"""
Posts API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the error scenarios of the posts API.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return responses with the correct HTTP status codes.
Who:   Raised by dependencies and services; caught by global handlers.

Exception Hierarchy:
    PostsApiError (base)
    ├── ValidationError           → 400 Bad Request, structured error body
    ├── MalformedIdentifierError  → 400 Bad Request, empty body
    ├── NotFoundError             → 404 Not Found, empty body
    └── DatabaseError             → 500 Internal Server Error, underlying error surfaced
"""

from typing import Any, Dict, List, Optional


class PostsApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional structured info (logged, and returned where the
                  handler for the subclass says so)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PostsApiError):
    """
    Raised when a request body fails schema validation.

    HTTP:    400 Bad Request

    The `errors` list is returned to the client under `details.errors`:
        [{"path": ["tags", 0], "message": "Input should be a valid string",
          "type": "string_type"}]
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[List[Dict[str, Any]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.errors = errors or []
        ctx = context or {}
        ctx["errors"] = self.errors
        super().__init__(message=message, context=ctx)


class MalformedIdentifierError(PostsApiError):
    """
    Raised by the ID-format guard when a path identifier is not a post id.

    HTTP:    400 Bad Request (no body)
    When:    Before any store call on read, update and delete.
    """

    def __init__(self, value: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["value"] = value
        super().__init__(message=f"'{value}' is not a valid post id", context=ctx)
        self.value = value


class NotFoundError(PostsApiError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found (no body)
    When:    GET or PATCH /api/posts/{id} for an id with no record.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(PostsApiError):
    """
    Raised when a store operation fails (connectivity, constraint violation, ...).

    HTTP:    500 Internal Server Error

    The original exception's type and text are kept in `context` and
    surfaced in the response body. Errors are not retried.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        original: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if original is not None:
            ctx.setdefault("error_type", type(original).__name__)
            ctx.setdefault("error", str(original))
        super().__init__(message=message, context=ctx)
        self.original = original
