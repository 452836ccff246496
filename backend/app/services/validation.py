"""Request-body validation for the posts API.

Validation is a pure function over a pydantic schema class: it either returns
the validated model or raises :class:`app.exceptions.ValidationError` with a
structured list of violations. Nothing here touches the database, so routes
can validate before any store call and tests can exercise the rules without
HTTP.
"""

import json
from typing import Any, Dict, Iterable, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def format_errors(errors: Iterable[Dict[str, Any]], strip_prefix: str = "") -> List[Dict[str, Any]]:
    """Reduce pydantic error dicts to ``{"path", "message", "type"}`` entries.

    *strip_prefix* drops a leading location segment such as FastAPI's
    ``"body"``.
    """
    formatted = []
    for err in errors:
        path = list(err.get("loc", ()))
        if strip_prefix and path and path[0] == strip_prefix:
            path = path[1:]
        formatted.append(
            {
                "path": path,
                "message": err.get("msg", "Invalid value"),
                "type": err.get("type", "value_error"),
            }
        )
    return formatted


def parse_json_body(raw: bytes) -> Any:
    """Decode a raw request body. An empty body decodes to ``None``.

    Raises:
        ValidationError: the body is not valid JSON.
    """
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ValidationError(
            message="Request body is not valid JSON",
            errors=[{"path": [], "message": str(exc), "type": "json_invalid"}],
        ) from exc


def validate_payload(schema: Type[SchemaT], payload: Any) -> SchemaT:
    """Validate *payload* against *schema*.

    An absent body (``None``) is treated as an empty object.

    Raises:
        ValidationError: the payload is not an object, is missing required
            fields, carries unknown fields, or has a field of the wrong shape.
    """
    if payload is None:
        payload = {}
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(
            message="Request body failed validation",
            errors=format_errors(exc.errors()),
        ) from exc
