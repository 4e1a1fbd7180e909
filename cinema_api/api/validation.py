"""
Request body validation against declarative rule sets.

A rule set is a pydantic model. Validation collects every violated rule in
one pass and reports each as a ``Violation``; routes attach ``validate_body``
as a dependency so rejected payloads never reach the database.
"""

import logging
from typing import Any, Callable, Iterable, Sequence, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# pydantic error type -> message template (formatted with the error's ctx)
MESSAGES = {
    "missing": "is required",
    "string_type": "must be a string",
    "string_too_short": "is not allowed to be empty",
    "string_too_long": "length must be less than or equal to {max_length} characters long",
    "int_type": "must be an integer",
    "int_parsing": "must be an integer",
    "int_from_float": "must be an integer",
    "less_than_equal": "must be less than or equal to {le}",
    "greater_than_equal": "must be greater than or equal to {ge}",
    "bool_type": "must be a boolean",
    "bool_parsing": "must be a boolean",
    "model_type": "must be an object",
    "model_attributes_type": "must be an object",
}


class Violation(BaseModel):
    """One failed validation rule."""

    message: str
    path: list[str | int]
    type: str


class PayloadValidationError(Exception):
    """Raised when a request body breaks its resource's rule set."""

    def __init__(self, violations: Sequence[Violation]):
        self.violations = list(violations)
        super().__init__(f"{len(self.violations)} validation error(s)")


def to_violation(error: dict[str, Any]) -> Violation:
    """
    Convert a pydantic error entry into a Violation.

    Args:
        error: One item of ``ValidationError.errors()``

    Returns:
        Violation whose message starts with the quoted field name
    """
    path = list(error.get("loc", ()))
    names = [part for part in path if isinstance(part, str)]
    label = names[-1] if names else "value"

    template = MESSAGES.get(error["type"])
    if template is None:
        text = error.get("msg", "is invalid")
    else:
        text = template.format(**error.get("ctx", {}))

    return Violation(message=f'"{label}" {text}', path=path, type=error["type"])


def to_violations(errors: Iterable[dict[str, Any]]) -> list[Violation]:
    return [to_violation(error) for error in errors]


def parse_payload(schema: Type[SchemaT], payload: Any) -> SchemaT:
    """
    Validate a candidate record and return the parsed model.

    Raises:
        PayloadValidationError: With every violation found
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise PayloadValidationError(to_violations(exc.errors())) from exc


def collect_violations(schema: Type[BaseModel], payload: Any) -> list[Violation]:
    """
    Check a candidate record against a rule set.

    Args:
        schema: Rule set (pydantic model class)
        payload: Decoded JSON value

    Returns:
        Empty list when valid, otherwise one Violation per failed rule
    """
    try:
        parse_payload(schema, payload)
    except PayloadValidationError as exc:
        return exc.violations
    return []


def validate_body(schema: Type[SchemaT]) -> Callable[[Request], Any]:
    """
    Build a FastAPI dependency that validates the JSON body against ``schema``.

    The dependency returns the parsed model, or raises
    PayloadValidationError before the route handler runs.
    """

    async def dependency(request: Request) -> BaseModel:
        try:
            payload = await request.json()
        except ValueError:
            raise PayloadValidationError(
                [Violation(message='"body" must be valid JSON', path=[], type="json_invalid")]
            )

        model = parse_payload(schema, payload)
        logger.debug("%s payload accepted for %s %s", schema.__name__, request.method, request.url.path)
        return model

    dependency.__name__ = f"validate_{schema.__name__}"
    return dependency
