"""
Request body decoding and validation.

Decoding (bytes to a JSON object) and validation (JSON object to a
schema instance) are separate steps with separate error types so callers
can tell a malformed payload from one that breaks a field rule.
Both error types are mapped to HTTP 400 by the centralized error handlers.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class PayloadError(Exception):
    """Base error for request bodies rejected before reaching the service."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class PayloadDecodeError(PayloadError):
    """Raised when the request body is not a JSON object."""


class RequestTooLargeError(PayloadError):
    """Raised when the request body exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            f"Request body too large: {size} bytes (limit {limit} bytes)"
        )
        self.size = size
        self.limit = limit


@dataclass(frozen=True)
class FieldViolation:
    """A single broken field rule.

    Attributes:
        field: Wire name of the offending field (dotted for nested items).
        reason: Human-readable description of the rule that failed.
    """

    field: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


class PayloadValidationError(PayloadError):
    """Raised when a well-formed body violates one or more field rules.

    The message names the first violation; all of them are kept
    on ``violations``.
    """

    def __init__(self, violations: list[FieldViolation]) -> None:
        super().__init__(str(violations[0]))
        self.violations = violations


def decode_json(raw: bytes) -> dict[str, Any]:
    """Parse a request body into a JSON object.

    Args:
        raw: The raw request body.

    Returns:
        The decoded top-level object.

    Raises:
        PayloadDecodeError: If the body is empty, not UTF-8, not JSON,
            or not a JSON object.
    """
    if not raw.strip():
        raise PayloadDecodeError("Request body is empty")
    try:
        data = json.loads(raw)
    except UnicodeDecodeError as exc:
        raise PayloadDecodeError("Request body is not valid UTF-8") from exc
    except json.JSONDecodeError as exc:
        raise PayloadDecodeError(f"Request body is not valid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise PayloadDecodeError("Request body must be a JSON object")
    return data


def _to_violations(exc: ValidationError) -> list[FieldViolation]:
    violations = []
    for error in exc.errors(include_url=False):
        field = ".".join(str(part) for part in error["loc"]) or "body"
        violations.append(FieldViolation(field=field, reason=error["msg"]))
    return violations


def validate_payload(schema: type[SchemaT], data: dict[str, Any]) -> SchemaT:
    """Build a schema instance from decoded data, enforcing every field rule.

    Raises:
        PayloadValidationError: If any rule is violated.
    """
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        violations = _to_violations(exc)
        logger.info(
            "Rejected %s payload: %d violation(s), first on %s",
            schema.__name__,
            len(violations),
            violations[0].field,
        )
        raise PayloadValidationError(violations) from exc


def decode_and_validate(raw: bytes, schema: type[SchemaT]) -> SchemaT:
    """Decode a request body and validate it against ``schema``."""
    return validate_payload(schema, decode_json(raw))


def check_declared_size(content_length: Optional[str], limit: int) -> None:
    """Reject a body from its Content-Length header before it is read.

    A missing or unparsable header is left to ``check_body_size``.
    """
    if content_length is None:
        return
    try:
        size = int(content_length)
    except ValueError:
        return
    if size > limit:
        raise RequestTooLargeError(size, limit)


def check_body_size(raw: bytes, limit: int) -> None:
    """Raise RequestTooLargeError if the body is larger than ``limit`` bytes."""
    if len(raw) > limit:
        raise RequestTooLargeError(len(raw), limit)
