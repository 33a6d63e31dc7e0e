"""Request validation stage.

A request schema is a pydantic model acting as a declarative constraint
table: one field per checked input (body keys and path parameters alike).
``validate`` runs every field check and returns a ``ValidationResult``
holding either the validated value or the full list of violations.

``validate_request`` wires the stage in front of a DRF view method: when
the result carries violations the client gets a 400 and the view method
is never called.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Dict, Generic, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.core.responses import errors_response

M = TypeVar("M", bound=BaseModel)

# {field: {pydantic error type | "default": message}}
MessageTable = Mapping[str, Mapping[str, str]]

BODY_FIELD = "body"


@dataclass(frozen=True)
class Violation:
    """A single failed field check."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidationResult(Generic[M]):
    """Either a validated value or the violations that prevented it."""

    value: Optional[M] = None
    violations: Tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations


def _message_for(field: str, error_type: str, default: str, messages: MessageTable) -> str:
    table = messages.get(field, {})
    return table.get(error_type) or table.get("default") or default


def validate(
    schema: Type[M],
    payload: Any,
    messages: Optional[MessageTable] = None,
) -> ValidationResult[M]:
    """Check ``payload`` against ``schema`` and collect every violation."""
    messages = messages or {}

    if not isinstance(payload, Mapping):
        return ValidationResult(
            violations=(
                Violation(
                    BODY_FIELD,
                    _message_for(BODY_FIELD, "model_type", "Invalid body", messages),
                ),
            )
        )

    try:
        value = schema.model_validate(dict(payload))
    except PydanticValidationError as exc:
        violations = []
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else BODY_FIELD
            violations.append(
                Violation(field, _message_for(field, error["type"], error["msg"], messages))
            )
        return ValidationResult(violations=tuple(violations))

    return ValidationResult(value=value)


def validate_request(
    schema: Type[BaseModel],
    messages: Optional[MessageTable] = None,
    *,
    with_body: bool = True,
) -> Callable:
    """Decorate a ViewSet action so it only runs on a valid request.

    The payload is the JSON body (when ``with_body``) merged with the URL
    keyword arguments; path parameters win over body keys of the same name.
    The validated model is passed to the action as its ``dto`` argument.
    """

    def decorator(action: Callable) -> Callable:
        @wraps(action)
        def wrapper(self, request, *args, **kwargs):
            body = request.data if with_body else {}
            if isinstance(body, Mapping):
                payload: Any = {**body, **kwargs}
            else:
                payload = body

            result = validate(schema, payload, messages)
            if not result.ok:
                return errors_response(result.violations)
            return action(self, request, *args, dto=result.value, **kwargs)

        return wrapper

    return decorator
