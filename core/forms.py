"""
Form parsing and per-field error reporting.

Raw form submissions are flat mappings of field name to string (or absent).
safe_parse() runs them through a pydantic model and, instead of raising,
returns either the typed record or a map of form field name to messages.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)

FieldErrors = dict[str, list[str]]


class FormState(BaseModel):
    """
    Transient state handed back to the form renderer after a submission.

    Carries optional field-level errors and an optional summary message.
    Never persisted; created per submission and discarded once rendered.
    """

    errors: FieldErrors | None = None
    message: str | None = None


@dataclass
class ParseResult(Generic[T]):
    """Outcome of safe_parse(): typed data on success, field errors otherwise."""

    data: T | None = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.data is not None


@dataclass
class ActionResult:
    """
    Outcome of a form action.

    state: rendered back into the form (validation or persistence failure)
    redirect_to: where the caller should navigate after a successful mutation
    """

    state: FormState | None = None
    redirect_to: str | None = None


def _form_keys(model_cls: Type[BaseModel]) -> dict[str, str]:
    """Map model field name -> form field name (alias when declared)."""
    return {name: info.alias or name for name, info in model_cls.model_fields.items()}


def flatten_errors(model_cls: Type[BaseModel], error: ValidationError) -> FieldErrors:
    """
    Group pydantic errors by form field, in model field order.

    An error whose context carries a "messages" list contributes one entry
    per message, so multi-rule fields report every violated rule.
    """
    form_keys = _form_keys(model_cls)
    aliases = set(form_keys.values())
    grouped: FieldErrors = {}

    for err in error.errors():
        if not err["loc"]:
            continue
        loc = str(err["loc"][0])
        key = loc if loc in aliases else form_keys.get(loc, loc)
        messages = (err.get("ctx") or {}).get("messages")
        if isinstance(messages, list):
            grouped.setdefault(key, []).extend(str(m) for m in messages)
        else:
            grouped.setdefault(key, []).append(err["msg"])

    order = list(form_keys.values())
    return dict(sorted(grouped.items(), key=lambda kv: order.index(kv[0]) if kv[0] in order else len(order)))


def safe_parse(model_cls: Type[T], form: Mapping[str, Any]) -> ParseResult[T]:
    """
    Validate a raw form against model_cls without raising.

    Only the model's own fields are read from the form; anything else the
    submission carries is ignored.
    """
    raw = {
        key: form.get(key)
        for key in _form_keys(model_cls).values()
        if form.get(key) is not None
    }

    try:
        return ParseResult(data=model_cls.model_validate(raw))
    except ValidationError as e:
        return ParseResult(errors=flatten_errors(model_cls, e))
