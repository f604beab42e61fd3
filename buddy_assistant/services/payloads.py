"""Build and serialize store payloads, turning pydantic errors into ValidationFailure."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from buddy_assistant.errors import ValidationFailure

M = TypeVar("M", bound=BaseModel)


def validation_failure(exc: ValidationError) -> ValidationFailure:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "non_field_errors"
        errors.setdefault(field, []).append(err["msg"])
    return ValidationFailure(errors)


def build(model_cls: type[M], **fields: Any) -> M:
    """Validate ``fields`` into ``model_cls`` before anything goes over the wire."""
    try:
        return model_cls(**fields)
    except ValidationError as exc:
        raise validation_failure(exc) from exc


def dump_create(payload: BaseModel) -> dict:
    return payload.model_dump(mode="json", exclude_none=True)


def dump_update(payload: BaseModel) -> dict:
    """Only the fields the caller set: an explicit None is kept (clears the field)."""
    data = payload.model_dump(mode="json", exclude_unset=True)
    if not data:
        raise ValidationFailure.single("non_field_errors", "No updates provided")
    return data
