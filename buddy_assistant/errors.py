"""Error types raised by the assistant core and the store client."""

from __future__ import annotations

from typing import Any


class AssistantError(Exception):
    """Base error: carries a machine-readable kind and a human message."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AssistantError):
    """A child, timer or record could not be found."""

    kind = "not_found"


class ValidationFailure(AssistantError):
    """A payload was rejected, with a field -> messages mapping."""

    kind = "validation"

    def __init__(self, errors: dict[str, list[str]], message: str | None = None):
        self.errors = errors
        super().__init__(message or join_errors(errors))

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationFailure":
        return cls({field: [message]})


class StoreValidationError(ValidationFailure):
    """The store refused a payload (HTTP 400)."""

    kind = "store_validation"


class StoreError(AssistantError):
    """The store answered with an unexpected HTTP status."""

    kind = "store_error"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class StoreUnavailableError(AssistantError):
    """The store could not be reached. Never retried here."""

    kind = "unavailable"


class ConfirmationRequired(AssistantError):
    """A destructive action needs an explicit confirmation from the caller."""

    kind = "confirmation_required"


def normalize_errors(data: Any) -> dict[str, list[str]]:
    """Coerce a store error body into a field -> list of messages mapping."""
    if isinstance(data, dict):
        errors: dict[str, list[str]] = {}
        for field, value in data.items():
            if isinstance(value, list):
                errors[str(field)] = [str(v) for v in value]
            else:
                errors[str(field)] = [str(value)]
        return errors
    if isinstance(data, list):
        return {"non_field_errors": [str(v) for v in data]}
    return {"non_field_errors": [str(data)]}


def join_errors(errors: dict[str, list[str]]) -> str:
    """Render a field -> messages mapping as one readable line."""
    return ", ".join(f"{field}: {' '.join(msgs)}" for field, msgs in errors.items())
