"""Field-level validation errors.

Rules never raise. Each violation is recorded against the field it concerns
and a record is valid when no messages have been collected.
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

BLANK = "can't be blank"
INVALID = "is invalid"
TAKEN = "has already been taken"
NOT_INCLUDED = "is not included in the list"
FIRM_MEMBER_EMAIL = "Email of firm member cannot be used for client email"


def too_long(maximum: int) -> str:
    """Message for a value longer than ``maximum`` characters."""
    return f"is too long (maximum is {maximum} characters)"


def is_blank(value: object) -> bool:
    """True for None and for strings that are empty or whitespace only."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class ValidationErrors:
    """Ordered mapping of field name to the messages recorded against it."""

    def __init__(self) -> None:
        self._messages: dict[str, list[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._messages.setdefault(field, []).append(message)

    def merge(self, other: "ValidationErrors") -> None:
        for field, messages in other.items():
            for message in messages:
                self.add(field, message)

    def on(self, field: str) -> list[str]:
        """Messages for ``field``, empty when it has none."""
        return list(self._messages.get(field, []))

    def items(self) -> Iterator[tuple[str, list[str]]]:
        for field, messages in self._messages.items():
            yield field, list(messages)

    def full_messages(self) -> list[str]:
        return [
            f"{field} {message}"
            for field, messages in self._messages.items()
            for message in messages
        ]

    def to_dict(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in self._messages.items()}

    def __contains__(self, field: object) -> bool:
        return field in self._messages

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __repr__(self) -> str:
        return f"ValidationErrors({self._messages!r})"


class ValidationResult(BaseModel):
    """Verdict of one validation cycle."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: dict[str, list[str]] = {}

    @classmethod
    def from_errors(cls, errors: ValidationErrors) -> "ValidationResult":
        return cls(valid=not errors, errors=errors.to_dict())
