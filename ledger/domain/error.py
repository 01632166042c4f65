"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class RecordInvalidError(DomainError):
    """Raised when a caller insists on a record that failed validation."""

    def __init__(self, resource: str, errors: dict[str, list[str]]):
        self.resource = resource
        self.errors = errors
        details = "; ".join(
            f"{field} {message}"
            for field, messages in errors.items()
            for message in messages
        )
        super().__init__(f"{resource} is invalid: {details}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
