"""Exceptions raised by companykit.

Authorization and not-found errors are meant to propagate to the host, which
turns them into forbidden / not-found responses. Validation errors carry
user-facing messages grouped under a named error bag so the presentation
layer can show them next to the right form.
"""


class CompanyKitError(Exception):
    """Base class for all companykit errors."""

    status_code: int = 400


class AuthorizationError(CompanyKitError):
    """Raised when the acting user may not perform an ability."""

    status_code = 403

    def __init__(
        self,
        message: str = "This action is unauthorized.",
        ability: str | None = None,
    ) -> None:
        self.message = message
        self.ability = ability
        super().__init__(message)


class ValidationError(CompanyKitError):
    """Raised when input or a business rule is violated.

    Attributes:
        messages: Field name to list of messages.
        error_bag: Name of the error group the messages belong to.
    """

    status_code = 422

    def __init__(
        self,
        messages: dict[str, list[str]],
        error_bag: str = "default",
    ) -> None:
        self.messages = messages
        self.error_bag = error_bag
        super().__init__(self.first_message() or "The given data was invalid.")

    @classmethod
    def with_messages(
        cls, messages: dict[str, str | list[str]], error_bag: str = "default"
    ) -> "ValidationError":
        """Build an error from a mapping of field to message(s)."""
        normalized = {
            field: [value] if isinstance(value, str) else list(value)
            for field, value in messages.items()
        }
        return cls(normalized, error_bag=error_bag)

    def first_message(self, field: str | None = None) -> str | None:
        """Return the first message, optionally for a single field."""
        if field is not None:
            values = self.messages.get(field) or []
            return values[0] if values else None
        for values in self.messages.values():
            if values:
                return values[0]
        return None


class ModelNotFoundError(CompanyKitError):
    """Raised when a record looked up by key does not exist."""

    status_code = 404

    def __init__(self, model: str, key: object) -> None:
        self.model = model
        self.key = key
        super().__init__(f"No query results for model [{model}] {key}")


class InvalidComponentStateError(CompanyKitError):
    """Raised when a component action is invoked outside of its flow."""

    status_code = 409
