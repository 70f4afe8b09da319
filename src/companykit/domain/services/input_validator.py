"""Field-level input validation producing user-facing messages.

Each rule records a translated message against the field it checks and
returns a falsy value on failure so later rules can be skipped.
"""

from typing import Any, Callable

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from companykit.core.exceptions import ValidationError
from companykit.core.translation import default_translator

_email_adapter = TypeAdapter(EmailStr)


class InputValidator:
    """Collect validation messages for one form submission."""

    def __init__(self, translate: Callable[..., str | None] = default_translator) -> None:
        self.translate = translate
        self.errors: dict[str, list[str]] = {}

    def add(self, field: str, message: str, **replacements: Any) -> None:
        """Record a message against a field."""
        self.errors.setdefault(field, []).append(
            self.translate(message, **replacements) or message
        )

    def required(self, field: str, value: Any) -> bool:
        if value is None or (isinstance(value, str) and not value.strip()):
            self.add(field, "The :attribute field is required.", attribute=field)
            return False
        return True

    def email(self, field: str, value: str) -> str | None:
        """Check a bare email address.

        Returns:
            The normalized address, or None if the value is not a bare
            address (display-name forms like "Adam <adam@example.com>" fail).
        """
        candidate = value.strip() if isinstance(value, str) else value
        try:
            address = _email_adapter.validate_python(candidate)
        except PydanticValidationError:
            address = None
        if address is None or address.lower() != candidate.lower():
            self.add(field, "The :attribute must be a valid email address.", attribute=field)
            return None
        return address

    def max_length(self, field: str, value: str, maximum: int) -> bool:
        if len(value) > maximum:
            self.add(
                field,
                "The :attribute may not be greater than :max characters.",
                attribute=field,
                max=maximum,
            )
            return False
        return True

    def raise_if_failed(self, error_bag: str = "default") -> None:
        """Raise a ValidationError carrying every recorded message."""
        if self.errors:
            raise ValidationError(self.errors, error_bag=error_bag)
