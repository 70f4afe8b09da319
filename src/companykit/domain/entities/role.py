"""Role entity for company authorization.

Roles are defined in configuration, never persisted. A membership stores the
role key; the role itself is looked up in the RoleRegistry.
"""

from dataclasses import dataclass
from typing import Any, Callable

from companykit.core.translation import default_translator


@dataclass(frozen=True)
class Role:
    """A named bundle of permissions assignable to a company employee.

    Attributes:
        key: Stable identifier, unique within the registry (e.g., 'admin').
        name: Display name, translated on serialization.
        permissions: Permission identifiers, in the order they were defined.
        description: Description, translated on serialization.
    """

    key: str
    name: str
    permissions: tuple[str, ...]
    description: str

    def __post_init__(self) -> None:
        """Validate role data after initialization."""
        if not self.key:
            raise ValueError("Role key is required")
        if not self.name:
            raise ValueError("Role name is required")
        # Accept any iterable of permissions, store an immutable copy
        object.__setattr__(self, "permissions", tuple(self.permissions))

    def described(self, description: str) -> "Role":
        """Return a copy of this role carrying the given description."""
        return Role(self.key, self.name, self.permissions, description)

    def serialize(
        self, translate: Callable[[str], str | None] = default_translator
    ) -> dict[str, Any]:
        """Serialize the role for display, translating name and description."""
        return {
            "key": self.key,
            "name": translate(self.name),
            "description": translate(self.description),
            "permissions": list(self.permissions),
        }


class OwnerRole(Role):
    """The implicit role of a company's owner: every permission."""

    def __init__(self) -> None:
        super().__init__(
            key="owner",
            name="Owner",
            permissions=("*",),
            description="Company owners can perform any action.",
        )
