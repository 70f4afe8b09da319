"""Registry of the roles employees can be given.

The registry is built once from configuration when the host starts and is
injected wherever roles are enumerated or validated.
"""

from typing import Callable, Iterable

from companykit.core.config import Settings
from companykit.core.translation import default_translator
from companykit.domain.entities.role import Role


class RoleRegistry:
    """Ordered collection of Role definitions plus the union of their permissions."""

    def __init__(self) -> None:
        self._roles: dict[str, Role] = {}
        self._permissions: list[str] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> "RoleRegistry":
        """Build a registry from the configured roles, preserving their order."""
        registry = cls()
        for role in settings.roles:
            registry.define(role.key, role.name, role.permissions, role.description)
        return registry

    def define(
        self,
        key: str,
        name: str,
        permissions: Iterable[str],
        description: str,
    ) -> Role:
        """Register a role, replacing any existing role with the same key.

        Args:
            key: Role key (e.g., 'admin').
            name: Display name.
            permissions: Permission identifiers granted by the role.
            description: Description shown next to the role.

        Returns:
            The registered role.
        """
        role = Role(key, name, tuple(permissions), description)
        self._roles[key] = role
        self._permissions = sorted(set(self._permissions) | set(role.permissions))
        return role

    def find(self, key: str | None) -> Role | None:
        """Find a role by key."""
        if key is None:
            return None
        return self._roles.get(key)

    def has_roles(self) -> bool:
        """Whether any role has been defined."""
        return bool(self._roles)

    def is_valid_role(self, key: str | None) -> bool:
        """Whether the key names a defined role."""
        return key is not None and key in self._roles

    def keys(self) -> list[str]:
        """Role keys in definition order."""
        return list(self._roles)

    def all(self) -> list[Role]:
        """Roles in definition order."""
        return list(self._roles.values())

    @property
    def permissions(self) -> list[str]:
        """Sorted, de-duplicated permissions across all roles."""
        return list(self._permissions)

    def valid_permissions(self, candidates: Iterable[str]) -> list[str]:
        """Keep the candidates that some role grants, in the given order."""
        known = set(self._permissions)
        return [permission for permission in candidates if permission in known]

    def serialize(
        self, translate: Callable[[str], str | None] = default_translator
    ) -> list[dict]:
        """Serialize fresh copies of every role, in definition order."""
        return [
            role.described(role.description).serialize(translate)
            for role in self._roles.values()
        ]

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, key: object) -> bool:
        return key in self._roles
