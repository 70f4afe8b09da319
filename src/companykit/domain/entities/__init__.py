"""Domain entities for companykit.

Entities are plain Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure.
"""

from companykit.domain.entities.hook_context import (
    AbortHookException,
    HookContext,
    HookResult,
)
from companykit.domain.entities.role import OwnerRole, Role

__all__ = [
    "AbortHookException",
    "HookContext",
    "HookResult",
    "OwnerRole",
    "Role",
]
