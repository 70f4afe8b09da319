"""Interaction state of the employee manager.

At most one flow is in progress at a time: the manager is either idle,
managing an employee's role, or waiting for the user to confirm leaving the
company or removing an employee.
"""

from dataclasses import dataclass

from companykit.infrastructure.persistence.models import UserModel


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class ManagingRole:
    """Editing the role of `user`; `role` is the key currently selected."""

    user: UserModel
    role: str | None


@dataclass(frozen=True)
class ConfirmingLeave:
    pass


@dataclass(frozen=True)
class ConfirmingRemoval:
    user_id: str


ManagerState = Idle | ManagingRole | ConfirmingLeave | ConfirmingRemoval

IDLE = Idle()
