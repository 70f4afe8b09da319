"""UI components."""

from companykit.application.components.company_employee_manager import CompanyEmployeeManager
from companykit.application.components.component import Component, Redirect
from companykit.application.components.state import (
    ConfirmingLeave,
    ConfirmingRemoval,
    Idle,
    ManagerState,
    ManagingRole,
)

__all__ = [
    "CompanyEmployeeManager",
    "Component",
    "ConfirmingLeave",
    "ConfirmingRemoval",
    "Idle",
    "ManagerState",
    "ManagingRole",
    "Redirect",
]
