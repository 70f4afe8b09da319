"""Hook event definitions and categories.

This module defines all hook events that companykit dispatches.
Hook categories and events are part of the stable API contract.

IMPORTANT: Adding new events is allowed (non-breaking), but
           removing or renaming events is a breaking change.
"""


class HookCategory:
    """Categories for organizing hooks."""

    COMPANY_OPERATIONS = "company_operations"
    EMPLOYEE_OPERATIONS = "employee_operations"
    INVITATION_OPERATIONS = "invitation_operations"
    USER_OPERATIONS = "user_operations"


class HookEvent:
    """Hook event names.

    Each event follows a consistent naming pattern:
    - before_* events may abort the operation by raising AbortHookException
    - after_* events are called after the change has been flushed

    Attributes in format: ON_<SUBJECT>_<TIMING>_<OPERATION>
    """

    # Company Operations
    ON_COMPANY_BEFORE_CREATE = "on_company_before_create"
    ON_COMPANY_AFTER_CREATE = "on_company_after_create"
    ON_COMPANY_AFTER_UPDATE = "on_company_after_update"
    ON_COMPANY_BEFORE_DELETE = "on_company_before_delete"
    ON_COMPANY_AFTER_DELETE = "on_company_after_delete"

    # Employee Operations
    ON_EMPLOYEE_BEFORE_ADD = "on_employee_before_add"
    ON_EMPLOYEE_AFTER_ADD = "on_employee_after_add"
    ON_EMPLOYEE_AFTER_UPDATE = "on_employee_after_update"
    ON_EMPLOYEE_BEFORE_REMOVE = "on_employee_before_remove"
    ON_EMPLOYEE_AFTER_REMOVE = "on_employee_after_remove"

    # Invitation Operations
    ON_INVITATION_BEFORE_CREATE = "on_invitation_before_create"
    ON_INVITATION_AFTER_CREATE = "on_invitation_after_create"
    ON_INVITATION_AFTER_ACCEPT = "on_invitation_after_accept"

    # User Operations
    ON_USER_AFTER_DELETE = "on_user_after_delete"


# Mapping of events to their categories
EVENT_CATEGORIES: dict[str, str] = {
    HookEvent.ON_COMPANY_BEFORE_CREATE: HookCategory.COMPANY_OPERATIONS,
    HookEvent.ON_COMPANY_AFTER_CREATE: HookCategory.COMPANY_OPERATIONS,
    HookEvent.ON_COMPANY_AFTER_UPDATE: HookCategory.COMPANY_OPERATIONS,
    HookEvent.ON_COMPANY_BEFORE_DELETE: HookCategory.COMPANY_OPERATIONS,
    HookEvent.ON_COMPANY_AFTER_DELETE: HookCategory.COMPANY_OPERATIONS,
    HookEvent.ON_EMPLOYEE_BEFORE_ADD: HookCategory.EMPLOYEE_OPERATIONS,
    HookEvent.ON_EMPLOYEE_AFTER_ADD: HookCategory.EMPLOYEE_OPERATIONS,
    HookEvent.ON_EMPLOYEE_AFTER_UPDATE: HookCategory.EMPLOYEE_OPERATIONS,
    HookEvent.ON_EMPLOYEE_BEFORE_REMOVE: HookCategory.EMPLOYEE_OPERATIONS,
    HookEvent.ON_EMPLOYEE_AFTER_REMOVE: HookCategory.EMPLOYEE_OPERATIONS,
    HookEvent.ON_INVITATION_BEFORE_CREATE: HookCategory.INVITATION_OPERATIONS,
    HookEvent.ON_INVITATION_AFTER_CREATE: HookCategory.INVITATION_OPERATIONS,
    HookEvent.ON_INVITATION_AFTER_ACCEPT: HookCategory.INVITATION_OPERATIONS,
    HookEvent.ON_USER_AFTER_DELETE: HookCategory.USER_OPERATIONS,
}


def get_all_events() -> list[str]:
    """Get all available hook event names."""
    return [
        value
        for name, value in vars(HookEvent).items()
        if not name.startswith("_") and isinstance(value, str)
    ]


def is_before_event(event: str) -> bool:
    """Check if an event is a 'before' event (can abort)."""
    return "_before_" in event.lower()


def is_after_event(event: str) -> bool:
    """Check if an event is an 'after' event."""
    return "_after_" in event.lower()
