"""Hook system core module.

Hooks let the host react to company and membership changes, e.g. to deliver
invitation emails:

    from companykit.core.hooks import HookEvent, HookRegistry

    registry = HookRegistry()

    async def send_invitation(event, data, context):
        await mailer.send(data["email"], data["company_name"])
        return data

    registry.register(HookEvent.ON_INVITATION_AFTER_CREATE, send_invitation)
"""

from companykit.core.hooks.hook_events import (
    EVENT_CATEGORIES,
    HookCategory,
    HookEvent,
    get_all_events,
    is_after_event,
    is_before_event,
)
from companykit.core.hooks.hook_registry import HookRegistry, RegisteredHook

__all__ = [
    # Registry
    "HookRegistry",
    "RegisteredHook",
    # Events
    "HookCategory",
    "HookEvent",
    "EVENT_CATEGORIES",
    "get_all_events",
    "is_before_event",
    "is_after_event",
]
