"""Hook context and exceptions for the hook system.

Contains the core data structures used by the hook system:
- HookContext: Context passed to all hook callbacks
- AbortHookException: Raised by before-hooks to cancel operations
- HookResult: Result of a hook trigger operation
"""

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from companykit.infrastructure.persistence.models import UserModel


class AbortHookException(Exception):
    """Raised by before-hooks to cancel an operation.

    Args:
        message: Human-readable error message.
        status_code: Status code the host should respond with (default: 400).

    Example:
        async def only_company_domain(event, data, context):
            if not data["email"].endswith("@acme.test"):
                raise AbortHookException("Only acme.test addresses may be invited")
            return data
    """

    def __init__(self, message: str, status_code: int = 400) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


@dataclass
class HookContext:
    """Context passed to all hook callbacks.

    Attributes:
        user: The acting user, or None for system operations.
        company_id: The company the operation targets.
        request_id: Correlation ID for logging and tracing.
    """

    user: Optional["UserModel"] = None
    company_id: Optional[str] = None
    request_id: str = ""

    def __post_init__(self) -> None:
        if not self.request_id:
            self.request_id = f"hk_{uuid.uuid4().hex[:12]}"


@dataclass
class HookResult:
    """Result of a hook trigger operation.

    Attributes:
        success: Whether all hooks executed successfully.
        aborted: Whether the operation was aborted by a hook.
        abort_message: Message from AbortHookException if aborted.
        abort_status_code: Status code from AbortHookException if aborted.
        errors: List of error messages from hooks that failed.
        data: Modified data from the hook chain.
    """

    success: bool = True
    aborted: bool = False
    abort_message: Optional[str] = None
    abort_status_code: int = 400
    errors: list[str] = field(default_factory=list)
    data: Optional[dict[str, Any]] = None
