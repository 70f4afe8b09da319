"""Base class for stateful UI components.

A component keeps the state a page needs between user interactions. The host
calls actions through `call()`, which records validation failures in the
component's error bag instead of letting them escape; authorization and
not-found errors propagate to the host.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Callable

from companykit.core.exceptions import ValidationError
from companykit.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Redirect:
    """Instruction for the host to navigate to `url`."""

    url: str


class Component:
    """Error bag and emitted-event bookkeeping shared by components."""

    def __init__(self) -> None:
        self.errors: dict[str, list[str]] = {}
        self.error_bag: str | None = None
        self.emitted_events: list[tuple[str, tuple[Any, ...]]] = []

    def reset_error_bag(self) -> None:
        self.errors = {}
        self.error_bag = None

    def add_error(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def emit(self, event: str, *params: Any) -> None:
        """Queue an event for the presentation layer."""
        self.emitted_events.append((event, params))

    async def call(self, action: str | Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Run an action the way the host's event loop does.

        Args:
            action: Action method, or its name.
            *args: Positional arguments for the action.
            **kwargs: Keyword arguments for the action.

        Returns:
            Whatever the action returns, or None if it failed validation.
        """
        method = getattr(self, action) if isinstance(action, str) else action
        try:
            result = method(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
            return result
        except ValidationError as e:
            self.error_bag = e.error_bag
            for field, messages in e.messages.items():
                for message in messages:
                    self.add_error(field, message)
            logger.debug(
                "Action failed validation",
                component=type(self).__name__,
                error_bag=e.error_bag,
                fields=list(e.messages),
            )
            return None
