"""Shared plumbing for the actions that mutate companies and memberships."""

from typing import Any, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from companykit.core.config import Settings, get_settings
from companykit.core.hooks import HookRegistry
from companykit.core.translation import default_translator
from companykit.domain.entities.hook_context import AbortHookException, HookContext
from companykit.domain.services.company_policy import CompanyPolicy, Gate
from companykit.domain.services.input_validator import InputValidator
from companykit.domain.services.role_registry import RoleRegistry
from companykit.domain.services.user_companies import UserCompanies
from companykit.infrastructure.persistence.models import CompanyModel, UserModel
from companykit.infrastructure.persistence.repositories import (
    CompanyInvitationRepository,
    CompanyRepository,
    MembershipRepository,
    UserRepository,
)


class CompanyAction:
    """Base class wiring the collaborators every action needs.

    Actions flush their changes but never commit; the caller owns the
    transaction.
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        settings: Settings | None = None,
        roles: RoleRegistry | None = None,
        gate: Gate | None = None,
        hooks: HookRegistry | None = None,
        translator: Callable[..., str | None] | None = None,
    ) -> None:
        """Initialize the action.

        Args:
            session: SQLAlchemy async session.
            settings: Settings; the cached settings when omitted.
            roles: Role registry; built from settings when omitted.
            gate: Authorization gate; a CompanyPolicy gate when omitted.
            hooks: Hook registry lifecycle events are dispatched to.
            translator: Translator for user-facing messages.
        """
        self.session = session
        self.settings = settings or get_settings()
        self.roles = roles if roles is not None else RoleRegistry.from_settings(self.settings)
        self.companies = UserCompanies(session, self.roles)
        self.gate = gate or Gate(CompanyPolicy(self.companies))
        self.hooks = hooks if hooks is not None else HookRegistry()
        self.translate = translator or default_translator

        self.user_repo = UserRepository(session)
        self.company_repo = CompanyRepository(session)
        self.membership_repo = MembershipRepository(session)
        self.invitation_repo = CompanyInvitationRepository(session)

    def collaborators(self) -> dict[str, Any]:
        """Keyword arguments to build another action sharing these collaborators."""
        return {
            "settings": self.settings,
            "roles": self.roles,
            "gate": self.gate,
            "hooks": self.hooks,
            "translator": self.translate,
        }

    def validate_role(self, validator: InputValidator, role: str | None) -> None:
        """Require a defined role key, when any roles are defined."""
        if not self.roles.has_roles():
            return
        if validator.required("role", role) and not self.roles.is_valid_role(role):
            validator.add("role", "The :attribute must be a valid role.", attribute="role")

    async def dispatch(
        self,
        event: str,
        data: dict[str, Any],
        user: UserModel | None = None,
        company: CompanyModel | None = None,
    ) -> dict[str, Any] | None:
        """Trigger hooks for an event.

        Hooks that fail with any other exception are logged and do not stop
        the operation, even when registered with stop_on_error.

        Raises:
            AbortHookException: If a before-hook vetoed the operation.
        """
        company_id = company.id if company is not None else None
        result = await self.hooks.trigger(
            event,
            data=data,
            context=HookContext(user=user, company_id=company_id),
            filters={"company_id": company_id} if company_id else None,
        )
        if result.aborted:
            raise AbortHookException(
                result.abort_message or "Operation aborted by hook",
                result.abort_status_code,
            )
        return result.data
