"""Component behind a company's employee management page.

Lists the employees and pending invitations of one company and lets the
acting user add or invite employees, change their roles, remove them, or
leave the company. Authorization is left to the mutators; after each
successful write the session is committed and the company reloaded.
"""

from typing import Any, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from companykit.application.components.component import Component, Redirect
from companykit.application.components.state import (
    IDLE,
    ConfirmingLeave,
    ConfirmingRemoval,
    ManagerState,
    ManagingRole,
)
from companykit.core.config import Settings, get_settings
from companykit.core.exceptions import InvalidComponentStateError
from companykit.core.hooks import HookRegistry
from companykit.core.logging import get_logger
from companykit.core.translation import default_translator
from companykit.domain.contracts import (
    AddsCompanyEmployees,
    InvitesCompanyEmployees,
    RemovesCompanyEmployees,
    UpdatesCompanyEmployeeRoles,
)
from companykit.domain.services.company_employees import (
    AddCompanyEmployee,
    RemoveCompanyEmployee,
    UpdateCompanyEmployeeRole,
)
from companykit.domain.services.company_invitations import InviteCompanyEmployee
from companykit.domain.services.company_policy import CompanyPolicy, Gate
from companykit.domain.services.role_registry import RoleRegistry
from companykit.domain.services.user_companies import UserCompanies
from companykit.infrastructure.persistence.models import CompanyModel, UserModel
from companykit.infrastructure.persistence.repositories import (
    CompanyInvitationRepository,
    CompanyRepository,
    UserRepository,
)

logger = get_logger(__name__)


def _empty_form() -> dict[str, Any]:
    return {"email": "", "role": None}


class CompanyEmployeeManager(Component):
    """Manage the employees of a company on behalf of the signed-in user.

    Attributes:
        user: The acting (signed-in) user.
        company: The mounted company, replaced by a fresh copy after writes.
        state: Current interaction flow.
        add_company_employee_form: Bound values of the add-employee form.
    """

    def __init__(
        self,
        session: AsyncSession,
        user: UserModel,
        *,
        settings: Settings | None = None,
        roles: RoleRegistry | None = None,
        hooks: HookRegistry | None = None,
        translator: Callable[..., str | None] | None = None,
        gate: Gate | None = None,
        adder: AddsCompanyEmployees | None = None,
        inviter: InvitesCompanyEmployees | None = None,
        updater: UpdatesCompanyEmployeeRoles | None = None,
        remover: RemovesCompanyEmployees | None = None,
    ) -> None:
        """Initialize the component.

        Mutators default to the bundled implementations sharing this
        component's session and collaborators.
        """
        super().__init__()
        self.session = session
        self.user = user
        self.settings = settings or get_settings()
        self.role_registry = (
            roles if roles is not None else RoleRegistry.from_settings(self.settings)
        )
        self.hooks = hooks if hooks is not None else HookRegistry()
        self.translate = translator or default_translator
        self.companies = UserCompanies(session, self.role_registry)
        self.gate = gate or Gate(CompanyPolicy(self.companies))

        collaborators = {
            "settings": self.settings,
            "roles": self.role_registry,
            "gate": self.gate,
            "hooks": self.hooks,
            "translator": self.translate,
        }
        self.adder = adder or AddCompanyEmployee(session, **collaborators)
        self.inviter = inviter or InviteCompanyEmployee(session, **collaborators)
        self.updater = updater or UpdateCompanyEmployeeRole(session, **collaborators)
        self.remover = remover or RemoveCompanyEmployee(session, **collaborators)

        self.user_repo = UserRepository(session)
        self.company_repo = CompanyRepository(session)
        self.invitation_repo = CompanyInvitationRepository(session)

        self.company: CompanyModel | None = None
        self.state: ManagerState = IDLE
        self.add_company_employee_form: dict[str, Any] = _empty_form()

    @property
    def currently_managing_role(self) -> bool:
        return isinstance(self.state, ManagingRole)

    @property
    def managing_role_for(self) -> UserModel | None:
        return self.state.user if isinstance(self.state, ManagingRole) else None

    @property
    def current_role(self) -> str | None:
        return self.state.role if isinstance(self.state, ManagingRole) else None

    @property
    def confirming_leaving_company(self) -> bool:
        return isinstance(self.state, ConfirmingLeave)

    @property
    def confirming_company_employee_removal(self) -> bool:
        return isinstance(self.state, ConfirmingRemoval)

    @property
    def company_employee_id_being_removed(self) -> str | None:
        return self.state.user_id if isinstance(self.state, ConfirmingRemoval) else None

    @property
    def roles(self) -> list[dict[str, Any]]:
        """Serialized roles for the role picker, in registry order."""
        return self.role_registry.serialize(self.translate)

    async def permissions(self) -> dict[str, bool]:
        """What the acting user may do on the mounted company."""
        company = self._mounted()
        return {
            "can_add_company_employees": await self.gate.check(
                self.user, "add_company_employee", company
            ),
            "can_delete_company": await self.gate.check(self.user, "delete", company),
            "can_remove_company_employees": await self.gate.check(
                self.user, "remove_company_employee", company
            ),
            "can_update_company": await self.gate.check(self.user, "update", company),
            "can_update_company_employees": await self.gate.check(
                self.user, "update_company_employee", company
            ),
        }

    def mount(self, company: CompanyModel) -> None:
        self.company = company

    async def add_company_employee(self) -> None:
        """Add, or invite when invitations are enabled, the employee in the form."""
        company = self._mounted()
        self.reset_error_bag()

        email = self.add_company_employee_form.get("email")
        role = self.add_company_employee_form.get("role")

        if self.settings.company_invitations:
            await self.inviter.invite(self.user, company, email, role)
        else:
            await self.adder.add(self.user, company, email, role)

        self.add_company_employee_form = _empty_form()

        await self._commit_and_refresh()

        self.emit("saved")

    async def cancel_company_invitation(self, invitation_id: str | None) -> None:
        """Delete a pending invitation of the mounted company."""
        company = self._mounted()

        if invitation_id:
            deleted = await self.invitation_repo.delete_for_company(invitation_id, company.id)
            logger.info(
                "Company invitation cancelled",
                company_id=company.id,
                invitation_id=invitation_id,
                deleted=deleted,
            )

        await self._commit_and_refresh()

    async def manage_role(self, user_id: str) -> None:
        """Start managing the role of an employee.

        Raises:
            ModelNotFoundError: If no user has the given id.
        """
        company = self._mounted()
        target = await self.user_repo.find_by_id_or_fail(user_id)
        role = await self.companies.company_role(target, company)
        self.state = ManagingRole(user=target, role=role.key if role is not None else None)

    def select_role(self, role: str | None) -> None:
        """Pick the role the managed employee should get."""
        state = self._expect(ManagingRole, "select_role")
        self.state = ManagingRole(user=state.user, role=role)

    async def update_role(self, updater: UpdatesCompanyEmployeeRoles | None = None) -> None:
        """Save the selected role of the managed employee."""
        company = self._mounted()
        state = self._expect(ManagingRole, "update_role")

        await (updater or self.updater).update(self.user, company, state.user.id, state.role)

        await self._commit_and_refresh()

        self.stop_managing_role()

    def stop_managing_role(self) -> None:
        self.state = IDLE

    def confirm_leaving_company(self) -> None:
        self.state = ConfirmingLeave()

    async def leave_company(self, remover: RemovesCompanyEmployees | None = None) -> Redirect:
        """Remove the acting user from the mounted company.

        Returns:
            Redirect to the home route.
        """
        company = self._mounted()

        await (remover or self.remover).remove(self.user, company, self.user)

        self.state = IDLE

        await self._commit_and_refresh()

        return Redirect(self.settings.home_route)

    def confirm_company_employee_removal(self, user_id: str) -> None:
        self.state = ConfirmingRemoval(user_id=user_id)

    async def remove_company_employee(
        self, remover: RemovesCompanyEmployees | None = None
    ) -> None:
        """Remove the employee whose removal is being confirmed.

        Raises:
            ModelNotFoundError: If the employee no longer exists.
        """
        company = self._mounted()
        state = self._expect(ConfirmingRemoval, "remove_company_employee")

        employee = await self.user_repo.find_by_id_or_fail(state.user_id)
        await (remover or self.remover).remove(self.user, company, employee)

        self.state = IDLE

        await self._commit_and_refresh()

    def cancel_confirmation(self) -> None:
        self.state = IDLE

    def _mounted(self) -> CompanyModel:
        if self.company is None:
            raise InvalidComponentStateError("No company has been mounted.")
        return self.company

    def _expect(self, state_type: type, action: str) -> Any:
        if not isinstance(self.state, state_type):
            raise InvalidComponentStateError(
                f"Cannot {action} while {type(self.state).__name__}."
            )
        return self.state

    async def _commit_and_refresh(self) -> None:
        await self.session.commit()
        self.company = await self.company_repo.fresh(self._mounted())
