"""Inviting people to a company and accepting those invitations.

Delivering an invitation (mail, chat message, ...) is up to the host: register
a hook for HookEvent.ON_INVITATION_AFTER_CREATE.
"""

import uuid

from companykit.core.exceptions import AuthorizationError, ModelNotFoundError
from companykit.core.hooks import HookEvent
from companykit.core.logging import get_logger
from companykit.domain.contracts import AddsCompanyEmployees, InvitesCompanyEmployees
from companykit.domain.services.company_action import CompanyAction
from companykit.domain.services.company_employees import AddCompanyEmployee
from companykit.domain.services.input_validator import InputValidator
from companykit.infrastructure.persistence.models import (
    CompanyInvitationModel,
    CompanyModel,
    UserModel,
)

logger = get_logger(__name__)


def _invitation_data(invitation: CompanyInvitationModel, company: CompanyModel) -> dict:
    return {
        "invitation_id": invitation.id,
        "company_id": company.id,
        "company_name": company.name,
        "owner_id": company.user_id,
        "email": invitation.email,
        "role": invitation.role,
    }


class InviteCompanyEmployee(CompanyAction, InvitesCompanyEmployees):
    """Create a pending invitation for an email address."""

    ERROR_BAG = "addCompanyEmployee"

    async def invite(
        self, user: UserModel, company: CompanyModel, email: str, role: str | None = None
    ) -> CompanyInvitationModel:
        """Invite `email` to join the company under `role`.

        Raises:
            AuthorizationError: If the acting user may not add employees.
            ValidationError: If the email or role is invalid, the email was
                already invited, or its user already belongs to the company.
        """
        await self.gate.authorize(user, "add_company_employee", company)

        email = await self._validate(company, email, role)

        await self.dispatch(
            HookEvent.ON_INVITATION_BEFORE_CREATE,
            {
                "company_id": company.id,
                "company_name": company.name,
                "email": email,
                "role": role,
                "invited_by": user.id,
            },
            user=user,
            company=company,
        )

        invitation = await self.invitation_repo.create(
            CompanyInvitationModel(
                id=str(uuid.uuid4()),
                company_id=company.id,
                email=email,
                role=role,
            )
        )

        logger.info(
            "Company invitation created",
            company_id=company.id,
            invitation_id=invitation.id,
            invited_by=user.id,
        )

        await self.dispatch(
            HookEvent.ON_INVITATION_AFTER_CREATE,
            {**_invitation_data(invitation, company), "invited_by": user.id},
            user=user,
            company=company,
        )
        return invitation

    async def _validate(self, company: CompanyModel, email: str, role: str | None) -> str:
        """Validate the invitation and return the normalized email address."""
        validator = InputValidator(self.translate)

        address = None
        if validator.required("email", email):
            address = validator.email("email", email)
        if address:
            if await self.invitation_repo.exists_for_email(company.id, address):
                validator.add("email", "This user has already been invited to the company.")
            else:
                invitee = await self.user_repo.get_by_email(address)
                if invitee is not None and await self.companies.belongs_to_company(
                    invitee, company
                ):
                    validator.add("email", "This user already belongs to the company.")

        self.validate_role(validator, role)
        validator.raise_if_failed(self.ERROR_BAG)
        return address


class AcceptCompanyInvitation(CompanyAction):
    """Turn a pending invitation into a membership.

    The invitee is added on behalf of the company owner, so the usual
    add-employee validation applies.
    """

    def __init__(self, session, *, adder: AddsCompanyEmployees | None = None, **kwargs) -> None:
        super().__init__(session, **kwargs)
        self.adder = adder or AddCompanyEmployee(session, **self.collaborators())

    async def accept(self, user: UserModel, invitation_id: str) -> CompanyModel:
        """Accept an invitation addressed to `user`.

        Returns:
            The company the user joined, reloaded.

        Raises:
            ModelNotFoundError: If the invitation or its company is gone.
            AuthorizationError: If the invitation was sent to another address.
        """
        invitation = await self.invitation_repo.find_by_id_or_fail(invitation_id)
        if invitation.email.lower() != user.email.lower():
            logger.warning(
                "Invitation accept denied", invitation_id=invitation.id, user_id=user.id
            )
            raise AuthorizationError()

        company = await self.company_repo.get_by_id(invitation.company_id)
        if company is None:
            raise ModelNotFoundError("Company", invitation.company_id)

        data = _invitation_data(invitation, company)

        await self.adder.add(company.owner, company, invitation.email, invitation.role)
        await self.invitation_repo.delete_for_company(invitation.id, company.id)

        logger.info(
            "Company invitation accepted",
            company_id=company.id,
            invitation_id=data["invitation_id"],
            user_id=user.id,
        )

        await self.dispatch(
            HookEvent.ON_INVITATION_AFTER_ACCEPT, data, user=user, company=company
        )
        return await self.company_repo.fresh(company)
