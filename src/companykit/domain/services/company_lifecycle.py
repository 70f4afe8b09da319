"""Creating, renaming and deleting companies."""

import uuid

from companykit.core.hooks import HookEvent
from companykit.core.logging import get_logger
from companykit.domain.contracts import (
    CreatesCompanies,
    DeletesCompanies,
    UpdatesCompanyNames,
)
from companykit.domain.services.company_action import CompanyAction
from companykit.domain.services.input_validator import InputValidator
from companykit.infrastructure.persistence.models import CompanyModel, UserModel

logger = get_logger(__name__)


def _company_data(company: CompanyModel) -> dict:
    return {
        "company_id": company.id,
        "company_name": company.name,
        "owner_id": company.user_id,
        "personal_company": company.personal_company,
    }


class CreateCompany(CompanyAction, CreatesCompanies):
    """Create a company owned by the acting user and switch them to it."""

    ERROR_BAG = "createCompany"

    async def create(self, user: UserModel, name: str) -> CompanyModel:
        """Create the company.

        Raises:
            AuthorizationError: If the user may not create companies.
            ValidationError: If the name is missing or too long.
        """
        await self.gate.authorize(user, "create")

        validator = InputValidator(self.translate)
        if validator.required("name", name):
            validator.max_length("name", name, self.settings.company_name_max_length)
        validator.raise_if_failed(self.ERROR_BAG)

        await self.dispatch(
            HookEvent.ON_COMPANY_BEFORE_CREATE,
            {"owner_id": user.id, "company_name": name},
            user=user,
        )

        company = await self.company_repo.create(
            CompanyModel(
                id=str(uuid.uuid4()),
                user_id=user.id,
                name=name.strip(),
                personal_company=False,
            )
        )
        await self.companies.switch_company(user, company)

        logger.info("Company created", company_id=company.id, owner_id=user.id)

        await self.dispatch(
            HookEvent.ON_COMPANY_AFTER_CREATE, _company_data(company), user=user, company=company
        )
        return company


class CreatePersonalCompany(CompanyAction):
    """Create the personal company every newly registered user gets.

    Runs during registration, so no ability is checked.
    """

    async def create(self, user: UserModel) -> CompanyModel:
        company = await self.company_repo.create(
            CompanyModel(
                id=str(uuid.uuid4()),
                user_id=user.id,
                name=f"{user.first_name}{self.settings.personal_company_suffix}",
                personal_company=True,
            )
        )
        user.current_company_id = company.id
        await self.user_repo.update(user)

        logger.info("Personal company created", company_id=company.id, owner_id=user.id)

        await self.dispatch(
            HookEvent.ON_COMPANY_AFTER_CREATE, _company_data(company), user=user, company=company
        )
        return company


class UpdateCompanyName(CompanyAction, UpdatesCompanyNames):
    """Rename a company."""

    ERROR_BAG = "updateCompanyName"

    async def update(self, user: UserModel, company: CompanyModel, name: str) -> CompanyModel:
        """Rename the company.

        Raises:
            AuthorizationError: If the user may not update the company.
            ValidationError: If the name is missing or too long.
        """
        await self.gate.authorize(user, "update", company)

        validator = InputValidator(self.translate)
        if validator.required("name", name):
            validator.max_length("name", name, self.settings.company_name_max_length)
        validator.raise_if_failed(self.ERROR_BAG)

        company.name = name.strip()
        await self.company_repo.update(company)

        logger.info("Company renamed", company_id=company.id, user_id=user.id)

        await self.dispatch(
            HookEvent.ON_COMPANY_AFTER_UPDATE, _company_data(company), user=user, company=company
        )
        return company


class DeleteCompany(CompanyAction, DeletesCompanies):
    """Purge a company: detach users working in it, then delete it.

    Memberships and invitations go with it. Run ValidateCompanyDeletion
    first when the deletion is user-initiated.
    """

    async def delete(self, company: CompanyModel) -> None:
        data = _company_data(company)

        await self.dispatch(HookEvent.ON_COMPANY_BEFORE_DELETE, data, company=company)

        await self.user_repo.clear_current_company(company.id)

        # Load the current memberships so the delete cascades to all of them
        current = await self.company_repo.fresh(company)
        if current is not None:
            await self.company_repo.delete(current)

        logger.info("Company deleted", company_id=data["company_id"])

        await self.dispatch(HookEvent.ON_COMPANY_AFTER_DELETE, data)
