"""Adding, re-roling and removing company employees."""

from companykit.core.exceptions import AuthorizationError, ModelNotFoundError, ValidationError
from companykit.core.hooks import HookEvent
from companykit.core.logging import get_logger
from companykit.domain.contracts import (
    AddsCompanyEmployees,
    RemovesCompanyEmployees,
    UpdatesCompanyEmployeeRoles,
)
from companykit.domain.services.company_action import CompanyAction
from companykit.domain.services.input_validator import InputValidator
from companykit.infrastructure.persistence.models import (
    CompanyModel,
    MembershipModel,
    UserModel,
)

logger = get_logger(__name__)


class AddCompanyEmployee(CompanyAction, AddsCompanyEmployees):
    """Attach an already registered user to a company under a role."""

    ERROR_BAG = "addCompanyEmployee"

    async def add(
        self, user: UserModel, company: CompanyModel, email: str, role: str | None = None
    ) -> None:
        """Add the user registered with `email` to the company.

        Raises:
            AuthorizationError: If the acting user may not add employees.
            ValidationError: If the email or role is invalid, or the user
                already belongs to the company.
        """
        await self.gate.authorize(user, "add_company_employee", company)

        employee = await self._validate(company, email, role)

        await self.dispatch(
            HookEvent.ON_EMPLOYEE_BEFORE_ADD,
            {"company_id": company.id, "user_id": employee.id, "role": role},
            user=user,
            company=company,
        )

        await self.membership_repo.create(
            MembershipModel(company_id=company.id, user_id=employee.id, role=role)
        )

        logger.info(
            "Company employee added",
            company_id=company.id,
            user_id=employee.id,
            role=role,
            added_by=user.id,
        )

        await self.dispatch(
            HookEvent.ON_EMPLOYEE_AFTER_ADD,
            {"company_id": company.id, "user_id": employee.id, "role": role},
            user=user,
            company=company,
        )

    async def _validate(
        self, company: CompanyModel, email: str, role: str | None
    ) -> UserModel:
        validator = InputValidator(self.translate)

        employee = None
        address = None
        if validator.required("email", email):
            address = validator.email("email", email)
        if address:
            employee = await self.user_repo.get_by_email(address)
            if employee is None:
                validator.add(
                    "email", "We were unable to find a registered user with this email address."
                )
            elif await self.companies.belongs_to_company(employee, company):
                validator.add("email", "This user already belongs to the company.")

        self.validate_role(validator, role)
        validator.raise_if_failed(self.ERROR_BAG)
        return employee


class UpdateCompanyEmployeeRole(CompanyAction, UpdatesCompanyEmployeeRoles):
    """Change the role an employee holds on a company."""

    ERROR_BAG = "updateRole"

    async def update(
        self, user: UserModel, company: CompanyModel, employee_id: str, role: str | None
    ) -> None:
        """Update the employee's role.

        Raises:
            AuthorizationError: If the acting user may not update employees.
            ValidationError: If the role is missing or undefined.
            ModelNotFoundError: If the user holds no membership in the company.
        """
        await self.gate.authorize(user, "update_company_employee", company)

        validator = InputValidator(self.translate)
        if validator.required("role", role) and not self.roles.is_valid_role(role):
            validator.add("role", "The :attribute must be a valid role.", attribute="role")
        validator.raise_if_failed(self.ERROR_BAG)

        if not await self.membership_repo.update_role(company.id, employee_id, role):
            raise ModelNotFoundError("Membership", employee_id)

        logger.info(
            "Company employee role updated",
            company_id=company.id,
            user_id=employee_id,
            role=role,
            updated_by=user.id,
        )

        await self.dispatch(
            HookEvent.ON_EMPLOYEE_AFTER_UPDATE,
            {"company_id": company.id, "user_id": employee_id, "role": role},
            user=user,
            company=company,
        )


class RemoveCompanyEmployee(CompanyAction, RemovesCompanyEmployees):
    """Detach an employee from a company.

    Employees may always remove themselves (leaving the company); removing
    anybody else takes the remove_company_employee ability.
    """

    ERROR_BAG = "removeCompanyEmployee"

    async def remove(
        self, user: UserModel, company: CompanyModel, employee: UserModel
    ) -> None:
        """Remove the employee.

        Raises:
            AuthorizationError: If the acting user may not remove the employee.
            ValidationError: If the employee owns the company.
        """
        if (
            not await self.gate.check(user, "remove_company_employee", company)
            and user.id != employee.id
        ):
            logger.warning(
                "Employee removal denied",
                company_id=company.id,
                user_id=user.id,
                employee_id=employee.id,
            )
            raise AuthorizationError(ability="remove_company_employee")

        if employee.id == company.user_id:
            raise ValidationError.with_messages(
                {"company": self.translate("You may not leave a company that you created.")},
                error_bag=self.ERROR_BAG,
            )

        data = {"company_id": company.id, "user_id": employee.id}

        await self.dispatch(HookEvent.ON_EMPLOYEE_BEFORE_REMOVE, data, user=user, company=company)

        await self.membership_repo.delete(company.id, employee.id)
        await self.user_repo.clear_current_company(company.id, user_id=employee.id)
        if employee.current_company_id == company.id:
            employee.current_company_id = None

        logger.info(
            "Company employee removed",
            company_id=company.id,
            user_id=employee.id,
            removed_by=user.id,
        )

        await self.dispatch(HookEvent.ON_EMPLOYEE_AFTER_REMOVE, data, user=user, company=company)
