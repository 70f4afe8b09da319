"""Tests for adding, re-roling and removing company employees."""

import pytest

from companykit.core.exceptions import AuthorizationError, ModelNotFoundError, ValidationError
from companykit.core.hooks import HookEvent
from companykit.domain.services.company_employees import (
    AddCompanyEmployee,
    RemoveCompanyEmployee,
    UpdateCompanyEmployeeRole,
)
from companykit.domain.services.role_registry import RoleRegistry
from companykit.infrastructure.persistence.repositories import (
    CompanyRepository,
    MembershipRepository,
)


class TestAddCompanyEmployee:
    @pytest.mark.asyncio
    async def test_adds_registered_user(self, db_session, collaborators, owner, employee, company):
        await AddCompanyEmployee(db_session, **collaborators).add(
            owner, company, "adam@example.com", "editor"
        )

        membership = await MembershipRepository(db_session).get(company.id, employee.id)
        assert membership.role == "editor"

        fresh = await CompanyRepository(db_session).fresh(company)
        assert [user.id for user in fresh.employees] == [employee.id]

    @pytest.mark.asyncio
    async def test_email_lookup_is_case_insensitive(
        self, db_session, collaborators, owner, employee, company
    ):
        await AddCompanyEmployee(db_session, **collaborators).add(
            owner, company, "ADAM@example.com", "admin"
        )

        assert await MembershipRepository(db_session).exists(company.id, employee.id)

    @pytest.mark.asyncio
    async def test_unknown_email(self, db_session, collaborators, owner, company):
        with pytest.raises(ValidationError) as exc_info:
            await AddCompanyEmployee(db_session, **collaborators).add(
                owner, company, "nobody@example.com", "editor"
            )

        assert exc_info.value.error_bag == "addCompanyEmployee"
        assert exc_info.value.messages == {
            "email": ["We were unable to find a registered user with this email address."],
        }

    @pytest.mark.asyncio
    async def test_invalid_email_and_missing_role(self, db_session, collaborators, owner, company):
        with pytest.raises(ValidationError) as exc_info:
            await AddCompanyEmployee(db_session, **collaborators).add(
                owner, company, "not-an-email", None
            )

        assert exc_info.value.messages == {
            "email": ["The email must be a valid email address."],
            "role": ["The role field is required."],
        }

    @pytest.mark.asyncio
    async def test_undefined_role(self, db_session, collaborators, owner, employee, company):
        with pytest.raises(ValidationError) as exc_info:
            await AddCompanyEmployee(db_session, **collaborators).add(
                owner, company, employee.email, "superhero"
            )

        assert exc_info.value.messages == {"role": ["The role must be a valid role."]}

    @pytest.mark.asyncio
    async def test_role_optional_without_roles(
        self, db_session, settings, hooks, owner, employee, company
    ):
        action = AddCompanyEmployee(db_session, settings=settings, roles=RoleRegistry(), hooks=hooks)

        await action.add(owner, company, employee.email)

        membership = await MembershipRepository(db_session).get(company.id, employee.id)
        assert membership.role is None

    @pytest.mark.asyncio
    async def test_already_member(
        self, db_session, collaborators, owner, employee, company, add_member
    ):
        await add_member(company, employee, "editor")

        with pytest.raises(ValidationError) as exc_info:
            await AddCompanyEmployee(db_session, **collaborators).add(
                owner, company, employee.email, "admin"
            )

        assert exc_info.value.first_message("email") == "This user already belongs to the company."

    @pytest.mark.asyncio
    async def test_trims_email_before_lookup(
        self, db_session, collaborators, owner, employee, company
    ):
        await AddCompanyEmployee(db_session, **collaborators).add(
            owner, company, " adam@example.com ", "editor"
        )

        assert await MembershipRepository(db_session).exists(company.id, employee.id)

    @pytest.mark.asyncio
    async def test_rejects_display_name_address(
        self, db_session, collaborators, owner, employee, company
    ):
        with pytest.raises(ValidationError) as exc_info:
            await AddCompanyEmployee(db_session, **collaborators).add(
                owner, company, "Adam <adam@example.com>", "editor"
            )

        assert exc_info.value.first_message("email") == "The email must be a valid email address."

    @pytest.mark.asyncio
    async def test_owner_cannot_be_added(self, db_session, collaborators, owner, company):
        with pytest.raises(ValidationError) as exc_info:
            await AddCompanyEmployee(db_session, **collaborators).add(
                owner, company, owner.email, "admin"
            )

        assert exc_info.value.first_message("email") == "This user already belongs to the company."

    @pytest.mark.asyncio
    async def test_requires_ownership(
        self, db_session, collaborators, employee, company, add_member, make_user
    ):
        await make_user("Jeffrey Way", "jeffrey@example.com")
        await add_member(company, employee, "admin")

        with pytest.raises(AuthorizationError):
            await AddCompanyEmployee(db_session, **collaborators).add(
                employee, company, "jeffrey@example.com", "editor"
            )

    @pytest.mark.asyncio
    async def test_dispatches_hooks_scoped_to_company(
        self, db_session, collaborators, hooks, owner, employee, company
    ):
        added = []

        async def record(event, data, context):
            added.append((event, data["user_id"], data["role"]))
            return data

        hooks.register(HookEvent.ON_EMPLOYEE_AFTER_ADD, record, filters={"company_id": company.id})
        hooks.register(HookEvent.ON_EMPLOYEE_AFTER_ADD, record, filters={"company_id": "other"})

        await AddCompanyEmployee(db_session, **collaborators).add(
            owner, company, employee.email, "editor"
        )

        assert added == [(HookEvent.ON_EMPLOYEE_AFTER_ADD, employee.id, "editor")]


class TestUpdateCompanyEmployeeRole:
    @pytest.mark.asyncio
    async def test_updates_role(self, db_session, collaborators, owner, employee, company, add_member):
        await add_member(company, employee, "editor")

        await UpdateCompanyEmployeeRole(db_session, **collaborators).update(
            owner, company, employee.id, "admin"
        )

        membership = await MembershipRepository(db_session).get(company.id, employee.id)
        assert membership.role == "admin"

    @pytest.mark.asyncio
    async def test_requires_valid_role(
        self, db_session, collaborators, owner, employee, company, add_member
    ):
        await add_member(company, employee, "editor")
        action = UpdateCompanyEmployeeRole(db_session, **collaborators)

        with pytest.raises(ValidationError) as exc_info:
            await action.update(owner, company, employee.id, None)
        assert exc_info.value.error_bag == "updateRole"
        assert exc_info.value.messages == {"role": ["The role field is required."]}

        with pytest.raises(ValidationError) as exc_info:
            await action.update(owner, company, employee.id, "owner")
        assert exc_info.value.messages == {"role": ["The role must be a valid role."]}

    @pytest.mark.asyncio
    async def test_requires_ownership(
        self, db_session, collaborators, employee, company, add_member
    ):
        await add_member(company, employee, "admin")

        with pytest.raises(AuthorizationError):
            await UpdateCompanyEmployeeRole(db_session, **collaborators).update(
                employee, company, employee.id, "editor"
            )

    @pytest.mark.asyncio
    async def test_unknown_membership(self, db_session, collaborators, owner, employee, company):
        with pytest.raises(ModelNotFoundError):
            await UpdateCompanyEmployeeRole(db_session, **collaborators).update(
                owner, company, employee.id, "admin"
            )


class TestRemoveCompanyEmployee:
    @pytest.mark.asyncio
    async def test_owner_removes_employee(
        self, db_session, collaborators, owner, employee, company, add_member
    ):
        await add_member(company, employee, "editor")
        employee.current_company_id = company.id
        await db_session.flush()

        await RemoveCompanyEmployee(db_session, **collaborators).remove(owner, company, employee)

        assert not await MembershipRepository(db_session).exists(company.id, employee.id)
        assert employee.current_company_id is None

    @pytest.mark.asyncio
    async def test_employee_can_leave(
        self, db_session, collaborators, employee, company, add_member
    ):
        await add_member(company, employee, "editor")

        await RemoveCompanyEmployee(db_session, **collaborators).remove(employee, company, employee)

        assert not await MembershipRepository(db_session).exists(company.id, employee.id)

    @pytest.mark.asyncio
    async def test_employee_cannot_remove_others(
        self, db_session, collaborators, employee, company, add_member, make_user
    ):
        colleague = await make_user("Jeffrey Way", "jeffrey@example.com")
        await add_member(company, employee, "admin")
        await add_member(company, colleague, "editor")

        with pytest.raises(AuthorizationError):
            await RemoveCompanyEmployee(db_session, **collaborators).remove(
                employee, company, colleague
            )

        assert await MembershipRepository(db_session).exists(company.id, colleague.id)

    @pytest.mark.asyncio
    async def test_owner_cannot_leave(self, db_session, collaborators, owner, company):
        with pytest.raises(ValidationError) as exc_info:
            await RemoveCompanyEmployee(db_session, **collaborators).remove(owner, company, owner)

        assert exc_info.value.error_bag == "removeCompanyEmployee"
        assert exc_info.value.messages == {
            "company": ["You may not leave a company that you created."],
        }

    @pytest.mark.asyncio
    async def test_keeps_other_current_company(
        self, db_session, collaborators, owner, employee, company, add_member, make_company
    ):
        elsewhere = await make_company(employee, "Tailwind Labs")
        await add_member(company, employee, "editor")
        employee.current_company_id = elsewhere.id
        await db_session.flush()

        await RemoveCompanyEmployee(db_session, **collaborators).remove(owner, company, employee)

        assert employee.current_company_id == elsewhere.id
