"""Queries about the companies a user owns or works for.

Ownership is recorded on the company (user_id); employment through a
membership row carrying a role key. Owners implicitly hold the OwnerRole.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from companykit.core.config import get_settings
from companykit.core.logging import get_logger
from companykit.domain.entities.role import OwnerRole, Role
from companykit.domain.services.role_registry import RoleRegistry
from companykit.infrastructure.persistence.models import CompanyModel, UserModel
from companykit.infrastructure.persistence.repositories import (
    CompanyRepository,
    MembershipRepository,
    UserRepository,
)

logger = get_logger(__name__)


class UserCompanies:
    """Resolve a user's relationship, role and permissions on companies."""

    def __init__(self, session: AsyncSession, roles: RoleRegistry | None = None) -> None:
        """Initialize the service.

        Args:
            session: SQLAlchemy async session.
            roles: Role registry; built from settings when omitted.
        """
        self.session = session
        self.roles = roles if roles is not None else RoleRegistry.from_settings(get_settings())
        self.company_repo = CompanyRepository(session)
        self.membership_repo = MembershipRepository(session)
        self.user_repo = UserRepository(session)

    def owns_company(self, user: UserModel, company: CompanyModel | None) -> bool:
        """Whether the user is the company's owner."""
        if company is None:
            return False
        return user.id == company.user_id

    async def belongs_to_company(self, user: UserModel, company: CompanyModel | None) -> bool:
        """Whether the user owns the company or holds a membership in it."""
        if company is None:
            return False
        if self.owns_company(user, company):
            return True
        return await self.membership_repo.exists(company.id, user.id)

    async def company_role(self, user: UserModel, company: CompanyModel | None) -> Role | None:
        """The role the user holds on a company.

        Returns:
            OwnerRole for the owner, the registry role for an employee, or
            None when the user does not belong to the company or their role
            key is no longer defined.
        """
        if company is None:
            return None
        if self.owns_company(user, company):
            return OwnerRole()

        membership = await self.membership_repo.get(company.id, user.id)
        if membership is None:
            return None
        return self.roles.find(membership.role)

    async def has_company_role(
        self, user: UserModel, company: CompanyModel | None, role_key: str
    ) -> bool:
        """Whether the user holds the given role. Owners hold every role."""
        if self.owns_company(user, company):
            return True
        role = await self.company_role(user, company)
        return role is not None and role.key == role_key

    async def company_permissions(
        self, user: UserModel, company: CompanyModel | None
    ) -> list[str]:
        """Permissions the user has on a company (["*"] for the owner)."""
        if self.owns_company(user, company):
            return ["*"]
        role = await self.company_role(user, company)
        if role is None:
            return []
        return list(role.permissions)

    async def has_company_permission(
        self, user: UserModel, company: CompanyModel | None, permission: str
    ) -> bool:
        """Whether the user has a permission on a company.

        A role grants a permission when it lists it exactly, lists "*", or,
        for "<thing>:create" and "<thing>:update", lists "*:create" or
        "*:update" respectively.
        """
        if self.owns_company(user, company):
            return True

        permissions = await self.company_permissions(user, company)
        if permission in permissions or "*" in permissions:
            return True
        for action in ("create", "update"):
            if permission.endswith(f":{action}") and f"*:{action}" in permissions:
                return True
        return False

    async def owned_companies(self, user: UserModel) -> list[CompanyModel]:
        """Companies the user owns, by name."""
        return await self.company_repo.list_owned_by(user.id)

    async def companies(self, user: UserModel) -> list[CompanyModel]:
        """Companies the user is an employee of, by name."""
        return await self.company_repo.list_with_employee(user.id)

    async def all_companies(self, user: UserModel) -> list[CompanyModel]:
        """Owned and employing companies together, by name."""
        seen: dict[str, CompanyModel] = {}
        for company in await self.owned_companies(user) + await self.companies(user):
            seen.setdefault(company.id, company)
        return sorted(seen.values(), key=lambda company: company.name)

    async def personal_company(self, user: UserModel) -> CompanyModel | None:
        """The user's personal company, if they have one."""
        return await self.company_repo.get_personal_company(user.id)

    async def current_company(self, user: UserModel) -> CompanyModel | None:
        """The company the user is working in.

        Users without a current company are switched to their personal one.
        """
        if user.current_company_id is None:
            personal = await self.personal_company(user)
            if personal is not None:
                await self.switch_company(user, personal)

        if user.current_company_id is None:
            return None
        return await self.company_repo.get_by_id(user.current_company_id)

    async def switch_company(self, user: UserModel, company: CompanyModel) -> bool:
        """Make the company the user's current one.

        Returns:
            False if the user does not belong to the company.
        """
        if not await self.belongs_to_company(user, company):
            return False

        user.current_company_id = company.id
        await self.user_repo.update(user)

        logger.debug("Switched current company", user_id=user.id, company_id=company.id)
        return True

    def is_current_company(self, user: UserModel, company: CompanyModel) -> bool:
        """Whether the company is the user's current one."""
        return user.current_company_id == company.id
