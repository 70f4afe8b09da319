"""Company repository for database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from companykit.infrastructure.persistence.models import CompanyModel, MembershipModel


class CompanyRepository:
    """Repository for company database operations.

    Companies are always loaded as complete aggregates (owner, memberships
    and invitations), see CompanyModel.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, company: CompanyModel) -> CompanyModel:
        """Create a new company.

        Args:
            company: Company model to create.

        Returns:
            Created company model, reloaded with its relationships.
        """
        self.session.add(company)
        await self.session.flush()
        return await self.fresh(company)

    async def get_by_id(self, company_id: str) -> CompanyModel | None:
        """Get a company by ID.

        Args:
            company_id: Company ID (UUID string).

        Returns:
            Company model if found, None otherwise.
        """
        result = await self.session.execute(
            select(CompanyModel).where(CompanyModel.id == company_id)
        )
        return result.scalar_one_or_none()

    async def fresh(self, company: CompanyModel) -> CompanyModel | None:
        """Reload a company and its relationships from the database.

        Any in-memory state of the instance is discarded.

        Args:
            company: Company model to reload.

        Returns:
            The reloaded company, or None if it no longer exists.
        """
        result = await self.session.execute(
            select(CompanyModel)
            .where(CompanyModel.id == company.id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_owned_by(self, user_id: str) -> list[CompanyModel]:
        """List companies owned by a user, ordered by name.

        Args:
            user_id: Owner's user ID.

        Returns:
            List of company models.
        """
        result = await self.session.execute(
            select(CompanyModel)
            .where(CompanyModel.user_id == user_id)
            .order_by(CompanyModel.name)
        )
        return list(result.scalars().all())

    async def list_with_employee(self, user_id: str) -> list[CompanyModel]:
        """List companies a user holds a membership in, ordered by name.

        Args:
            user_id: Employee's user ID.

        Returns:
            List of company models.
        """
        result = await self.session.execute(
            select(CompanyModel)
            .join(MembershipModel, MembershipModel.company_id == CompanyModel.id)
            .where(MembershipModel.user_id == user_id)
            .order_by(CompanyModel.name)
        )
        return list(result.scalars().all())

    async def get_personal_company(self, user_id: str) -> CompanyModel | None:
        """Get the personal company of a user.

        Args:
            user_id: Owner's user ID.

        Returns:
            Company model if the user has one, None otherwise.
        """
        result = await self.session.execute(
            select(CompanyModel)
            .where(
                CompanyModel.user_id == user_id,
                CompanyModel.personal_company.is_(True),
            )
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def update(self, company: CompanyModel) -> CompanyModel:
        """Flush pending changes to a company.

        Args:
            company: Company model with updated fields.

        Returns:
            Updated company model.
        """
        await self.session.flush()
        return company

    async def delete(self, company: CompanyModel) -> None:
        """Delete a company together with its memberships and invitations.

        Args:
            company: Company model to delete.
        """
        await self.session.delete(company)
        await self.session.flush()
