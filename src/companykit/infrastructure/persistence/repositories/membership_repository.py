"""Membership repository for database operations."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from companykit.infrastructure.persistence.models import MembershipModel


class MembershipRepository:
    """Repository for company membership database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, membership: MembershipModel) -> MembershipModel:
        """Create a new membership.

        Args:
            membership: Membership model to create.

        Returns:
            Created membership model.
        """
        self.session.add(membership)
        await self.session.flush()
        return membership

    async def get(self, company_id: str, user_id: str) -> MembershipModel | None:
        """Get the membership of a user in a company.

        Args:
            company_id: Company ID.
            user_id: User ID.

        Returns:
            Membership model if found, None otherwise.
        """
        result = await self.session.execute(
            select(MembershipModel).where(
                MembershipModel.company_id == company_id,
                MembershipModel.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def exists(self, company_id: str, user_id: str) -> bool:
        """Check whether a user holds a membership in a company."""
        result = await self.session.execute(
            select(MembershipModel.id)
            .where(
                MembershipModel.company_id == company_id,
                MembershipModel.user_id == user_id,
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def update_role(self, company_id: str, user_id: str, role: str | None) -> bool:
        """Change the role of an existing membership.

        Returns:
            True if a membership was updated, False if none exists.
        """
        result = await self.session.execute(
            update(MembershipModel)
            .where(
                MembershipModel.company_id == company_id,
                MembershipModel.user_id == user_id,
            )
            .values(role=role)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return result.rowcount > 0

    async def delete(self, company_id: str, user_id: str) -> bool:
        """Remove a user's membership in a company.

        Returns:
            True if a membership was deleted, False if none exists.
        """
        result = await self.session.execute(
            delete(MembershipModel)
            .where(
                MembershipModel.company_id == company_id,
                MembershipModel.user_id == user_id,
            )
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return result.rowcount > 0

    async def delete_for_user(self, user_id: str) -> int:
        """Remove every membership a user holds.

        Returns:
            Number of memberships deleted.
        """
        result = await self.session.execute(
            delete(MembershipModel)
            .where(MembershipModel.user_id == user_id)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return result.rowcount
