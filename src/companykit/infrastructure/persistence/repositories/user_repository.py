"""User repository for database operations."""

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from companykit.core.exceptions import ModelNotFoundError
from companykit.infrastructure.persistence.models import UserModel


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, user: UserModel) -> UserModel:
        """Create a new user.

        Args:
            user: User model to create.

        Returns:
            Created user model.
        """
        self.session.add(user)
        await self.session.flush()
        return user

    async def get_by_id(self, user_id: str) -> UserModel | None:
        """Get a user by ID.

        Args:
            user_id: User ID (UUID string).

        Returns:
            User model if found, None otherwise.
        """
        result = await self.session.execute(
            select(UserModel).where(UserModel.id == user_id)
        )
        return result.scalar_one_or_none()

    async def find_by_id_or_fail(self, user_id: str) -> UserModel:
        """Get a user by ID.

        Raises:
            ModelNotFoundError: If no user has the given ID.
        """
        user = await self.get_by_id(user_id)
        if user is None:
            raise ModelNotFoundError("User", user_id)
        return user

    async def get_by_email(self, email: str) -> UserModel | None:
        """Get a user by email address (case-insensitive).

        Args:
            email: Email address.

        Returns:
            User model if found, None otherwise.
        """
        result = await self.session.execute(
            select(UserModel).where(func.lower(UserModel.email) == email.lower())
        )
        return result.scalar_one_or_none()

    async def update(self, user: UserModel) -> UserModel:
        """Flush pending changes to a user.

        Args:
            user: User model with updated fields.

        Returns:
            Updated user model.
        """
        await self.session.flush()
        return user

    async def clear_current_company(self, company_id: str, user_id: str | None = None) -> int:
        """Unset current_company_id for users currently working in a company.

        Args:
            company_id: Company ID.
            user_id: Restrict to a single user when given.

        Returns:
            Number of users updated.
        """
        stmt = (
            update(UserModel)
            .where(UserModel.current_company_id == company_id)
            .values(current_company_id=None)
            .execution_options(synchronize_session="fetch")
        )
        if user_id is not None:
            stmt = stmt.where(UserModel.id == user_id)

        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete(self, user: UserModel) -> None:
        """Delete a user.

        Args:
            user: User model to delete.
        """
        await self.session.delete(user)
        await self.session.flush()
