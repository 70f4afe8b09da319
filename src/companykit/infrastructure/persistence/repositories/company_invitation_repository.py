"""Company invitation repository for database operations."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from companykit.core.exceptions import ModelNotFoundError
from companykit.infrastructure.persistence.models import CompanyInvitationModel


class CompanyInvitationRepository:
    """Repository for company invitation database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, invitation: CompanyInvitationModel) -> CompanyInvitationModel:
        """Create a new invitation.

        Args:
            invitation: Invitation model to create.

        Returns:
            Created invitation model.
        """
        self.session.add(invitation)
        await self.session.flush()
        return invitation

    async def get_by_id(self, invitation_id: str) -> CompanyInvitationModel | None:
        """Get an invitation by ID.

        Args:
            invitation_id: Invitation ID (UUID string).

        Returns:
            Invitation model if found, None otherwise.
        """
        result = await self.session.execute(
            select(CompanyInvitationModel).where(CompanyInvitationModel.id == invitation_id)
        )
        return result.scalar_one_or_none()

    async def find_by_id_or_fail(self, invitation_id: str) -> CompanyInvitationModel:
        """Get an invitation by ID.

        Raises:
            ModelNotFoundError: If no invitation has the given ID.
        """
        invitation = await self.get_by_id(invitation_id)
        if invitation is None:
            raise ModelNotFoundError("CompanyInvitation", invitation_id)
        return invitation

    async def exists_for_email(self, company_id: str, email: str) -> bool:
        """Check if an invitation exists for an email in a company.

        Args:
            company_id: Company ID to check within.
            email: Email address to check (case-insensitive).

        Returns:
            True if an invitation exists, False otherwise.
        """
        result = await self.session.execute(
            select(CompanyInvitationModel.id)
            .where(
                CompanyInvitationModel.company_id == company_id,
                func.lower(CompanyInvitationModel.email) == email.lower(),
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def list_by_company(self, company_id: str) -> list[CompanyInvitationModel]:
        """List pending invitations of a company, ordered by email."""
        result = await self.session.execute(
            select(CompanyInvitationModel)
            .where(CompanyInvitationModel.company_id == company_id)
            .order_by(CompanyInvitationModel.email)
        )
        return list(result.scalars().all())

    async def delete_for_company(self, invitation_id: str, company_id: str) -> bool:
        """Delete an invitation, provided it belongs to the given company.

        Returns:
            True if the invitation was deleted, False if not found.
        """
        result = await self.session.execute(
            delete(CompanyInvitationModel)
            .where(
                CompanyInvitationModel.id == invitation_id,
                CompanyInvitationModel.company_id == company_id,
            )
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return result.rowcount > 0
