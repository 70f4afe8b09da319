"""SQLAlchemy model for the company_invitations table.

An invitation is a pending request for someone, identified by email, to join
a company under a role.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from companykit.infrastructure.persistence.database import Base


class CompanyInvitationModel(Base):
    """SQLAlchemy model for the company_invitations table.

    Attributes:
        id: Primary key (UUID string).
        company_id: Foreign key to companies table.
        email: Email address of the invitee.
        role: Role key the invitee receives on acceptance.
        created_at: Timestamp when the invitation was created.
    """

    __tablename__ = "company_invitations"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Invitation ID (UUID)",
    )
    company_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Foreign key to companies table",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Email address of the invitee",
    )
    role: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        comment="Role key granted on acceptance",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )

    # Relationships
    company: Mapped["CompanyModel"] = relationship(  # noqa: F821
        "CompanyModel",
        back_populates="invitations",
    )

    __table_args__ = (
        UniqueConstraint("company_id", "email", name="uq_company_invitations_email"),
    )

    def __repr__(self) -> str:
        return f"<CompanyInvitation(id={self.id}, email={self.email}, company_id={self.company_id})>"
