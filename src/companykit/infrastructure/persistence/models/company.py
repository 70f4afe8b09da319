"""SQLAlchemy model for the companies table.

Companies are the tenants. Every user gets a personal company when they
register; further companies can be created and shared with employees.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from companykit.infrastructure.persistence.database import Base


class CompanyModel(Base):
    """SQLAlchemy model for the companies table.

    The owner, memberships (with their users) and pending invitations are
    eagerly loaded so a fetched company is a complete aggregate.

    Attributes:
        id: Primary key (UUID string).
        user_id: Foreign key to the owning user.
        name: Display name for the company.
        personal_company: Whether this is the owner's auto-created company.
        created_at: Timestamp when the company was created.
        updated_at: Timestamp when the company was last updated.
    """

    __tablename__ = "companies"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Company ID (UUID)",
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
        comment="Foreign key to the owning user",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name for the company",
    )
    personal_company: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Whether this is the owner's personal company",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    owner: Mapped["UserModel"] = relationship(  # noqa: F821
        "UserModel",
        lazy="selectin",
    )
    memberships: Mapped[list["MembershipModel"]] = relationship(  # noqa: F821
        "MembershipModel",
        back_populates="company",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="MembershipModel.id",
    )
    invitations: Mapped[list["CompanyInvitationModel"]] = relationship(  # noqa: F821
        "CompanyInvitationModel",
        back_populates="company",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="CompanyInvitationModel.email",
    )

    @property
    def employees(self) -> list["UserModel"]:  # noqa: F821
        """Users holding a membership, in the order they joined."""
        return [membership.user for membership in self.memberships]

    def membership_for(self, user_id: str) -> "MembershipModel | None":  # noqa: F821
        """Get the membership row of a user, if any."""
        for membership in self.memberships:
            if membership.user_id == user_id:
                return membership
        return None

    def has_user_with_email(self, email: str) -> bool:
        """Whether the owner or an employee uses the given email."""
        email = email.lower()
        if self.owner is not None and self.owner.email.lower() == email:
            return True
        return any(user.email.lower() == email for user in self.employees)

    def __repr__(self) -> str:
        return f"<Company(id={self.id}, name={self.name})>"
