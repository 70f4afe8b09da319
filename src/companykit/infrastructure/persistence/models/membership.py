"""SQLAlchemy model for the company_user table.

A membership associates an employee with a company under a role key.
Owners have no membership row.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from companykit.infrastructure.persistence.database import Base


class MembershipModel(Base):
    """SQLAlchemy model for the company_user table.

    Attributes:
        id: Auto-incrementing primary key.
        company_id: Foreign key to companies table.
        user_id: Foreign key to users table.
        role: Role key from the RoleRegistry (nullable when no roles are defined).
    """

    __tablename__ = "company_user"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    company_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Foreign key to companies table",
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Foreign key to users table",
    )
    role: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        comment="Role key (e.g., 'admin', 'editor')",
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
    company: Mapped["CompanyModel"] = relationship(  # noqa: F821
        "CompanyModel",
        back_populates="memberships",
    )
    user: Mapped["UserModel"] = relationship(  # noqa: F821
        "UserModel",
        lazy="selectin",
    )

    __table_args__ = (
        UniqueConstraint("company_id", "user_id", name="uq_company_user"),
    )

    def __repr__(self) -> str:
        return (
            f"<Membership(company_id={self.company_id}, user_id={self.user_id}, "
            f"role={self.role})>"
        )
