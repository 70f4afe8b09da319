"""SQLAlchemy model for the users table.

Users may own companies and belong to others as employees. The company a
user is currently working in is tracked on the user row.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from companykit.infrastructure.persistence.database import Base


class UserModel(Base):
    """SQLAlchemy model for the users table.

    Attributes:
        id: Primary key (UUID string).
        name: Display name.
        email: Email address, unique across users.
        current_company_id: Company the user is currently working in.
        created_at: Timestamp when the user was created.
        updated_at: Timestamp when the user was last updated.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="User ID (UUID)",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address",
    )
    # Plain column: users and companies reference each other
    current_company_id: Mapped[str | None] = mapped_column(
        String(36),
        nullable=True,
        index=True,
        comment="Company the user is currently working in",
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

    @property
    def first_name(self) -> str:
        """First word of the user's name."""
        return self.name.strip().split(" ", 1)[0]

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
