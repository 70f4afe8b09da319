"""Persistence repositories for database operations."""

from companykit.infrastructure.persistence.repositories.company_invitation_repository import (
    CompanyInvitationRepository,
)
from companykit.infrastructure.persistence.repositories.company_repository import (
    CompanyRepository,
)
from companykit.infrastructure.persistence.repositories.membership_repository import (
    MembershipRepository,
)
from companykit.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "CompanyInvitationRepository",
    "CompanyRepository",
    "MembershipRepository",
    "UserRepository",
]
