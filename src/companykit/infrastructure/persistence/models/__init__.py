"""SQLAlchemy models for companykit tables.

All models inherit from the Base class defined in database.py.
"""

from companykit.infrastructure.persistence.models.company import CompanyModel
from companykit.infrastructure.persistence.models.company_invitation import (
    CompanyInvitationModel,
)
from companykit.infrastructure.persistence.models.membership import MembershipModel
from companykit.infrastructure.persistence.models.user import UserModel

__all__ = [
    "CompanyInvitationModel",
    "CompanyModel",
    "MembershipModel",
    "UserModel",
]
