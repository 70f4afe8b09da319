"""Domain services: queries, authorization and the company mutators."""

from companykit.domain.services.company_action import CompanyAction
from companykit.domain.services.company_employees import (
    AddCompanyEmployee,
    RemoveCompanyEmployee,
    UpdateCompanyEmployeeRole,
)
from companykit.domain.services.company_invitations import (
    AcceptCompanyInvitation,
    InviteCompanyEmployee,
)
from companykit.domain.services.company_lifecycle import (
    CreateCompany,
    CreatePersonalCompany,
    DeleteCompany,
    UpdateCompanyName,
)
from companykit.domain.services.company_policy import CompanyPolicy, Gate
from companykit.domain.services.delete_user import DeleteUser
from companykit.domain.services.input_validator import InputValidator
from companykit.domain.services.role_registry import RoleRegistry
from companykit.domain.services.user_companies import UserCompanies
from companykit.domain.services.validate_company_deletion import ValidateCompanyDeletion

__all__ = [
    "AcceptCompanyInvitation",
    "AddCompanyEmployee",
    "CompanyAction",
    "CompanyPolicy",
    "CreateCompany",
    "CreatePersonalCompany",
    "DeleteCompany",
    "DeleteUser",
    "Gate",
    "InputValidator",
    "InviteCompanyEmployee",
    "RemoveCompanyEmployee",
    "RoleRegistry",
    "UpdateCompanyEmployeeRole",
    "UpdateCompanyName",
    "UserCompanies",
    "ValidateCompanyDeletion",
]
