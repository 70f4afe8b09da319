"""Contracts for the actions that change companies and their employees.

Hosts can swap any default implementation (see domain.services) for their
own by subclassing the matching contract and handing it to the component.
Implementations authorize the acting user themselves.
"""

from abc import ABC, abstractmethod

from companykit.infrastructure.persistence.models import (
    CompanyInvitationModel,
    CompanyModel,
    UserModel,
)


class CreatesCompanies(ABC):
    @abstractmethod
    async def create(self, user: UserModel, name: str) -> CompanyModel:
        """Create a company owned by the user."""
        ...


class UpdatesCompanyNames(ABC):
    @abstractmethod
    async def update(self, user: UserModel, company: CompanyModel, name: str) -> CompanyModel:
        """Rename a company."""
        ...


class DeletesCompanies(ABC):
    @abstractmethod
    async def delete(self, company: CompanyModel) -> None:
        """Delete a company and everything attached to it."""
        ...


class AddsCompanyEmployees(ABC):
    @abstractmethod
    async def add(
        self, user: UserModel, company: CompanyModel, email: str, role: str | None = None
    ) -> None:
        """Add a registered user to a company."""
        ...


class InvitesCompanyEmployees(ABC):
    @abstractmethod
    async def invite(
        self, user: UserModel, company: CompanyModel, email: str, role: str | None = None
    ) -> CompanyInvitationModel:
        """Invite someone to a company by email."""
        ...


class UpdatesCompanyEmployeeRoles(ABC):
    @abstractmethod
    async def update(
        self, user: UserModel, company: CompanyModel, employee_id: str, role: str | None
    ) -> None:
        """Change an employee's role."""
        ...


class RemovesCompanyEmployees(ABC):
    @abstractmethod
    async def remove(
        self, user: UserModel, company: CompanyModel, employee: UserModel
    ) -> None:
        """Remove an employee from a company."""
        ...


class DeletesUsers(ABC):
    @abstractmethod
    async def delete(self, user: UserModel) -> None:
        """Delete a user, their owned companies and their memberships."""
        ...
