"""Authorization for company abilities.

CompanyPolicy decides each ability; Gate resolves an ability name to the
policy method and turns a denial into an AuthorizationError.
"""

from companykit.core.exceptions import AuthorizationError
from companykit.core.logging import get_logger
from companykit.domain.services.user_companies import UserCompanies
from companykit.infrastructure.persistence.models import CompanyModel, UserModel

logger = get_logger(__name__)


class CompanyPolicy:
    """Which users may do what with a company.

    Anyone may list and create companies, employees may view theirs, and
    only the owner may change or delete it or manage its employees.
    """

    def __init__(self, companies: UserCompanies) -> None:
        self.companies = companies

    async def view_any(self, user: UserModel, company: CompanyModel | None = None) -> bool:
        return True

    async def view(self, user: UserModel, company: CompanyModel) -> bool:
        return await self.companies.belongs_to_company(user, company)

    async def create(self, user: UserModel, company: CompanyModel | None = None) -> bool:
        return True

    async def update(self, user: UserModel, company: CompanyModel) -> bool:
        return self.companies.owns_company(user, company)

    async def add_company_employee(self, user: UserModel, company: CompanyModel) -> bool:
        return self.companies.owns_company(user, company)

    async def update_company_employee(self, user: UserModel, company: CompanyModel) -> bool:
        return self.companies.owns_company(user, company)

    async def remove_company_employee(self, user: UserModel, company: CompanyModel) -> bool:
        return self.companies.owns_company(user, company)

    async def delete(self, user: UserModel, company: CompanyModel) -> bool:
        return self.companies.owns_company(user, company)


class Gate:
    """Check and enforce company abilities for a user.

    Example:
        gate = Gate(CompanyPolicy(UserCompanies(session)))
        await gate.authorize(user, "delete", company)
    """

    ABILITIES = frozenset(
        {
            "view_any",
            "view",
            "create",
            "update",
            "add_company_employee",
            "update_company_employee",
            "remove_company_employee",
            "delete",
        }
    )

    def __init__(self, policy: CompanyPolicy) -> None:
        self.policy = policy

    async def check(
        self, user: UserModel, ability: str, company: CompanyModel | None = None
    ) -> bool:
        """Whether the user has the ability. Unknown abilities are denied."""
        if ability not in self.ABILITIES:
            logger.warning("Unknown ability checked", ability=ability, user_id=user.id)
            return False

        return bool(await getattr(self.policy, ability)(user, company))

    async def authorize(
        self, user: UserModel, ability: str, company: CompanyModel | None = None
    ) -> None:
        """Require the ability.

        Raises:
            AuthorizationError: If the user lacks the ability.
        """
        if await self.check(user, ability, company):
            return

        logger.warning(
            "Authorization denied",
            ability=ability,
            user_id=user.id,
            company_id=company.id if company is not None else None,
        )
        raise AuthorizationError(ability=ability)
