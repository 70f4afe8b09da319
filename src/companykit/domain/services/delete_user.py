"""Deleting a user together with the companies they own."""

from companykit.core.hooks import HookEvent
from companykit.core.logging import get_logger
from companykit.domain.contracts import DeletesCompanies, DeletesUsers
from companykit.domain.services.company_action import CompanyAction
from companykit.domain.services.company_lifecycle import DeleteCompany
from companykit.infrastructure.persistence.models import UserModel

logger = get_logger(__name__)


class DeleteUser(CompanyAction, DeletesUsers):
    """Detach a user from every company, purge the companies they own, delete them."""

    def __init__(
        self, session, *, deleter: DeletesCompanies | None = None, **kwargs
    ) -> None:
        super().__init__(session, **kwargs)
        self.deleter = deleter or DeleteCompany(session, **self.collaborators())

    async def delete(self, user: UserModel) -> None:
        user_id = user.id

        detached = await self.membership_repo.delete_for_user(user_id)

        owned = await self.companies.owned_companies(user)
        for company in owned:
            await self.deleter.delete(company)

        await self.user_repo.delete(user)

        logger.info(
            "User deleted",
            user_id=user_id,
            memberships_removed=detached,
            companies_deleted=len(owned),
        )

        await self.dispatch(HookEvent.ON_USER_AFTER_DELETE, {"user_id": user_id})
