"""Guard run before a company is deleted."""

from typing import Callable

from companykit.core.exceptions import ValidationError
from companykit.core.translation import default_translator
from companykit.domain.services.company_policy import Gate
from companykit.infrastructure.persistence.models import CompanyModel, UserModel


class ValidateCompanyDeletion:
    """Validate that the company can be deleted by the given user.

    Authorization is checked first; a personal company is never deletable,
    whoever asks. Nothing is deleted here.
    """

    ERROR_BAG = "deleteCompany"

    def __init__(
        self,
        gate: Gate,
        translator: Callable[..., str | None] = default_translator,
    ) -> None:
        self.gate = gate
        self.translate = translator

    async def validate(self, user: UserModel, company: CompanyModel) -> None:
        """Validate the deletion.

        Raises:
            AuthorizationError: If the user may not delete the company.
            ValidationError: If the company is the owner's personal company.
        """
        await self.gate.authorize(user, "delete", company)

        if company.personal_company:
            raise ValidationError.with_messages(
                {"company": self.translate("You may not delete your personal company.")},
                error_bag=self.ERROR_BAG,
            )
