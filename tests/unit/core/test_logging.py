"""Tests for structured logging helpers."""

import pytest
import structlog
from structlog.testing import capture_logs

from companykit.core.config import Settings
from companykit.core.exceptions import AuthorizationError
from companykit.core.logging import (
    LoggingContext,
    add_correlation_id,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    rename_message_field,
)
from companykit.domain.services.role_registry import RoleRegistry
from companykit.domain.services.company_policy import CompanyPolicy, Gate
from companykit.domain.services.user_companies import UserCompanies


def test_add_correlation_id_keeps_bound_value():
    assert add_correlation_id(None, "info", {"correlation_id": "abc"}) == {"correlation_id": "abc"}
    assert add_correlation_id(None, "info", {})["correlation_id"].startswith("cid_")


def test_rename_message_field():
    assert rename_message_field(None, "info", {"event": "Hello"}) == {"message": "Hello"}


def test_logging_context_binds_and_unbinds():
    clear_context()

    with LoggingContext(company_id="c-1"):
        assert structlog.contextvars.get_contextvars() == {"company_id": "c-1"}

    assert structlog.contextvars.get_contextvars() == {}


def test_bind_correlation_id():
    bind_correlation_id("req-1")

    assert structlog.contextvars.get_contextvars()["correlation_id"] == "req-1"

    clear_context()
    assert structlog.contextvars.get_contextvars() == {}


def test_configure_logging_json():
    try:
        configure_logging(Settings(_env_file=None, environment="production", log_format="json"))

        assert structlog.is_configured()
        assert get_logger("companykit.test") is not None
    finally:
        structlog.reset_defaults()


@pytest.mark.asyncio
async def test_authorization_denial_is_logged(db_session, owner, employee, company):
    gate = Gate(CompanyPolicy(UserCompanies(db_session, RoleRegistry())))

    with capture_logs() as logs:
        assert await gate.check(employee, "delete", company) is False
        with pytest.raises(AuthorizationError):
            await gate.authorize(employee, "delete", company)

    denied = [entry for entry in logs if entry["event"] == "Authorization denied"]
    assert denied[0]["log_level"] == "warning"
    assert denied[0]["ability"] == "delete"
    assert denied[0]["user_id"] == employee.id
