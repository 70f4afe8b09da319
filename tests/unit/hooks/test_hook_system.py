"""Unit tests for the hook system.

Tests cover:
- Hook registration and unregistration
- Priority ordering
- Filter matching
- AbortHookException handling
- Error handling
"""

import pytest

from companykit.core.hooks import (
    EVENT_CATEGORIES,
    HookCategory,
    HookEvent,
    HookRegistry,
    get_all_events,
    is_after_event,
    is_before_event,
)
from companykit.domain.entities.hook_context import (
    AbortHookException,
    HookContext,
    HookResult,
)


class TestHookRegistry:
    """Tests for registering and unregistering hooks."""

    def test_register_returns_unique_ids(self) -> None:
        registry = HookRegistry()

        async def my_hook(event, data, context):
            return data

        hook_ids = [
            registry.register(HookEvent.ON_EMPLOYEE_AFTER_ADD, my_hook) for _ in range(10)
        ]

        assert len(set(hook_ids)) == 10
        assert all(hook_id.startswith("hook_") for hook_id in hook_ids)

    def test_register_with_filters_and_priority(self) -> None:
        registry = HookRegistry()

        async def my_hook(event, data, context):
            return data

        hook_id = registry.register(
            event=HookEvent.ON_EMPLOYEE_AFTER_ADD,
            callback=my_hook,
            filters={"company_id": "c-1"},
            priority=10,
        )

        hook = registry.get_hook_by_id(hook_id)
        assert hook.filters == {"company_id": "c-1"}
        assert hook.priority == 10
        assert registry.get_hooks_for_event(HookEvent.ON_EMPLOYEE_AFTER_ADD) == [hook]

    def test_unregister_removes_hook(self) -> None:
        registry = HookRegistry()

        async def my_hook(event, data, context):
            return data

        hook_id = registry.register(HookEvent.ON_COMPANY_AFTER_CREATE, my_hook)

        assert registry.unregister(hook_id) is True
        assert registry.get_hook_by_id(hook_id) is None
        assert registry.get_hooks_for_event(HookEvent.ON_COMPANY_AFTER_CREATE) == []

    def test_unregister_returns_false_for_unknown_id(self) -> None:
        registry = HookRegistry()

        assert registry.unregister("hook_nonexistent") is False

    def test_clear_returns_count(self) -> None:
        registry = HookRegistry()
        registry.register(HookEvent.ON_COMPANY_AFTER_CREATE, lambda e, d, c: d)
        registry.register(HookEvent.ON_COMPANY_AFTER_DELETE, lambda e, d, c: d)

        assert registry.clear() == 2
        assert registry.get_hooks_for_event(HookEvent.ON_COMPANY_AFTER_CREATE) == []


class TestHookRegistryTrigger:
    """Tests for HookRegistry.trigger()."""

    @pytest.mark.asyncio
    async def test_hooks_execute_in_priority_then_registration_order(self) -> None:
        registry = HookRegistry()
        execution_order = []

        def make_hook(name):
            async def hook(event, data, context):
                execution_order.append(name)
                return data

            return hook

        registry.register(HookEvent.ON_COMPANY_BEFORE_CREATE, make_hook("low"), priority=1)
        registry.register(HookEvent.ON_COMPANY_BEFORE_CREATE, make_hook("high"), priority=100)
        registry.register(HookEvent.ON_COMPANY_BEFORE_CREATE, make_hook("first"), priority=50)
        registry.register(HookEvent.ON_COMPANY_BEFORE_CREATE, make_hook("second"), priority=50)

        await registry.trigger(HookEvent.ON_COMPANY_BEFORE_CREATE, data={})

        assert execution_order == ["high", "first", "second", "low"]

    @pytest.mark.asyncio
    async def test_sync_callbacks_are_supported(self) -> None:
        registry = HookRegistry()

        def add_flag(event, data, context):
            return {**data, "seen": True}

        registry.register(HookEvent.ON_COMPANY_AFTER_UPDATE, add_flag)

        result = await registry.trigger(HookEvent.ON_COMPANY_AFTER_UPDATE, data={"a": 1})

        assert result.data == {"a": 1, "seen": True}

    @pytest.mark.asyncio
    async def test_hooks_can_chain_modified_data(self) -> None:
        registry = HookRegistry()

        async def first(event, data, context):
            return {**data, "first": True}

        async def second(event, data, context):
            assert data["first"] is True
            return {**data, "second": True}

        registry.register(HookEvent.ON_INVITATION_BEFORE_CREATE, first, priority=2)
        registry.register(HookEvent.ON_INVITATION_BEFORE_CREATE, second, priority=1)

        result = await registry.trigger(HookEvent.ON_INVITATION_BEFORE_CREATE, data={})

        assert result.data == {"first": True, "second": True}

    @pytest.mark.asyncio
    async def test_filters_limit_hooks_to_company(self) -> None:
        registry = HookRegistry()
        called = []

        async def hook(event, data, context):
            called.append(context.company_id)
            return data

        registry.register(HookEvent.ON_EMPLOYEE_AFTER_ADD, hook, filters={"company_id": "c-1"})

        await registry.trigger(
            HookEvent.ON_EMPLOYEE_AFTER_ADD,
            data={},
            context=HookContext(company_id="c-2"),
            filters={"company_id": "c-2"},
        )
        await registry.trigger(
            HookEvent.ON_EMPLOYEE_AFTER_ADD,
            data={},
            context=HookContext(company_id="c-1"),
            filters={"company_id": "c-1"},
        )

        assert called == ["c-1"]

    @pytest.mark.asyncio
    async def test_abort_stops_chain(self) -> None:
        registry = HookRegistry()
        executed = []

        async def veto(event, data, context):
            raise AbortHookException("Not today", status_code=409)

        async def later(event, data, context):
            executed.append("later")
            return data

        registry.register(HookEvent.ON_EMPLOYEE_BEFORE_ADD, veto, priority=10)
        registry.register(HookEvent.ON_EMPLOYEE_BEFORE_ADD, later)

        result = await registry.trigger(HookEvent.ON_EMPLOYEE_BEFORE_ADD, data={})

        assert result.aborted is True
        assert result.success is False
        assert result.abort_message == "Not today"
        assert result.abort_status_code == 409
        assert executed == []

    @pytest.mark.asyncio
    async def test_failing_hook_is_logged_and_skipped(self) -> None:
        registry = HookRegistry()
        executed = []

        async def broken(event, data, context):
            raise RuntimeError("boom")

        async def later(event, data, context):
            executed.append("later")
            return data

        registry.register(HookEvent.ON_COMPANY_AFTER_DELETE, broken, priority=10)
        registry.register(HookEvent.ON_COMPANY_AFTER_DELETE, later)

        result = await registry.trigger(HookEvent.ON_COMPANY_AFTER_DELETE, data={})

        assert result.success is True
        assert len(result.errors) == 1
        assert "boom" in result.errors[0]
        assert executed == ["later"]

    @pytest.mark.asyncio
    async def test_stop_on_error_halts_chain(self) -> None:
        registry = HookRegistry()
        executed = []

        async def broken(event, data, context):
            raise RuntimeError("boom")

        async def later(event, data, context):
            executed.append("later")
            return data

        registry.register(HookEvent.ON_COMPANY_AFTER_DELETE, broken, priority=10, stop_on_error=True)
        registry.register(HookEvent.ON_COMPANY_AFTER_DELETE, later)

        result = await registry.trigger(HookEvent.ON_COMPANY_AFTER_DELETE, data={})

        assert result.success is False
        assert executed == []

    @pytest.mark.asyncio
    async def test_trigger_without_hooks_returns_data(self) -> None:
        registry = HookRegistry()

        result = await registry.trigger(HookEvent.ON_USER_AFTER_DELETE, data={"user_id": "u"})

        assert result == HookResult(success=True, data={"user_id": "u"})


class TestHookEvents:
    def test_every_event_has_a_category(self) -> None:
        assert set(get_all_events()) == set(EVENT_CATEGORIES)
        assert EVENT_CATEGORIES[HookEvent.ON_INVITATION_AFTER_CREATE] == (
            HookCategory.INVITATION_OPERATIONS
        )

    def test_before_and_after_events(self) -> None:
        assert is_before_event(HookEvent.ON_COMPANY_BEFORE_DELETE) is True
        assert is_after_event(HookEvent.ON_COMPANY_BEFORE_DELETE) is False
        assert is_after_event(HookEvent.ON_EMPLOYEE_AFTER_REMOVE) is True

    def test_hook_context_generates_request_id(self) -> None:
        context = HookContext(company_id="c-1")

        assert context.request_id.startswith("hk_")
        assert context.user is None
