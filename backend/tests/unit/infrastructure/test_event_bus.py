"""Unit tests for InMemoryEventBus.

Tests focus on:
- Handler subscription and unsubscription
- Event publishing to handlers in subscription order
- Error handling (failed handlers don't block others)
"""

import logging
from typing import List

import pytest

from domain.user.core.events.user_logged_in import UserLoggedIn
from domain.user.core.events.user_registered import UserRegistered
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.user_id import UserId
from infrastructure.events.in_memory_bus import InMemoryEventBus


@pytest.fixture
def registered_event() -> UserRegistered:
    return UserRegistered.create(UserId.generate(), Email("ada@example.com"))


class TestSubscribe:
    def test_init_has_no_handlers(self, event_bus: InMemoryEventBus) -> None:
        assert event_bus.get_handler_count(UserRegistered) == 0

    def test_subscribe_counts_per_event_type(self, event_bus: InMemoryEventBus) -> None:
        async def handler(event: UserRegistered) -> None:
            pass

        event_bus.subscribe(UserRegistered, handler)

        assert event_bus.get_handler_count(UserRegistered) == 1
        assert event_bus.get_handler_count(UserLoggedIn) == 0

    def test_unsubscribe(self, event_bus: InMemoryEventBus) -> None:
        async def handler(event: UserRegistered) -> None:
            pass

        event_bus.subscribe(UserRegistered, handler)

        assert event_bus.unsubscribe(UserRegistered, handler) is True
        assert event_bus.unsubscribe(UserRegistered, handler) is False
        assert event_bus.get_handler_count(UserRegistered) == 0

    def test_clear(self, event_bus: InMemoryEventBus) -> None:
        async def handler(event: UserRegistered) -> None:
            pass

        event_bus.subscribe(UserRegistered, handler)
        event_bus.clear()

        assert event_bus.get_handler_count(UserRegistered) == 0


class TestPublish:
    @pytest.mark.asyncio
    async def test_publish_without_handlers_is_noop(
        self, event_bus: InMemoryEventBus, registered_event: UserRegistered
    ) -> None:
        await event_bus.publish(registered_event)

    @pytest.mark.asyncio
    async def test_handlers_called_in_order(
        self, event_bus: InMemoryEventBus, registered_event: UserRegistered
    ) -> None:
        calls: List[str] = []

        async def first(event: UserRegistered) -> None:
            calls.append("first")

        async def second(event: UserRegistered) -> None:
            calls.append("second")

        event_bus.subscribe(UserRegistered, first)
        event_bus.subscribe(UserRegistered, second)

        await event_bus.publish(registered_event)

        assert calls == ["first", "second"]

    @pytest.mark.asyncio
    async def test_only_matching_type_receives(
        self, event_bus: InMemoryEventBus, registered_event: UserRegistered
    ) -> None:
        calls: List[str] = []

        async def on_login(event: UserLoggedIn) -> None:
            calls.append("login")

        event_bus.subscribe(UserLoggedIn, on_login)

        await event_bus.publish(registered_event)

        assert calls == []

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_block_others(
        self,
        event_bus: InMemoryEventBus,
        registered_event: UserRegistered,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        calls: List[str] = []

        async def broken(event: UserRegistered) -> None:
            raise RuntimeError("handler exploded")

        async def healthy(event: UserRegistered) -> None:
            calls.append("healthy")

        event_bus.subscribe(UserRegistered, broken)
        event_bus.subscribe(UserRegistered, healthy)

        with caplog.at_level(logging.ERROR):
            await event_bus.publish(registered_event)

        assert calls == ["healthy"]
        assert any(r.getMessage() == "Event handler failed" for r in caplog.records)
