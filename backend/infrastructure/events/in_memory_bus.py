"""In-memory event bus implementation.

Provides an in-memory implementation of IEventBus port for tests and single
process deployments. Handlers are stored in memory and awaited in
subscription order.
"""

import logging
from typing import Dict, List, Type, TypeVar, Callable, Awaitable, Any

from domain.shared.events import DomainEvent

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)


def _handler_name(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__qualname__", None) or getattr(handler, "__name__", repr(handler))


class InMemoryEventBus:
    """
    In-memory implementation of IEventBus port.

    Thread safety: NOT thread-safe (single event loop only)
    Persistence: Handlers lost on process restart (in-memory only)
    Error handling: Failed handlers log errors but don't prevent other handlers

    Example:
        >>> bus = InMemoryEventBus()
        >>>
        >>> async def log_event(event: UserRegistered) -> None:
        ...     print(f"User registered: {event.user_id}")
        >>>
        >>> bus.subscribe(UserRegistered, log_event)
        >>> await bus.publish(UserRegistered.create(user_id, email))
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[Callable[[Any], Awaitable[None]]]] = {}

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> None:
        """
        Subscribe a handler to an event type.

        Note:
            - Same handler can be subscribed multiple times (will be called multiple times)
            - Handlers are called in subscription order
        """
        self._handlers.setdefault(event_type, []).append(handler)

        logger.debug(
            "Handler subscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": _handler_name(handler),
            },
        )

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish an event to all subscribed handlers.

        Note:
            - Handlers are called in subscription order
            - If a handler fails, it logs an error but other handlers still execute
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            logger.debug(
                "No handlers for event",
                extra={"event_type": event_type.__name__},
            )
            return

        logger.debug(
            "Publishing event",
            extra={
                "event_type": event_type.__name__,
                "event_id": event.event_id,
                "handler_count": len(handlers),
            },
        )

        for handler in list(handlers):
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "Event handler failed",
                    extra={
                        "event_type": event_type.__name__,
                        "event_id": event.event_id,
                        "handler": _handler_name(handler),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> bool:
        """
        Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise
        """
        handlers = self._handlers.get(event_type)
        if not handlers:
            return False

        try:
            handlers.remove(handler)
        except ValueError:
            return False

        logger.debug(
            "Handler unsubscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": _handler_name(handler),
            },
        )
        return True

    def clear(self) -> None:
        """Remove all handlers (test utility)."""
        self._handlers.clear()

    def get_handler_count(self, event_type: Type[DomainEvent]) -> int:
        return len(self._handlers.get(event_type, []))
