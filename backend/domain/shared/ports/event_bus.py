"""Event bus port (interface).

Defines contract for event publishing and subscription.
Follows the Dependency Inversion Principle: domain defines the port,
infrastructure provides the implementation.
"""

from typing import Protocol, Callable, Awaitable, Type, TypeVar

from domain.shared.events import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)

EventHandler = Callable[[TEvent], Awaitable[None]]


class IEventBus(Protocol):
    """
    Interface for event publishing and subscription.

    Example usage (application layer):
        >>> async def on_registered(event: UserRegistered) -> None:
        ...     print(f"User {event.user_id} registered")
        ...
        >>> event_bus.subscribe(UserRegistered, on_registered)
        >>> await event_bus.publish(UserRegistered.create(user_id, email))
    """

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> None:
        """Subscribe a handler to an event type."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribed handlers.

        Note:
            Implementations must not propagate handler failures.
        """
        ...
