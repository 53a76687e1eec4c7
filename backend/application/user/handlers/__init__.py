"""User event handlers."""

from application.user.handlers.user_logged_in_handler import UserLoggedInHandler
from application.user.handlers.user_registered_handler import UserRegisteredHandler
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.events.user_logged_in import UserLoggedIn
from domain.user.core.events.user_registered import UserRegistered


def register_user_handlers(event_bus: IEventBus) -> None:
    """Subscribe the user event handlers to the bus."""
    event_bus.subscribe(UserRegistered, UserRegisteredHandler().handle)
    event_bus.subscribe(UserLoggedIn, UserLoggedInHandler().handle)


__all__ = [
    "UserLoggedInHandler",
    "UserRegisteredHandler",
    "register_user_handlers",
]
