"""User registered event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.user_registered import UserRegistered


logger = logging.getLogger(__name__)


@dataclass
class UserRegisteredHandler:
    """Handler for UserRegistered domain event.

    Triggered after the user and its account details were persisted.

    Examples:
        >>> handler = UserRegisteredHandler()
        >>> await handler.handle(UserRegistered.create(...))
    """

    async def handle(self, event: UserRegistered) -> None:
        logger.info(
            "User registered",
            extra={
                "event_id": event.event_id,
                "user_id": str(event.user_id),
                "email_domain": event.email.domain,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )
