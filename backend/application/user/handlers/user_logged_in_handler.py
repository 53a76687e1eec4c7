"""User logged in event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.user_logged_in import UserLoggedIn


logger = logging.getLogger(__name__)


@dataclass
class UserLoggedInHandler:
    """Handler for UserLoggedIn domain event."""

    async def handle(self, event: UserLoggedIn) -> None:
        logger.info(
            "User logged in",
            extra={
                "event_id": event.event_id,
                "user_id": str(event.user_id),
                "occurred_at": event.occurred_at.isoformat(),
            },
        )
