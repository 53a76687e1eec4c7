"""UserLoggedIn domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
import uuid

from domain.shared.events import DomainEvent
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserLoggedIn(DomainEvent):
    """Domain event: a user presented valid credentials."""

    user_id: UserId
    email: Email

    @classmethod
    def create(
        cls, user_id: UserId, email: Email, occurred_at: Optional[datetime] = None
    ) -> "UserLoggedIn":
        return cls(
            event_id=str(uuid.uuid4()),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            user_id=user_id,
            email=email,
        )
