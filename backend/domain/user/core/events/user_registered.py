"""UserRegistered domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
import uuid

from domain.shared.events import DomainEvent
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserRegistered(DomainEvent):
    """Domain event: a new user registered.

    Emitted by `User.register()`; published once the user and its
    account details are both persisted.

    Examples:
        >>> event = UserRegistered.create(UserId.generate(), Email("ada@example.com"))
        >>> event.email.value
        'ada@example.com'
    """

    user_id: UserId
    email: Email

    @classmethod
    def create(
        cls, user_id: UserId, email: Email, occurred_at: Optional[datetime] = None
    ) -> "UserRegistered":
        return cls(
            event_id=str(uuid.uuid4()),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            user_id=user_id,
            email=email,
        )
