"""AccountDetails entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, TYPE_CHECKING

from domain.user.core.value_objects.user_id import UserId

if TYPE_CHECKING:
    from domain.user.core.entities.user import User


@dataclass
class AccountDetails:
    """Companion record of a User.

    One per user, keyed by the same UserId. Created right after the user
    during registration and never on its own. Its content starts empty
    and is owned by other parts of the system.
    """

    user_id: UserId
    created_at: datetime
    updated_at: datetime
    data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.created_at.tzinfo is None or self.updated_at.tzinfo is None:
            raise ValueError("AccountDetails timestamps must be timezone-aware (use UTC)")

        if not isinstance(self.data, dict):
            raise TypeError("AccountDetails data must be a dictionary")

    @staticmethod
    def for_user(user: "User") -> "AccountDetails":
        """Create the empty companion record for a freshly registered user."""
        now = datetime.now(timezone.utc)
        return AccountDetails(user_id=user.user_id, created_at=now, updated_at=now)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AccountDetails):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        return hash(self.user_id)
