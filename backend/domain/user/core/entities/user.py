"""User entity - aggregate root."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List, Any

from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.password_hash import PasswordHash
from domain.user.core.value_objects.user_profile import UserProfile


@dataclass
class User:
    """User aggregate root.

    Represents a registered account holder. Lookup key for login is the
    email; the user_id is shared with the AccountDetails companion.

    Invariants:
    - email is unique (enforced by the repository) and normalized
    - password is only ever held as a PasswordHash
    - created_at and updated_at are timezone-aware
    - updated_at cannot be before created_at

    Examples:
        >>> user = User.register(Email("ada@example.com"), PasswordHash("$2b$12$..."))
        >>> user.email.value
        'ada@example.com'
        >>> len(user.collect_events())
        1
    """

    user_id: UserId
    email: Email
    password_hash: PasswordHash
    profile: UserProfile
    created_at: datetime
    updated_at: datetime
    _events: List[Any] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.created_at.tzinfo is None or self.updated_at.tzinfo is None:
            raise ValueError("User timestamps must be timezone-aware (use UTC)")

        if self.updated_at < self.created_at:
            raise ValueError(
                "updated_at cannot be before created_at: "
                f"{self.updated_at} < {self.created_at}"
            )

    @staticmethod
    def register(
        email: Email,
        password_hash: PasswordHash,
        profile: Optional[UserProfile] = None,
    ) -> "User":
        """Factory method to create a newly registered user.

        Args:
            email: Normalized email address
            password_hash: Hash of the plaintext password
            profile: Optional profile fields (defaults to empty)

        Returns:
            New User instance with UserRegistered event
        """
        from domain.user.core.events.user_registered import UserRegistered

        now = datetime.now(timezone.utc)
        user_id = UserId.generate()

        user = User(
            user_id=user_id,
            email=email,
            password_hash=password_hash,
            profile=profile or UserProfile.empty(),
            created_at=now,
            updated_at=now,
        )

        user._add_event(UserRegistered.create(user_id, email, occurred_at=now))

        return user

    def record_login(self, logged_in_at: Optional[datetime] = None) -> None:
        """Record a successful credential check.

        Only emits UserLoggedIn; login does not change persisted state.
        """
        from domain.user.core.events.user_logged_in import UserLoggedIn

        self._add_event(UserLoggedIn.create(self.user_id, self.email, occurred_at=logged_in_at))

    def _add_event(self, event: Any) -> None:
        self._events.append(event)

    def collect_events(self) -> List[Any]:
        """Collect and clear domain events.

        Returns:
            List of domain events that occurred

        Examples:
            >>> events = user.collect_events()
            >>> user.collect_events()  # Events cleared after collection
            []
        """
        events = self._events.copy()
        self._events.clear()
        return events

    def __eq__(self, other: object) -> bool:
        """Equality based on user_id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        return hash(self.user_id)
