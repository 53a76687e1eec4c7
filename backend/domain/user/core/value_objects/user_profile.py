"""UserProfile value object."""

import json
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class UserProfile:
    """Opaque profile fields sent at registration.

    Holds whatever the client submits besides email and password
    (names, phone, locale, ...). Immutable - use `with_value()` to
    create modified copies.

    Examples:
        >>> profile = UserProfile.empty()
        >>> profile.data
        {}

        >>> profile = UserProfile(data={"first_name": "Ada", "last_name": "Lovelace"})
        >>> profile.get("first_name")
        'Ada'

        >>> profile.with_value("phone", "+39 000").data["phone"]
        '+39 000'
    """

    data: Dict[str, Any]

    def __post_init__(self) -> None:
        """Validate profile data."""
        if not isinstance(self.data, dict):
            raise TypeError("Profile data must be a dictionary")

        try:
            json.dumps(self.data)
        except (TypeError, ValueError) as e:
            raise ValueError("Profile data must be JSON-serializable") from e

    @staticmethod
    def empty() -> "UserProfile":
        return UserProfile(data={})

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def with_value(self, key: str, value: Any) -> "UserProfile":
        """Return new profile with updated value (immutable)."""
        new_data = self.data.copy()
        new_data[key] = value
        return UserProfile(data=new_data)

    def with_values(self, updates: Dict[str, Any]) -> "UserProfile":
        """Return new profile with multiple updated values."""
        new_data = self.data.copy()
        new_data.update(updates)
        return UserProfile(data=new_data)

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def __len__(self) -> int:
        return len(self.data)
