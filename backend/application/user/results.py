"""Result types returned by user commands."""

from dataclasses import dataclass
from typing import Optional

from domain.user.core.entities.account_details import AccountDetails
from domain.user.core.entities.user import User


@dataclass(frozen=True)
class AuthResult:
    """User plus its companion record.

    account_details is always set after registration; on login it is None
    when the companion record is missing.
    """

    user: User
    account_details: Optional[AccountDetails]
