"""Shared test fixtures.

Unit tests build commands on in-memory repositories and a low-cost
bcrypt hasher; integration tests additionally load the FastAPI app.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env.test if present (never the production .env)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

# Tests always run on the in-memory backend with cheap hashing
os.environ["USER_REPOSITORY"] = "inmemory"
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from application.user.commands.login_user import LoginUserCommand  # noqa: E402
from application.user.commands.register_user import (  # noqa: E402
    RegisterUserCommand,
    RegisterUserInput,
)
from infrastructure.events.in_memory_bus import InMemoryEventBus  # noqa: E402
from infrastructure.user.bcrypt_password_hasher import BcryptPasswordHasher  # noqa: E402
from infrastructure.user.in_memory_account_details_repository import (  # noqa: E402
    InMemoryAccountDetailsRepository,
)
from infrastructure.user.in_memory_user_repository import (  # noqa: E402
    InMemoryUserRepository,
)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Create in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def account_details_repository() -> InMemoryAccountDetailsRepository:
    """Create in-memory account details repository."""
    return InMemoryAccountDetailsRepository()


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """bcrypt hasher with the minimum cost factor."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def register_command(
    user_repository, account_details_repository, password_hasher, event_bus
) -> RegisterUserCommand:
    return RegisterUserCommand(
        user_repository=user_repository,
        account_details_repository=account_details_repository,
        password_hasher=password_hasher,
        event_bus=event_bus,
    )


@pytest.fixture
def login_command(
    user_repository, account_details_repository, password_hasher, event_bus
) -> LoginUserCommand:
    return LoginUserCommand(
        user_repository=user_repository,
        account_details_repository=account_details_repository,
        password_hasher=password_hasher,
        event_bus=event_bus,
    )


@pytest.fixture
def registration() -> RegisterUserInput:
    """Valid registration payload."""
    return RegisterUserInput(
        email="Ada@Example.com",
        password="correct horse battery staple",
        profile={"first_name": "Ada", "last_name": "Lovelace"},
    )
