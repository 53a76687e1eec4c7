"""Tests for login user command."""

import logging
from unittest.mock import AsyncMock

import pytest

from application.errors import ApiError, ErrorKind
from application.user.commands.login_user import (
    INCORRECT_PASSWORD_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
    LoginUserCommand,
)
from domain.user.core.events.user_logged_in import UserLoggedIn
from infrastructure.user.bcrypt_password_hasher import BcryptPasswordHasher


@pytest.fixture
async def registered(register_command, registration):
    """A user registered through the real command."""
    return await register_command.execute(registration)


@pytest.mark.asyncio
async def test_login_returns_user_and_account_details(login_command, registered, registration):
    result = await login_command.execute("ada@example.com", registration.password)

    assert result.user == registered.user
    assert result.account_details == registered.account_details


@pytest.mark.asyncio
async def test_login_normalizes_email(login_command, registered, registration):
    result = await login_command.execute("  ADA@Example.com", registration.password)

    assert result.user.user_id == registered.user.user_id


@pytest.mark.asyncio
async def test_unknown_email_is_not_found(login_command):
    with pytest.raises(ApiError) as exc_info:
        await login_command.execute("nobody@example.com", "pw")

    assert exc_info.value.kind is ErrorKind.NOT_FOUND
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == USER_NOT_FOUND_MESSAGE


@pytest.mark.asyncio
async def test_malformed_email_is_not_found(login_command):
    with pytest.raises(ApiError) as exc_info:
        await login_command.execute("not-an-email", "pw")

    assert exc_info.value.kind is ErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_wrong_password_is_unauthorized(login_command, registered):
    with pytest.raises(ApiError) as exc_info:
        await login_command.execute("ada@example.com", "wrong password")

    assert exc_info.value.kind is ErrorKind.UNAUTHORIZED
    assert exc_info.value.status_code == 401
    assert exc_info.value.message == INCORRECT_PASSWORD_MESSAGE


@pytest.mark.asyncio
async def test_empty_password_is_unauthorized(login_command, registered):
    with pytest.raises(ApiError) as exc_info:
        await login_command.execute("ada@example.com", "")

    assert exc_info.value.kind is ErrorKind.UNAUTHORIZED


@pytest.mark.asyncio
async def test_missing_account_details_is_not_an_error(
    user_repository, password_hasher, registered, registration
):
    details = AsyncMock()
    details.find_by_user_id.return_value = None
    command = LoginUserCommand(user_repository, details, password_hasher)

    result = await command.execute("ada@example.com", registration.password)

    assert result.user.user_id == registered.user.user_id
    assert result.account_details is None


@pytest.mark.asyncio
async def test_repository_failure_is_internal(account_details_repository, password_hasher):
    repository = AsyncMock()
    repository.find_by_email.side_effect = ConnectionError("mongo down")
    command = LoginUserCommand(repository, account_details_repository, password_hasher)

    with pytest.raises(ApiError) as exc_info:
        await command.execute("ada@example.com", "pw")

    assert exc_info.value.kind is ErrorKind.INTERNAL
    assert exc_info.value.message == "Failed to login user, mongo down"


@pytest.mark.asyncio
async def test_login_publishes_logged_in_event(login_command, registered, registration, event_bus):
    received = []

    async def capture(event: UserLoggedIn) -> None:
        received.append(event)

    event_bus.subscribe(UserLoggedIn, capture)

    await login_command.execute("ada@example.com", registration.password)

    assert len(received) == 1
    assert received[0].user_id == registered.user.user_id


@pytest.mark.asyncio
async def test_failed_login_publishes_nothing(login_command, registered, event_bus):
    received = []

    async def capture(event: UserLoggedIn) -> None:
        received.append(event)

    event_bus.subscribe(UserLoggedIn, capture)

    with pytest.raises(ApiError):
        await login_command.execute("ada@example.com", "wrong")

    assert received == []


@pytest.mark.asyncio
async def test_login_flags_weak_hash_for_rehash(
    user_repository, account_details_repository, registered, registration, caplog
):
    stronger = BcryptPasswordHasher(rounds=5)
    command = LoginUserCommand(user_repository, account_details_repository, stronger)

    with caplog.at_level(logging.INFO):
        result = await command.execute("ada@example.com", registration.password)

    assert result.user.user_id == registered.user.user_id
    record = next(r for r in caplog.records if r.getMessage() == "password_hash.needs_rehash")
    assert record.user_id == str(registered.user.user_id)


@pytest.mark.asyncio
async def test_login_with_current_cost_does_not_flag_rehash(
    login_command, registered, registration, caplog
):
    with caplog.at_level(logging.INFO):
        await login_command.execute("ada@example.com", registration.password)

    assert not any(r.getMessage() == "password_hash.needs_rehash" for r in caplog.records)
