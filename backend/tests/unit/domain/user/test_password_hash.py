"""Unit tests for PasswordHash value object."""

import pytest

from domain.user.core.value_objects.password_hash import PasswordHash


def test_password_hash_keeps_value():
    hashed = PasswordHash("$2b$04$abcdefghijklmnopqrstuv")

    assert hashed.value == "$2b$04$abcdefghijklmnopqrstuv"
    assert str(hashed) == "$2b$04$abcdefghijklmnopqrstuv"


def test_repr_masks_value():
    assert "abcdef" not in repr(PasswordHash("$2b$04$abcdef"))


def test_empty_hash_rejected():
    with pytest.raises(ValueError, match="cannot be empty"):
        PasswordHash("")
