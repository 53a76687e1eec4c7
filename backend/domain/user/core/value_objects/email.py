"""Email value object."""

from dataclasses import dataclass

from domain.user.core.exceptions.user_errors import InvalidEmailError

MAX_EMAIL_LENGTH = 254


@dataclass(frozen=True)
class Email:
    """Normalized email address.

    Lookup key for login and uniqueness key for registration, so the value
    is stored trimmed and lower-cased.

    Examples:
        >>> Email("  Alice@Example.COM ").value
        'alice@example.com'

        >>> Email("alice@example.com").domain
        'example.com'

    Raises:
        InvalidEmailError: If the address is empty or malformed
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidEmailError(repr(self.value), "email must be a string")

        normalized = self.value.strip().lower()
        # frozen dataclass: bypass __setattr__ to store normalized form
        object.__setattr__(self, "value", normalized)

        if not normalized:
            raise InvalidEmailError(self.value, "email cannot be empty")

        if len(normalized) > MAX_EMAIL_LENGTH:
            raise InvalidEmailError(
                normalized, f"email longer than {MAX_EMAIL_LENGTH} characters"
            )

        if any(ch.isspace() for ch in normalized):
            raise InvalidEmailError(normalized, "email cannot contain whitespace")

        local, sep, domain = normalized.rpartition("@")
        if not sep or not local or not domain or "@" in local:
            raise InvalidEmailError(normalized, "expected exactly one '@'")

        if "." not in domain or domain.startswith(".") or domain.endswith("."):
            raise InvalidEmailError(normalized, "invalid domain part")

    @property
    def local_part(self) -> str:
        return self.value.rpartition("@")[0]

    @property
    def domain(self) -> str:
        return self.value.rpartition("@")[2]

    def __str__(self) -> str:
        return self.value
