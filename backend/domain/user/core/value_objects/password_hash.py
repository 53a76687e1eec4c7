"""PasswordHash value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordHash:
    """Opaque password hash produced by an IPasswordHasher.

    The plaintext password never reaches the User aggregate; only this
    wrapper does. repr() masks the value so hashes do not leak into logs.

    Examples:
        >>> PasswordHash("$2b$12$abc")
        PasswordHash('***')
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Password hash cannot be empty")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return "PasswordHash('***')"
