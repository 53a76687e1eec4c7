"""User domain exceptions."""


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class UserNotFoundError(UserDomainError):
    """User was not found in the repository."""

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: User ID or email that was not found
        """
        self.identifier = identifier
        super().__init__(f"User not found: {identifier}")


class UserAlreadyExistsError(UserDomainError):
    """User with given identifier already exists."""

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: Email (or user ID) that is already registered
        """
        self.identifier = identifier
        super().__init__(f"User already exists: {identifier}")


class InvalidCredentialsError(UserDomainError):
    """Password does not match the stored hash."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Invalid credentials for: {email}")


class InvalidEmailError(UserDomainError):
    """Email address is malformed."""

    def __init__(self, value: str, reason: str):
        """Initialize with invalid value and reason.

        Args:
            value: Rejected email value
            reason: Reason why it's invalid
        """
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid email '{value}': {reason}")


class AccountDetailsAlreadyExistsError(UserDomainError):
    """Account details companion record already exists for the user."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Account details already exist for user: {user_id}")
