"""Service-layer exceptions.

Every failure a service raises carries the HTTP status the API layer
reports it with; ``main`` maps them to responses in one place.
"""


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(ServiceError):
    """Raised when a resource is not found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=404)


class UserNotFoundError(NotFoundError):
    """Raised when a user record does not exist."""

    def __init__(self, username: str) -> None:
        super().__init__(f"User with username '{username}' not found.")
        self.username = username


class RelationshipNotFoundError(NotFoundError):
    """Raised when a user has no relationship record."""

    def __init__(self, username: str) -> None:
        super().__init__(f"User relationship not found for: {username}")
        self.username = username


class TargetNotFoundError(NotFoundError):
    """Raised when the target of a relationship edit does not exist."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Target user not found: {username}")
        self.username = username


class ValidationError(ServiceError):
    """Raised when input is well-formed but not acceptable."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=400)


class InvalidCredentialsError(ServiceError):
    """Raised on failed login.

    Unknown usernames and wrong passwords produce the same message so the
    two cases cannot be told apart.
    """

    def __init__(self) -> None:
        super().__init__("Invalid username or password", status_code=401)


class DuplicateUsernameError(ServiceError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__("Username already exists", status_code=409)
        self.username = username
