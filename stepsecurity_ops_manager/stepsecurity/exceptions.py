"""Contains exceptions raised when talking to the StepSecurity API."""


class StepSecurityError(Exception):
    """Base class for every error raised by the StepSecurity client."""

    pass


class StepSecurityTransportError(StepSecurityError):
    """Raised when a request could not be sent or its response could not be read."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        """Initializes the exception with the request that failed."""
        super().__init__(f"{method} {url} failed: {reason}")
        self.method = method
        self.url = url


class StepSecurityAPIStatusError(StepSecurityError):
    """Raised when the API answers with a status code that does not signal success."""

    def __init__(self, method: str, url: str, status_code: int, body: str) -> None:
        """Initializes the exception with the status code and the raw response body."""
        super().__init__(f"status: {status_code}, body: {body}")
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body


class StepSecurityDecodeError(StepSecurityError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, what: str, reason: str) -> None:
        """Initializes the exception with the name of the entity being decoded."""
        super().__init__(f"failed to unmarshal {what}: {reason}")
        self.what = what


class EmptyPolicyError(StepSecurityError):
    """Raised when a write is attempted without a payload."""

    pass


class UserCreationError(StepSecurityError):
    """Raised when the API reports that no user was added."""

    def __init__(self, failed_users: list[str]) -> None:
        """Initializes the exception with the users the API could not add."""
        message = "failed to create user"
        if failed_users:
            message += f": failed users {', '.join(failed_users)}"
        super().__init__(message)
        self.failed_users = failed_users
