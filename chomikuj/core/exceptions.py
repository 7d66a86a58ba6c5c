"""
Custom exceptions for the chomikuj client.
Every failure surfaced by the library derives from ChomikujError.
"""


class ChomikujError(Exception):
    """Base exception for all client errors."""
    pass


class RequestFailedError(ChomikujError):
    """Raised when a response is not successful after all permitted attempts."""

    def __init__(self, message: str = "Request failed.") -> None:
        super().__init__(message)


class TokenNotFoundError(ChomikujError):
    """Raised when a security token cannot be found in scraped markup."""

    def __init__(self, message: str = "Token could not be found.") -> None:
        super().__init__(message)


class AuthenticationError(ChomikujError):
    """Raised when authentication state does not allow an operation."""
    pass


class NotLoggedInError(AuthenticationError):
    """Raised when an operation needs a logged-in account."""

    def __init__(self, message: str = "This operation requires a logged-in account.") -> None:
        super().__init__(message)


class UploadError(ChomikujError):
    """Raised when a local file cannot be uploaded."""
    pass


class WrongFilePathError(UploadError):
    """Raised when the file to upload is missing or unreadable."""

    def __init__(self, message: str = "Wrong file path / no access to file.") -> None:
        super().__init__(message)


class FileIsEmptyError(UploadError):
    """Raised when the file to upload has no content."""

    def __init__(self, message: str = "File is empty.") -> None:
        super().__init__(message)


class ConfigurationError(ChomikujError):
    """Raised when configuration is invalid."""
    pass
