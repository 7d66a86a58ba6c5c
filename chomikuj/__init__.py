"""
Client library for chomikuj.pl, driven through the site's web-UI endpoints.
"""

from chomikuj.core.exceptions import (
    AuthenticationError,
    ChomikujError,
    ConfigurationError,
    FileIsEmptyError,
    NotLoggedInError,
    RequestFailedError,
    TokenNotFoundError,
    UploadError,
    WrongFilePathError,
)
from chomikuj.core.interfaces import File, Folder, OutcomeShape, Response
from chomikuj.core.outcome import classify
from chomikuj.services.chomikuj_client import ChomikujClient

__version__ = "0.1.0"

__all__ = [
    "ChomikujClient",
    "classify",
    "OutcomeShape",
    "Response",
    "Folder",
    "File",
    "ChomikujError",
    "RequestFailedError",
    "TokenNotFoundError",
    "AuthenticationError",
    "NotLoggedInError",
    "UploadError",
    "WrongFilePathError",
    "FileIsEmptyError",
    "ConfigurationError",
]
