"""
Core data models and interfaces.

- Value objects shared by every layer (responses, records, session state)
- Protocols for the collaborators the core depends on
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Union


# ============================================================================
# Data Models (Value Objects)
# ============================================================================

@dataclass(frozen=True)
class Response:
    """
    Transport-level result of one request.

    The body is kept in memory, so it can be read any number of times
    (classification reads it, callers may need it afterwards).
    """
    status_code: int
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Parse the body as JSON. Raises ValueError on malformed content."""
        return json.loads(self.body)


@dataclass(frozen=True)
class Folder:
    """Folder record from a folder tree listing."""
    folder_id: int
    name: str
    url: str


@dataclass(frozen=True)
class File:
    """File record from search results."""
    file_id: int
    name: str
    url: str
    size: Optional[str] = None
    owner: Optional[str] = None


class OutcomeShape(Enum):
    """
    Which part of a response decides whether an operation succeeded.

    Every server operation is bound to exactly one shape.
    """
    JSON_DATA_STATUS_OK = "json_data_status_ok"
    JSON_DATA_STATUS_ZERO = "json_data_status_zero"
    JSON_URL = "json_url"
    JSON_ISSUCCESS_ONE = "json_issuccess_one"
    STATUS_200 = "status_200"
    STATUS_400 = "status_400"


@dataclass(frozen=True)
class Unauthenticated:
    """No account is logged in."""


@dataclass(frozen=True)
class Authenticated:
    """An account is logged in; `subject` is its account name."""
    subject: str


SessionState = Union[Unauthenticated, Authenticated]


# ============================================================================
# Interfaces (Protocols)
# ============================================================================

class IRequestDispatcher(Protocol):
    """Interface for the HTTP transport."""

    def send(
        self,
        method: str,
        url: str,
        *,
        form: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
        files: Optional[Mapping[str, Any]] = None,
    ) -> Response:
        """
        Send a request and return its response.

        Must not raise on non-2xx statuses. A header override of None
        removes that default header for this request only.
        """
        ...

    def close(self) -> None:
        """Release transport resources."""
        ...


class IAntiForgeryTokenFetcher(Protocol):
    """Interface for one-time anti-forgery token retrieval."""

    def fetch(self, subject: str) -> str:
        """Return a fresh token for the account or raise TokenNotFoundError."""
        ...


class ITicksProvider(Protocol):
    """Interface for the cached, time-bound folder tree token."""

    def get_ticks(self, subject: str, force_refresh: bool = False) -> str:
        """Return the cached ticks, refreshing on a miss or when forced."""
        ...


class IFolderMapper(Protocol):
    """Interface for folder tree markup mapping."""

    def map_html_response_to_folders(self, response: Response) -> List[Folder]:
        ...


class IFileMapper(Protocol):
    """Interface for search results markup mapping."""

    def map_search_response_to_files(self, response: Response) -> List[File]:
        ...


# Builds and dispatches one request using the given ticks value.
TicksRequestBuilder = Callable[[str], Response]
