"""
Shared fixtures for the chomikuj client tests.

The fake dispatcher replays scripted responses and records every request,
so tests can assert on dispatch counts and form fields without a network.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import pytest

from chomikuj.core.interfaces import Response


@dataclass
class SentRequest:
    method: str
    url: str
    form: Optional[Dict[str, Any]]
    headers: Optional[Dict[str, Optional[str]]]
    files: Optional[Dict[str, Any]]


class FakeDispatcher:
    """Dispatcher double returning queued responses in order."""

    def __init__(self, *responses: Response) -> None:
        self.responses: List[Response] = list(responses)
        self.requests: List[SentRequest] = []
        self.closed = False

    def queue(self, *responses: Response) -> None:
        self.responses.extend(responses)

    def send(
        self,
        method: str,
        url: str,
        *,
        form: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
        files: Optional[Mapping[str, Any]] = None,
    ) -> Response:
        self.requests.append(
            SentRequest(
                method=method,
                url=url,
                form=dict(form) if form is not None else None,
                headers=dict(headers) if headers is not None else None,
                files=dict(files) if files is not None else None,
            )
        )
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


def json_response(payload: Any, status_code: int = 200) -> Response:
    return Response(status_code=status_code, body=json.dumps(payload).encode("utf-8"))


def html_response(markup: str, status_code: int = 200) -> Response:
    return Response(status_code=status_code, body=markup.encode("utf-8"))


def profile_page(token: str = "abc123", ticks: str = "638400000000000000") -> str:
    return (
        "<html><body>"
        '<form action="/action/FolderOptions/NewFolderAction">'
        f'<input name="__RequestVerificationToken" type="hidden" value="{token}" />'
        "</form>"
        f'<input id="TreeTicks" name="TreeTicks" type="hidden" value="{ticks}" />'
        "</body></html>"
    )


@pytest.fixture
def dispatcher():
    """Empty fake dispatcher; tests queue their own responses."""
    return FakeDispatcher()


@pytest.fixture
def folder_tree_html():
    """Folder children fragment as returned by the tree endpoint."""
    return (
        '<ul class="T_c">'
        '<li><a href="/alice/Music" rel="1001" title="Music" id="Ta_1001">Music</a></li>'
        '<li><a href="/alice/Photos+2024" rel="1002" title="Photos 2024" id="Ta_1002">Photos 2024</a>'
        '<ul><li><a href="/alice/Photos+2024/Summer" rel="1003" title="Summer">Summer</a></li></ul>'
        "</li>"
        '<li><a href="/alice/Music" rel="1001" title="Music">Music</a></li>'
        '<li><a href="#" class="expand">more</a></li>'
        "</ul>"
    )


@pytest.fixture
def search_results_html():
    """Search results page with two files and one malformed row."""
    return (
        "<html><body><div id=\"listView\">"
        '<div class="filerow fileItemContainer">'
        '<h3><a class="expanderHeader downloadAction" href="/bob/Music/holiday+song,123456.mp3" '
        'title="holiday song.mp3">holiday song.mp3</a></h3>'
        '<ul class="fileinfo borderRadius"><li>4,2 MB</li><li>2024-01-01</li></ul>'
        "</div>"
        '<div class="filerow fileItemContainer">'
        '<h3><a class="expanderHeader" href="/carol/Docs/report.pdf" rel="987654">report.pdf</a></h3>'
        "</div>"
        '<div class="filerow fileItemContainer">'
        '<h3><a class="expanderHeader" href="/dave/broken">broken</a></h3>'
        "</div>"
        "</div></body></html>"
    )
