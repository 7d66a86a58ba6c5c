"""
HTTP transport module.
Owns the single httpx client (cookie jar, default headers) used for all requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from chomikuj.core.interfaces import Response

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


@dataclass
class DispatcherConfig:
    """Transport configuration settings."""

    base_url: str = "https://chomikuj.pl"
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT


class HttpRequestDispatcher:
    """
    Sends requests through one httpx client.

    The site's endpoints answer XHR-style calls, so every request carries
    `X-Requested-With: XMLHttpRequest` unless a call overrides it with None.
    Redirects are not followed and non-2xx statuses are returned as data.
    """

    DEFAULT_HEADERS = {"X-Requested-With": "XMLHttpRequest"}

    def __init__(
        self,
        config: DispatcherConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            config: Transport settings, defaults when omitted.
            transport: Optional httpx transport (used to stub the network).
        """
        self._config = config or DispatcherConfig()
        self._client = httpx.Client(
            base_url=self._config.base_url,
            headers={"User-Agent": self._config.user_agent, **self.DEFAULT_HEADERS},
            timeout=self._config.timeout,
            follow_redirects=False,
            transport=transport,
        )

    @property
    def cookies(self) -> httpx.Cookies:
        """Cookie jar shared by all requests."""
        return self._client.cookies

    def send(
        self,
        method: str,
        url: str,
        *,
        form: Mapping[str, Any] | None = None,
        headers: Mapping[str, str | None] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> Response:
        """
        Send one request.

        Args:
            method: HTTP method.
            url: Absolute URL or path relative to the base URL.
            form: Form fields; fields set to None are left out.
            headers: Header overrides; None removes a default header.
            files: Multipart parts as accepted by httpx.

        Returns:
            Response with the body fully read.

        Raises:
            httpx.HTTPError: On transport failures.
        """
        data = None
        if form is not None:
            data = {key: self._form_value(value) for key, value in form.items() if value is not None}

        request = self._client.build_request(method, url, data=data, files=files)
        for name, value in (headers or {}).items():
            if value is None:
                request.headers.pop(name, None)
            else:
                request.headers[name] = value

        logger.debug(f"{method} {request.url}")
        response = self._client.send(request)
        logger.debug(f"{method} {request.url} -> {response.status_code}")

        return Response(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    @staticmethod
    def _form_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def close(self) -> None:
        """Close the underlying client."""
        self._client.close()

    def __enter__(self) -> HttpRequestDispatcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
