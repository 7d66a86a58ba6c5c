"""
Base mapper with common markup handling.
"""

import re
from abc import ABC
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from chomikuj.core.interfaces import Response


class BaseMapper(ABC):
    """
    Abstract base class for markup mappers.
    Provides soup construction and URL/id helpers.
    """

    def __init__(self, base_url: str = "https://chomikuj.pl") -> None:
        """
        Initialize base mapper.

        Args:
            base_url: Site root used to absolutize relative links.
        """
        self._base_url = base_url.rstrip("/") + "/"

    @staticmethod
    def _soup(response: Response) -> BeautifulSoup:
        """Parse the response body; the response itself stays untouched."""
        return BeautifulSoup(response.text, "html.parser")

    def _absolute_url(self, href: str) -> str:
        return urljoin(self._base_url, href)

    @staticmethod
    def _to_int(value: Optional[str]) -> Optional[int]:
        if value is None:
            return None
        value = value.strip()
        return int(value) if re.fullmatch(r"\d+", value) else None
