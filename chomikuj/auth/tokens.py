"""
Security token retrieval.

Two kinds of tokens gate the site's endpoints:

- the anti-forgery token, a single-use value embedded in the account's
  profile page and required by mutating folder actions;
- the folder tree "ticks", a short-lived value required to list folder
  children; cached per account and refreshed on demand.

Both are scraped from the profile page, which must be requested without
the XHR marker header, otherwise the site answers with a fragment.
"""

import re
from typing import Callable, Dict, Optional, Pattern

from chomikuj.core.exceptions import TokenNotFoundError
from chomikuj.core.interfaces import IRequestDispatcher

ANTI_FORGERY_FIELD = "__RequestVerificationToken"

_ANTI_FORGERY_RE = re.compile(r'__RequestVerificationToken(?:.*?)value="(.*?)"')
_TREE_TICKS_RE = re.compile(r'TreeTicks(?:.*?)value="(.*?)"')

_NO_XHR = {"X-Requested-With": None}


def _extract(pattern: Pattern[str], markup: str) -> str:
    match = pattern.search(markup)
    if match is None or not match.group(1):
        raise TokenNotFoundError()
    return match.group(1)


def _profile_page(dispatcher: IRequestDispatcher, base_url: str, subject: str) -> str:
    response = dispatcher.send("GET", f"{base_url}/{subject}", headers=_NO_XHR)
    return response.text


class AntiForgeryTokenFetcher:
    """
    Fetches a fresh anti-forgery token from the account's profile page.

    Tokens are single-use, so nothing is cached.
    """

    def __init__(self, dispatcher: IRequestDispatcher, base_url: str) -> None:
        self._dispatcher = dispatcher
        self._base_url = base_url.rstrip("/")

    def fetch(self, subject: str) -> str:
        """
        Fetch a token for the account.

        Args:
            subject: Account name whose profile page holds the token.

        Returns:
            The token value.

        Raises:
            TokenNotFoundError: If the page carries no (or an empty) token.
        """
        markup = _profile_page(self._dispatcher, self._base_url, subject)
        return self.extract(markup)

    @staticmethod
    def extract(markup: str) -> str:
        """Extract the token from profile page markup."""
        return _extract(_ANTI_FORGERY_RE, markup)


class ProfileTicksScraper:
    """Reads the folder tree ticks from the account's profile page."""

    def __init__(self, dispatcher: IRequestDispatcher, base_url: str) -> None:
        self._dispatcher = dispatcher
        self._base_url = base_url.rstrip("/")

    def __call__(self, subject: str) -> str:
        markup = _profile_page(self._dispatcher, self._base_url, subject)
        return _extract(_TREE_TICKS_RE, markup)


class FolderTicksProvider:
    """
    Per-account cache of folder tree ticks.

    The provider never decides staleness itself: callers that see a
    dependent request fail ask for a forced refresh.
    """

    def __init__(self, source: Callable[[str], str]) -> None:
        """
        Initialize the provider.

        Args:
            source: Callable returning fresh ticks for an account name.
        """
        self._source = source
        self._cache: Dict[str, str] = {}

    def get_ticks(self, subject: str, force_refresh: bool = False) -> str:
        """
        Return ticks for the account.

        Args:
            subject: Account name.
            force_refresh: Obtain a new value even if one is cached.

        Returns:
            The cached (possibly just refreshed) ticks.
        """
        if force_refresh or subject not in self._cache:
            self._cache[subject] = self._source(subject)
        return self._cache[subject]

    def cached(self, subject: str) -> Optional[str]:
        """Return the cached ticks for the account without refreshing."""
        return self._cache.get(subject)
