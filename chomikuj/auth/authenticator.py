"""
Chomikuj authenticator implementation.
Handles login/logout and owns the session state of one client.
"""

import logging

from chomikuj.core.exceptions import NotLoggedInError
from chomikuj.core.interfaces import (
    Authenticated,
    IRequestDispatcher,
    OutcomeShape,
    SessionState,
    Unauthenticated,
)
from chomikuj.core.outcome import ensure_success

logger: logging.Logger = logging.getLogger(__name__)


class ChomikujAuthenticator:
    """
    Logs an account in and out.

    The session cookie lives in the dispatcher's cookie jar; this class
    keeps track of which account it belongs to.
    """

    LOGIN_PATH = "/action/Login/TopBarLogin"
    LOGOUT_PATH = "/action/Login/LogOut"

    def __init__(self, dispatcher: IRequestDispatcher, base_url: str) -> None:
        """
        Initialize authenticator.

        Args:
            dispatcher: Transport sharing the cookie jar with the client.
            base_url: Site root URL.
        """
        self._dispatcher = dispatcher
        self._base_url = base_url.rstrip("/")
        self._state: SessionState = Unauthenticated()

    @property
    def state(self) -> SessionState:
        """Current session state."""
        return self._state

    def require_session(self) -> Authenticated:
        """
        Return the authenticated session.

        Raises:
            NotLoggedInError: If no account is logged in.
        """
        if not isinstance(self._state, Authenticated):
            raise NotLoggedInError()
        return self._state

    def login(self, username: str, password: str) -> Authenticated:
        """
        Log in with account credentials.

        Args:
            username: Account name.
            password: Account password.

        Returns:
            The new authenticated session.

        Raises:
            RequestFailedError: If the site rejects the credentials.
        """
        logger.info(f"Logging in as {username}...")
        response = self._dispatcher.send(
            "POST",
            self._base_url + self.LOGIN_PATH,
            form={"Login": username, "Password": password},
        )
        ensure_success(response, OutcomeShape.JSON_ISSUCCESS_ONE)

        self._state = Authenticated(subject=username)
        logger.info("Login successful")
        return self._state

    def logout(self) -> None:
        """
        Log out the current account.

        Raises:
            RequestFailedError: If the site does not confirm the logout.
        """
        response = self._dispatcher.send("POST", self._base_url + self.LOGOUT_PATH)
        ensure_success(response, OutcomeShape.STATUS_200)

        self._state = Unauthenticated()
        logger.info("Logged out")
