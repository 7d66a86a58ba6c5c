"""
Base command interface for CLI sub-commands.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from getpass import getpass
from typing import TYPE_CHECKING

from chomikuj.core.interfaces import Authenticated
from chomikuj.services.chomikuj_client import ChomikujClient

if TYPE_CHECKING:
    from chomikuj.utils.config import ConfigLoader


class BaseCommand(ABC):
    """Abstract base class for CLI commands."""

    def __init__(self, config: ConfigLoader) -> None:
        """
        Initialize command with configuration.

        Args:
            config: Configuration loader instance.
        """
        self._config = config

    def _create_client(self) -> ChomikujClient:
        return ChomikujClient.from_config(self._config)

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command line arguments.

        Returns:
            Exit code (0 for success, non-zero for failure).
        """
        ...

    @staticmethod
    @abstractmethod
    def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
        """
        Register command with argument parser.

        Args:
            subparsers: Subparsers action to add command to.
        """
        ...


class AuthenticatedCommand(BaseCommand):
    """
    Command that acts on the logged-in account.
    Logs in, runs the action, logs out, and always closes the client.
    """

    def execute(self, args: argparse.Namespace) -> int:
        client = self._create_client()

        try:
            username, password = self._credentials(args)
            client.login(username, password)
            return self.run(client, args)
        finally:
            try:
                if isinstance(client.session, Authenticated):
                    client.logout()
            finally:
                client.close()

    @abstractmethod
    def run(self, client: ChomikujClient, args: argparse.Namespace) -> int:
        """Perform the action with a logged-in client."""
        ...

    def _credentials(self, args: argparse.Namespace) -> tuple[str, str]:
        """Resolve credentials: CLI flag, then config/env, then prompt."""
        username = getattr(args, "username", None) or self._config.get("auth.username")
        if not username:
            username = input("Chomikuj account name: ")

        password = self._config.get("auth.password")
        if not password:
            password = getpass("Chomikuj password: ")

        return str(username), str(password)

    @staticmethod
    def add_account_argument(parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-u", "--username",
            help="Account name (default: auth.username / CHOMIKUJ_USERNAME)"
        )
