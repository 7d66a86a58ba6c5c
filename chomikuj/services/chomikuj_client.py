"""
Chomikuj client containing the command-level operations.
Each operation formats one request, injects the token it needs and checks
the response against the operation's outcome shape.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from chomikuj.auth.authenticator import ChomikujAuthenticator
from chomikuj.auth.dispatcher import DEFAULT_USER_AGENT, DispatcherConfig, HttpRequestDispatcher
from chomikuj.auth.tokens import (
    ANTI_FORGERY_FIELD,
    AntiForgeryTokenFetcher,
    FolderTicksProvider,
    ProfileTicksScraper,
)
from chomikuj.core.exceptions import FileIsEmptyError, RequestFailedError, WrongFilePathError
from chomikuj.core.interfaces import (
    File,
    Folder,
    IAntiForgeryTokenFetcher,
    IFileMapper,
    IFolderMapper,
    IRequestDispatcher,
    ITicksProvider,
    OutcomeShape,
    Response,
    SessionState,
)
from chomikuj.core.outcome import ensure_success
from chomikuj.scraper.file_mapper import FileMapper
from chomikuj.scraper.folder_mapper import FolderMapper
from chomikuj.services.retry import RetryingOperationDriver
from chomikuj.utils.config import ConfigLoader

logger: logging.Logger = logging.getLogger(__name__)


class ChomikujClient:
    """
    Main client for chomikuj.pl operations.
    Orchestrates authentication, token retrieval, requests and mapping.
    """

    BASE_URL = "https://chomikuj.pl"
    URIS = {
        "create_folder": "/action/FolderOptions/NewFolderAction",
        "remove_folder": "/action/FolderOptions/DeleteFolderAction",
        "upload_file": "/action/Upload/GetUrl",
        "move_file": "/action/FileDetails/MoveFileAction",
        "copy_file": "/action/FileDetails/CopyFileAction",
        "rename_file": "/action/FileDetails/EditNameAndDescAction",
        "get_folder_children": "/action/tree/GetFolderChildrenHtml",
        "search": "/action/SearchFiles/Results",
    }

    def __init__(
        self,
        dispatcher: IRequestDispatcher | None = None,
        folder_mapper: IFolderMapper | None = None,
        file_mapper: IFileMapper | None = None,
        ticks_provider: ITicksProvider | None = None,
        token_fetcher: IAntiForgeryTokenFetcher | None = None,
        base_url: str = BASE_URL,
    ) -> None:
        """
        Initialize the client; every collaborator has a default.

        Args:
            dispatcher: HTTP transport.
            folder_mapper: Folder tree markup mapper.
            file_mapper: Search results markup mapper.
            ticks_provider: Folder tree ticks cache.
            token_fetcher: Anti-forgery token source.
            base_url: Site root URL.
        """
        self._base_url = base_url.rstrip("/")
        self._dispatcher = dispatcher or HttpRequestDispatcher(DispatcherConfig(base_url=self._base_url))
        self._folder_mapper = folder_mapper or FolderMapper(self._base_url)
        self._file_mapper = file_mapper or FileMapper(self._base_url)
        self._ticks_provider = ticks_provider or FolderTicksProvider(
            ProfileTicksScraper(self._dispatcher, self._base_url)
        )
        self._token_fetcher = token_fetcher or AntiForgeryTokenFetcher(self._dispatcher, self._base_url)
        self._authenticator = ChomikujAuthenticator(self._dispatcher, self._base_url)
        self._driver = RetryingOperationDriver(self._ticks_provider)

    @classmethod
    def from_config(cls, config: ConfigLoader) -> ChomikujClient:
        """Build a client with the transport settings from configuration."""
        base_url = config.base_url
        dispatcher = HttpRequestDispatcher(
            DispatcherConfig(
                base_url=base_url,
                timeout=float(config.get("http.timeout", 30.0)),
                user_agent=config.get("http.user_agent") or DEFAULT_USER_AGENT,
            )
        )
        return cls(dispatcher=dispatcher, base_url=base_url)

    @property
    def session(self) -> SessionState:
        """Current session state."""
        return self._authenticator.state

    # =========================================================================
    # Authentication Methods
    # =========================================================================

    def login(self, username: str, password: str) -> None:
        """
        Log in with account credentials.

        Raises:
            RequestFailedError: If the site rejects the credentials.
        """
        self._authenticator.login(username, password)

    def logout(self) -> None:
        """Log out the current account."""
        self._authenticator.logout()

    # =========================================================================
    # Folder Methods
    # =========================================================================

    def create_folder(
        self,
        folder_name: str,
        parent_folder_id: int = 0,
        adult: bool = False,
        password: str | None = None,
    ) -> None:
        """
        Create a folder in the logged-in account.

        Args:
            folder_name: Name of the new folder.
            parent_folder_id: Parent folder id (0 is the account root).
            adult: Mark the folder as adult content.
            password: Optional folder password.

        Raises:
            NotLoggedInError: If no account is logged in.
            TokenNotFoundError: If the anti-forgery token cannot be scraped.
            RequestFailedError: If the site does not confirm the action.
        """
        subject = self._authenticator.require_session().subject
        logger.info(f"Creating folder '{folder_name}' in {parent_folder_id}")

        self._driver.perform_once(
            lambda: self._post(
                "create_folder",
                {
                    ANTI_FORGERY_FIELD: self._token_fetcher.fetch(subject),
                    "ChomikName": subject,
                    "FolderName": folder_name,
                    "FolderId": parent_folder_id,
                    "AdultContent": "true" if adult else "false",
                    "Password": password,
                    "NewFolderSetPassword": "true" if password is not None else "false",
                },
            ),
            OutcomeShape.JSON_DATA_STATUS_ZERO,
        )

    def remove_folder(self, folder_id: int) -> None:
        """
        Remove a folder from the logged-in account.

        Raises:
            NotLoggedInError: If no account is logged in.
            TokenNotFoundError: If the anti-forgery token cannot be scraped.
            RequestFailedError: If the site does not confirm the action.
        """
        subject = self._authenticator.require_session().subject
        logger.info(f"Removing folder {folder_id}")

        self._driver.perform_once(
            lambda: self._post(
                "remove_folder",
                {
                    ANTI_FORGERY_FIELD: self._token_fetcher.fetch(subject),
                    "ChomikName": subject,
                    "FolderId": folder_id,
                },
            ),
            OutcomeShape.JSON_DATA_STATUS_ZERO,
        )

    def get_folders(self, username: str, folder_id: int = 0) -> list[Folder]:
        """
        List child folders of any account's folder.

        The listing is authorized by ticks that expire silently, so a failed
        first attempt is retried once with refreshed ticks.

        Args:
            username: Account whose folder tree is listed.
            folder_id: Parent folder id (0 is the account root).

        Returns:
            Child folders.

        Raises:
            RequestFailedError: If both attempts fail.
        """
        logger.info(f"Listing folders of {username} in {folder_id}")

        response = self._driver.perform_with_retry(
            username,
            lambda ticks: self._post(
                "get_folder_children",
                {"chomikName": username, "folderId": folder_id, "ticks": ticks},
            ),
            OutcomeShape.STATUS_200,
        )
        return self._folder_mapper.map_html_response_to_folders(response)

    # =========================================================================
    # File Methods
    # =========================================================================

    def upload_file(self, folder_id: int, file_path: str) -> None:
        """
        Upload a local file into a folder of the logged-in account.

        The site first hands out an upload server URL, then the file is
        posted there as multipart data.

        Raises:
            WrongFilePathError: If the file is missing or unreadable.
            FileIsEmptyError: If the file is empty.
            NotLoggedInError: If no account is logged in.
            RequestFailedError: If either step fails.
        """
        if not os.path.isfile(file_path) or not os.access(file_path, os.R_OK):
            raise WrongFilePathError()
        if os.path.getsize(file_path) == 0:
            raise FileIsEmptyError()

        subject = self._authenticator.require_session().subject
        logger.info(f"Uploading {file_path} to folder {folder_id}")

        response = ensure_success(
            self._post("upload_file", {"accountname": subject, "folderid": folder_id}),
            OutcomeShape.JSON_URL,
        )
        upload_url = response.json()["Url"]
        if not isinstance(upload_url, str):
            raise RequestFailedError(f"Unexpected upload URL: {upload_url!r}")

        with open(file_path, "rb") as f:
            response = self._dispatcher.send(
                "POST",
                upload_url,
                files={"files": (os.path.basename(file_path), f)},
            )
        ensure_success(response, OutcomeShape.STATUS_200)
        logger.info("Upload finished")

    def move_file(self, file_id: int, source_folder_id: int, destination_folder_id: int) -> None:
        """Move a file between folders of the logged-in account."""
        self._transfer_file("move_file", file_id, source_folder_id, destination_folder_id)

    def copy_file(self, file_id: int, source_folder_id: int, destination_folder_id: int) -> None:
        """Copy a file between folders of the logged-in account."""
        self._transfer_file("copy_file", file_id, source_folder_id, destination_folder_id)

    def rename_file(self, file_id: int, new_filename: str, new_description: str) -> None:
        """Change a file's name and description."""
        logger.info(f"Renaming file {file_id} to '{new_filename}'")
        ensure_success(
            self._post(
                "rename_file",
                {"FileId": file_id, "Name": new_filename, "Description": new_description},
            ),
            OutcomeShape.JSON_DATA_STATUS_OK,
        )

    def find_files(
        self,
        phrase: str,
        optional_parameters: Mapping[str, Any] | None = None,
        page: int = 1,
    ) -> list[File]:
        """
        Search public files.

        Args:
            phrase: Search phrase.
            optional_parameters: Extra search form fields (e.g. extension filters).
                The phrase, gallery flag and page always take precedence.
            page: Results page, starting at 1.

        Returns:
            Files on the requested results page.
        """
        form: dict[str, Any] = dict(optional_parameters or {})
        form.update({"FileName": phrase, "IsGallery": 0, "Page": page})
        logger.info(f"Searching for '{phrase}' (page {page})")

        response = ensure_success(self._post("search", form), OutcomeShape.STATUS_200)
        return self._file_mapper.map_search_response_to_files(response)

    def close(self) -> None:
        """Release the transport."""
        self._dispatcher.close()

    def __enter__(self) -> ChomikujClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # =========================================================================
    # Private Helper Methods
    # =========================================================================

    def _url(self, identifier: str) -> str:
        return self._base_url + self.URIS[identifier]

    def _post(self, identifier: str, form: Mapping[str, Any]) -> Response:
        return self._dispatcher.send("POST", self._url(identifier), form=form)

    def _transfer_file(
        self,
        identifier: str,
        file_id: int,
        source_folder_id: int,
        destination_folder_id: int,
    ) -> None:
        subject = self._authenticator.require_session().subject
        logger.info(f"{identifier}: file {file_id} from {source_folder_id} to {destination_folder_id}")

        ensure_success(
            self._post(
                identifier,
                {
                    "ChomikName": subject,
                    "FileId": file_id,
                    # the site rejects the action without the source folder
                    "FolderId": source_folder_id,
                    "FolderTo": destination_folder_id,
                },
            ),
            OutcomeShape.JSON_DATA_STATUS_OK,
        )
