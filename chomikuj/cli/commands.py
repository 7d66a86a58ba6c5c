"""
CLI command implementations.
Each command wraps one client operation.
"""

from __future__ import annotations

import argparse

from chomikuj.cli.base import AuthenticatedCommand, BaseCommand
from chomikuj.core.interfaces import File, Folder
from chomikuj.services.chomikuj_client import ChomikujClient


class FoldersCommand(BaseCommand):
    """
    Handle folders command.
    Lists child folders of any account's folder; no login needed.
    """

    def execute(self, args: argparse.Namespace) -> int:
        client = self._create_client()

        try:
            folders = client.get_folders(args.user, args.folder_id)
            self._print_results(folders)
            return 0
        finally:
            client.close()

    def _print_results(self, folders: list[Folder]) -> None:
        if not folders:
            print("No folders found.")
            return

        for folder in folders:
            print(f"  [{folder.folder_id}] {folder.name}  {folder.url}")

    @staticmethod
    def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
        """Register folders command."""
        parser = subparsers.add_parser(
            "folders",
            help="List folders of an account"
        )
        parser.add_argument("user", help="Account whose folders to list")
        parser.add_argument(
            "--folder-id",
            type=int,
            default=0,
            help="Parent folder id (default: 0, the account root)"
        )


class SearchCommand(BaseCommand):
    """
    Handle search command.
    Searches public files; no login needed.
    """

    def execute(self, args: argparse.Namespace) -> int:
        client = self._create_client()

        try:
            files = client.find_files(args.phrase, page=args.page)
            self._print_results(files)
            return 0
        finally:
            client.close()

    def _print_results(self, files: list[File]) -> None:
        print(f"\nFound {len(files)} files:")

        for f in files:
            size = f" ({f.size})" if f.size else ""
            print(f"  [{f.file_id}] {f.name}{size}  {f.url}")

    @staticmethod
    def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
        """Register search command."""
        parser = subparsers.add_parser(
            "search",
            help="Search public files"
        )
        parser.add_argument("phrase", help="Search phrase")
        parser.add_argument(
            "--page",
            type=int,
            default=1,
            help="Results page (default: 1)"
        )


class MkdirCommand(AuthenticatedCommand):
    """Handle mkdir command."""

    def run(self, client: ChomikujClient, args: argparse.Namespace) -> int:
        client.create_folder(
            args.name,
            parent_folder_id=args.parent,
            adult=args.adult,
            password=args.password,
        )
        print(f"Created folder: {args.name}")
        return 0

    @staticmethod
    def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
        """Register mkdir command."""
        parser = subparsers.add_parser(
            "mkdir",
            help="Create a folder"
        )
        AuthenticatedCommand.add_account_argument(parser)
        parser.add_argument("name", help="Folder name")
        parser.add_argument(
            "--parent",
            type=int,
            default=0,
            help="Parent folder id (default: 0, the account root)"
        )
        parser.add_argument(
            "--adult",
            action="store_true",
            help="Mark the folder as adult content"
        )
        parser.add_argument(
            "--password",
            help="Protect the folder with a password"
        )


class RmdirCommand(AuthenticatedCommand):
    """Handle rmdir command."""

    def run(self, client: ChomikujClient, args: argparse.Namespace) -> int:
        client.remove_folder(args.folder_id)
        print(f"Removed folder: {args.folder_id}")
        return 0

    @staticmethod
    def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
        """Register rmdir command."""
        parser = subparsers.add_parser(
            "rmdir",
            help="Remove a folder"
        )
        AuthenticatedCommand.add_account_argument(parser)
        parser.add_argument("folder_id", type=int, help="Folder id")


class UploadCommand(AuthenticatedCommand):
    """Handle upload command."""

    def run(self, client: ChomikujClient, args: argparse.Namespace) -> int:
        client.upload_file(args.folder_id, args.path)
        print(f"Uploaded: {args.path}")
        return 0

    @staticmethod
    def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
        """Register upload command."""
        parser = subparsers.add_parser(
            "upload",
            help="Upload a file into a folder"
        )
        AuthenticatedCommand.add_account_argument(parser)
        parser.add_argument("folder_id", type=int, help="Destination folder id")
        parser.add_argument("path", help="Local file path")


class MoveCommand(AuthenticatedCommand):
    """Handle move command."""

    def run(self, client: ChomikujClient, args: argparse.Namespace) -> int:
        client.move_file(args.file_id, args.source_folder_id, args.destination_folder_id)
        print(f"Moved file {args.file_id} to folder {args.destination_folder_id}")
        return 0

    @staticmethod
    def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
        """Register move command."""
        parser = subparsers.add_parser(
            "move",
            help="Move a file to another folder"
        )
        _add_transfer_arguments(parser)


class CopyCommand(AuthenticatedCommand):
    """Handle copy command."""

    def run(self, client: ChomikujClient, args: argparse.Namespace) -> int:
        client.copy_file(args.file_id, args.source_folder_id, args.destination_folder_id)
        print(f"Copied file {args.file_id} to folder {args.destination_folder_id}")
        return 0

    @staticmethod
    def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
        """Register copy command."""
        parser = subparsers.add_parser(
            "copy",
            help="Copy a file to another folder"
        )
        _add_transfer_arguments(parser)


class RenameCommand(AuthenticatedCommand):
    """Handle rename command."""

    def run(self, client: ChomikujClient, args: argparse.Namespace) -> int:
        client.rename_file(args.file_id, args.name, args.description)
        print(f"Renamed file {args.file_id} to: {args.name}")
        return 0

    @staticmethod
    def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
        """Register rename command."""
        parser = subparsers.add_parser(
            "rename",
            help="Rename a file"
        )
        AuthenticatedCommand.add_account_argument(parser)
        parser.add_argument("file_id", type=int, help="File id")
        parser.add_argument("name", help="New file name")
        parser.add_argument(
            "--description",
            default="",
            help="New file description"
        )


def _add_transfer_arguments(parser: argparse.ArgumentParser) -> None:
    AuthenticatedCommand.add_account_argument(parser)
    parser.add_argument("file_id", type=int, help="File id")
    parser.add_argument("source_folder_id", type=int, help="Current folder id")
    parser.add_argument("destination_folder_id", type=int, help="Destination folder id")
