"""
CLI module for the chomikuj client.
Contains command handlers, one class per sub-command.
"""

from chomikuj.cli.commands import (
    CopyCommand,
    FoldersCommand,
    MkdirCommand,
    MoveCommand,
    RenameCommand,
    RmdirCommand,
    SearchCommand,
    UploadCommand,
)

COMMANDS = {
    "folders": FoldersCommand,
    "search": SearchCommand,
    "mkdir": MkdirCommand,
    "rmdir": RmdirCommand,
    "upload": UploadCommand,
    "move": MoveCommand,
    "copy": CopyCommand,
    "rename": RenameCommand,
}

__all__ = [
    "COMMANDS",
    "FoldersCommand",
    "SearchCommand",
    "MkdirCommand",
    "RmdirCommand",
    "UploadCommand",
    "MoveCommand",
    "CopyCommand",
    "RenameCommand",
]
