"""
Services module for the operation layer.
Separates request orchestration from the CLI.
"""

from chomikuj.services.chomikuj_client import ChomikujClient
from chomikuj.services.retry import RetryingOperationDriver

__all__ = ["ChomikujClient", "RetryingOperationDriver"]
