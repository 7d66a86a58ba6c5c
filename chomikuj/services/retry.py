"""
Retry policy for token-dependent operations.

A request authorized by folder tree ticks can fail only because the ticks
went stale. Such requests get exactly one retry with freshly fetched ticks.
Requests authorized by an anti-forgery token run once; each attempt fetches
its own token.
"""

from typing import Callable

from chomikuj.core.exceptions import RequestFailedError
from chomikuj.core.interfaces import ITicksProvider, OutcomeShape, Response, TicksRequestBuilder
from chomikuj.core.outcome import classify, ensure_success


class RetryingOperationDriver:
    """Runs an operation, refreshing ticks and retrying once when it fails."""

    def __init__(self, ticks_provider: ITicksProvider) -> None:
        self._ticks = ticks_provider

    def perform_with_retry(
        self,
        subject: str,
        build_request: TicksRequestBuilder,
        expected_shape: OutcomeShape,
    ) -> Response:
        """
        Dispatch a ticks-authorized request, retrying once with refreshed ticks.

        Args:
            subject: Account whose ticks authorize the request.
            build_request: Builds and dispatches the request for a ticks value.
            expected_shape: Success rule of the operation.

        Returns:
            The first successful response.

        Raises:
            RequestFailedError: If both attempts fail.
        """
        response = build_request(self._ticks.get_ticks(subject))
        if classify(response, expected_shape):
            return response

        response = build_request(self._ticks.get_ticks(subject, force_refresh=True))
        if classify(response, expected_shape):
            return response

        raise RequestFailedError()

    @staticmethod
    def perform_once(build_request: Callable[[], Response], expected_shape: OutcomeShape) -> Response:
        """Dispatch a request once; a failed classification raises RequestFailedError."""
        return ensure_success(build_request(), expected_shape)
