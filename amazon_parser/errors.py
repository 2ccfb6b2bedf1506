"""
Parser Errors

Every failure the pipeline surfaces to its caller. Nothing in the
pipeline retries; callers decide what to do with each error type.
"""

from typing import Optional


class AmazonParserError(Exception):
    """Base class for all parser errors."""


class InvalidInputError(AmazonParserError, ValueError):
    """Request had no usable url/asin/html, or a malformed ASIN."""


class FetchError(AmazonParserError):
    """Amazon page could not be fetched."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CompletionError(AmazonParserError):
    """The completion service failed for a reason other than a timeout."""


class TransportTimeoutError(CompletionError):
    """
    The completion request timed out waiting for the response.

    The model may still have finished server-side, so callers may retry.
    """

    retryable = True


class NoJsonFoundError(AmazonParserError):
    """Completion text contained no JSON object."""


class MalformedJsonError(AmazonParserError):
    """Completion text contained an object span that is not valid JSON."""

    def __init__(self, message: str, parser_message: str = ""):
        super().__init__(message)
        self.parser_message = parser_message


class BlockedError(AmazonParserError):
    """Amazon served a block page instead of product content."""
