"""Completion service failure types.

Adapters translate transport and HTTP failures into these so callers never
depend on a specific SDK's exception hierarchy.
"""

from typing import Optional


class CompletionServiceError(Exception):
    """Raised when the completion service call does not succeed.

    Attributes:
        status_code: Upstream HTTP status, or ``None`` for transport failures
            (timeouts, connection errors).
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class CompletionRateLimitedError(CompletionServiceError):
    """Upstream answered HTTP 429."""

    def __init__(self, message: str = "Completion service rate limit exceeded.") -> None:
        super().__init__(message, status_code=429)


class CompletionQuotaExceededError(CompletionServiceError):
    """Upstream answered HTTP 402 (credits or quota exhausted)."""

    def __init__(self, message: str = "Completion service credits exhausted.") -> None:
        super().__init__(message, status_code=402)
