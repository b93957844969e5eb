"""Custom exceptions for the Signal Scout application."""

from enum import Enum


class ScoutError(Exception):
    """Base exception for Signal Scout."""

    pass


class ValidationError(ScoutError):
    """Raised when a search payload is malformed. Always client-caused."""

    pass


class AdapterFailure(str, Enum):
    """Why a platform adapter could not produce results."""

    TIMEOUT = "timeout"
    RATE_LIMITED = "rate_limited"
    TRANSPORT = "transport"
    MALFORMED_RESPONSE = "malformed_response"
    EMPTY_CREDENTIALS = "empty_credentials"


class AdapterError(ScoutError):
    """Exception raised when a single platform search fails."""

    def __init__(
        self,
        platform: str,
        cause: AdapterFailure,
        message: str = "",
        transient: bool = False,
    ):
        self.platform = platform
        self.cause = cause
        self.message = message or cause.value
        self.transient = transient
        super().__init__(f"{platform} search failed ({cause.value}): {self.message}")

    @property
    def retryable(self) -> bool:
        """Only rate limits and transient transport errors earn a retry."""
        if self.cause == AdapterFailure.RATE_LIMITED:
            return True
        return self.cause == AdapterFailure.TRANSPORT and self.transient

    def to_dict(self) -> dict[str, str]:
        return {"platform": self.platform, "cause": self.cause.value, "message": self.message}


class AggregationError(ScoutError):
    """Exception raised when every selected platform failed."""

    def __init__(self, failures: list[AdapterError]):
        self.failures = list(failures)
        platforms = ", ".join(f"{f.platform} ({f.cause.value})" for f in self.failures)
        super().__init__(f"All selected platforms failed: {platforms}")


class InternalError(ScoutError):
    """Exception raised when an internal invariant is violated."""

    pass
