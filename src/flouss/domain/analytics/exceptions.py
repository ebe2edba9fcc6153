"""Analytics domain exceptions."""

from typing import Any

from flouss.domain.shared.exceptions import DomainException, ErrorCode


class AnalyticsDataUnavailableError(DomainException):
    """Raised when analytics source data cannot be fetched."""

    def __init__(
        self,
        message: str = "Analytics data is currently unavailable",
        code: ErrorCode = ErrorCode.DATA_SOURCE_UNAVAILABLE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
