"""Shared domain building blocks."""

from flouss.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ErrorCode",
    "ValidationError",
]
