"""Exceptions for the Gateway bounded context.

Every remote-call and conversion failure reaches facade callers as a
GatewayError carrying one of three classifications.
"""

from __future__ import annotations

from enum import Enum


class ErrorClassification(str, Enum):
    """How a gateway failure should be reported to the caller."""

    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class GatewayError(Exception):
    """Raised when a gateway operation cannot produce a result.

    Attributes:
        classification: Kind of failure.
        message: Human-readable description.
    """

    def __init__(self, classification: ErrorClassification, message: str):
        super().__init__(message)
        self.classification = classification
        self.message = message

    @classmethod
    def bad_request(cls, message: str) -> GatewayError:
        return cls(ErrorClassification.BAD_REQUEST, message)

    @classmethod
    def not_found(cls, message: str) -> GatewayError:
        return cls(ErrorClassification.NOT_FOUND, message)

    @classmethod
    def internal(cls, message: str) -> GatewayError:
        return cls(ErrorClassification.INTERNAL, message)

    def __repr__(self) -> str:
        return f"GatewayError({self.classification.value}, {self.message!r})"
