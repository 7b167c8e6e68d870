"""Typed outcome of a single endpoint call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ResultStatus(str, Enum):
    """Why an endpoint call produced (or did not produce) a value."""

    OK = "ok"
    PRECONDITION_FAILED = "precondition_failed"
    TRANSPORT_ERROR = "transport_error"
    HTTP_ERROR = "http_error"
    INVALID_RESPONSE = "invalid_response"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class HelixResult(Generic[T]):
    """Result of an endpoint call.

    ``value`` is only meaningful when ``status`` is ``OK``. ``status_code`` is the
    HTTP status when a response was received, ``None`` otherwise.
    """

    status: ResultStatus
    value: T | None = None
    status_code: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    def value_or(self, default: T) -> T:
        """Collapse to the value on success, *default* on any failure."""
        if self.ok and self.value is not None:
            return self.value
        return default

    def propagate(self) -> HelixResult[Any]:
        """Re-type a failed result so it can be returned from another operation."""
        return HelixResult(self.status, status_code=self.status_code, error=self.error)

    @classmethod
    def success(cls, value: T, status_code: int | None = None) -> HelixResult[T]:
        return cls(ResultStatus.OK, value=value, status_code=status_code)

    @classmethod
    def failure(
        cls,
        status: ResultStatus,
        error: str,
        status_code: int | None = None,
    ) -> HelixResult[T]:
        return cls(status, status_code=status_code, error=error)
