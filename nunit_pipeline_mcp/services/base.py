"""
Service layer base types.

- ServiceResult: success-with-data or failure-with-error
- ServiceError: structured error information
- ErrorCode: error codes handlers can switch on
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Error codes for service operations (string values serialize as-is)."""
    # Input
    VALIDATION_ERROR = "validation_error"

    # Launch
    TOOL_NOT_FOUND = "tool_not_found"
    LAUNCH_ERROR = "launch_error"

    # Execution
    TIMEOUT_ERROR = "timeout_error"
    EXECUTION_ERROR = "execution_error"

    # General
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class ServiceError:
    """Why an operation failed, plus optional context."""
    code: ErrorCode
    message: str
    details: dict | None = None

    def to_dict(self) -> dict:
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Result of a service call: either data or an error, never both.

    Usage:
        result = ServiceResult.ok(run_result)
        result = ServiceResult.fail(ErrorCode.TOOL_NOT_FOUND, "Tool not found")

        if result.success:
            report(result.data)
        else:
            handle_error(result.error)
    """
    success: bool
    data: T | None = None
    error: ServiceError | None = None

    @classmethod
    def ok(cls, data: T) -> ServiceResult[T]:
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(
        cls,
        code: ErrorCode,
        message: str,
        details: dict | None = None
    ) -> ServiceResult[T]:
        return cls(
            success=False,
            data=None,
            error=ServiceError(code=code, message=message, details=details)
        )

    def unwrap(self) -> T:
        """
        Get the data, raising if failed.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success or self.data is None:
            error_msg = self.error.message if self.error else "Unknown error"
            raise ValueError(f"Cannot unwrap failed result: {error_msg}")
        return self.data
