"""Services package.

Exposes the execution service and the shared result types used by the MCP handlers.
"""


from .base import (
    ErrorCode,
    ServiceError,
    ServiceResult,
)
from .execution import ExecutionService

__all__ = [
    # Base
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    # Services
    "ExecutionService",
]


def create_execution_service() -> ExecutionService:
    """Factory for ExecutionService."""

    return ExecutionService()
