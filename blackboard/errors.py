"""
Standardized error types and error formatting.

Protected keys never produce errors; these cover malformed input, the
invoker's argument-count contract and invalid protection configuration.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from blackboard.logging_config import get_logger

logger = get_logger(__name__)


class BlackboardError(Exception):
    """Base exception for blackboard errors."""

    def __init__(
        self,
        message: str,
        code: str = "BLACKBOARD_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class MalformedArgumentsError(BlackboardError):
    """Argument sequence has the wrong shape, e.g. an unpaired Add key."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code="MALFORMED_ARGUMENTS",
            details=details,
        )


class ArgumentCountError(BlackboardError):
    """Fewer arguments than the operation's minimum."""

    def __init__(self, operation: str, expected: int, received: int):
        super().__init__(
            message=f"{operation} expects at least {expected} argument(s), got {received}",
            code="ARGUMENT_COUNT",
            details={"operation": operation, "expected": expected, "received": received},
        )


class PolicyError(BlackboardError):
    """Invalid protection policy or resolver configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code="POLICY_ERROR",
            details=details,
        )


def format_error(error: Exception) -> Dict[str, Any]:
    """
    Format an error in the standard envelope.

    Args:
        error: Exception that occurred

    Returns:
        {"error": {"code", "message", "timestamp", "details"?, "hint"?}}
    """
    if isinstance(error, BlackboardError):
        error_code = error.code
        error_message = error.message
        error_details = error.details
    else:
        error_code = "INTERNAL_ERROR"
        error_message = "An unexpected error occurred"
        error_details = {}
        logger.error(f"Error: {error}", exc_info=error)

    error_response: Dict[str, Any] = {
        "error": {
            "code": error_code,
            "message": error_message,
            "timestamp": datetime.utcnow().isoformat() + "Z",
        }
    }

    if error_details:
        error_response["error"]["details"] = error_details

    # Recovery hints for common errors
    if error_code == "MALFORMED_ARGUMENTS":
        error_response["error"]["hint"] = "Pass keys and values as complete (key, value) pairs"
    elif error_code == "ARGUMENT_COUNT":
        error_response["error"]["hint"] = f"Pass at least {error_details['expected']} argument(s)"

    return error_response
