"""
Blackboard storage - shared type definitions.
"""
import uuid
from enum import Enum
from typing import Any, Callable


Key = str
Value = Any
KeyPredicate = Callable[[str], bool]


class ExecutionResult(str, Enum):
    """Outcome of an operation invocation."""
    SUCCESS = "success"
    FAILURE = "failure"


def generate_agent_id() -> str:
    """Generate an agent ID in the format agt_..."""
    return f"agt_{uuid.uuid4().hex[:16]}"
