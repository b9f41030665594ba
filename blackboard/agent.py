"""
Agent runtime surface for the storage operations.

An Agent owns exactly one Storage. ``invoke`` is the collaborator that
checks an operation's minimum argument count, runs it and collects the
output; errors are logged and reported as ExecutionResult.FAILURE.
"""
from typing import Any, List, Optional, Sequence, Tuple

from blackboard.errors import ArgumentCountError, BlackboardError, format_error
from blackboard.logging_config import get_logger
from blackboard.storage.core_types import ExecutionResult, generate_agent_id
from blackboard.storage.operations import StorageOperation
from blackboard.storage.store import Storage

logger = get_logger(__name__)


class Agent:
    """Owner of a single blackboard Storage."""

    def __init__(self, agent_id: Optional[str] = None, storage: Optional[Storage] = None):
        self.agent_id = agent_id or generate_agent_id()
        self._storage = storage if storage is not None else Storage()

    @property
    def storage(self) -> Storage:
        return self._storage

    def context(self) -> "ExecutionContext":
        return ExecutionContext(self)

    def call(self, operation: StorageOperation, *arguments) -> Tuple[ExecutionResult, List[Any]]:
        """Invoke an operation against this agent's storage."""
        return invoke(operation, self.context(), arguments)

    def __repr__(self) -> str:
        return f"Agent({self.agent_id!r}, {self._storage!r})"


class ExecutionContext:
    """Execution context handed to operations; exposes the agent's Storage."""

    def __init__(self, agent: Agent):
        self.agent = agent

    @property
    def storage(self) -> Storage:
        return self.agent.storage


def check_arguments(operation: StorageOperation, arguments: Sequence[Any]) -> None:
    """Raise ArgumentCountError if arguments fall below the operation's minimum."""
    expected = operation.minimal_argument_number * operation.argument_arity
    if len(arguments) < expected:
        raise ArgumentCountError(operation.name, expected, len(arguments))


def invoke(
    operation: StorageOperation,
    context: ExecutionContext,
    arguments: Sequence[Any],
) -> Tuple[ExecutionResult, List[Any]]:
    """
    Validate and run an operation.

    Returns:
        (result, output). On failure the output is empty.
    """
    agent_id = getattr(getattr(context, "agent", None), "agent_id", None)
    output: List[Any] = []
    try:
        check_arguments(operation, arguments)
        result = operation.execute(context, arguments, output)
    except BlackboardError as e:
        logger.warning(
            f"Operation failed: {e.message}",
            extra={"agent_id": agent_id, "operation": operation.name, "error": format_error(e)["error"]},
        )
        return ExecutionResult.FAILURE, []
    return result, output
