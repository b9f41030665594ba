"""
Agent Blackboard

Per-agent in-memory key/value blackboard with protected-key operations.
"""
from blackboard.agent import Agent, ExecutionContext, invoke

__all__ = ["Agent", "ExecutionContext", "invoke"]
