import logging

import pytest

from blackboard.agent import Agent
from blackboard.config import settings


@pytest.fixture
def agent():
    """Fresh agent with an empty storage."""
    return Agent(agent_id="agt_test")


@pytest.fixture
def context(agent):
    """Execution context for the test agent."""
    return agent.context()


@pytest.fixture
def storage(agent):
    """The test agent's storage."""
    return agent.storage


@pytest.fixture
def lenient_pairs(monkeypatch):
    """Drop dangling Add keys instead of raising."""
    monkeypatch.setattr(settings, "strict_pairs", False)


@pytest.fixture
def blackboard_caplog(caplog):
    """caplog wired to the non-propagating blackboard logger."""
    package_logger = logging.getLogger("blackboard")
    package_logger.addHandler(caplog.handler)
    try:
        yield caplog
    finally:
        package_logger.removeHandler(caplog.handler)
