"""
Shared test fixtures for the sgsafe test suite.
"""

import pytest

from sgsafe.cases.manager import CaseManager
from sgsafe.commands.executor import CommandExecutor
from sgsafe.parsing.parser import CommandParser
from sgsafe.settings import Settings


@pytest.fixture
def settings():
    """Fresh settings with the default ``dd-MM-yyyy`` date formats."""
    return Settings()


@pytest.fixture
def parser(settings):
    """Parser bound to the ``settings`` fixture."""
    return CommandParser(settings)


@pytest.fixture
def manager():
    """Empty case registry."""
    return CaseManager()


@pytest.fixture
def executor(manager, settings):
    """Executor sharing the ``manager`` and ``settings`` fixtures."""
    return CommandExecutor(manager, settings)
