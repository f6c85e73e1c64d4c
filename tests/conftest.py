"""
Shared fixtures for radix_calc tests.
"""

import pytest

from radix_calc.app import create_app
from radix_calc.usage_log import UsageLog


@pytest.fixture
def usage_log():
    """Fresh, empty usage log."""
    return UsageLog()


@pytest.fixture
def app(usage_log):
    """App wired to the test's usage log."""
    return create_app(usage_log=usage_log, config={"TESTING": True, "CHART_KIND": "pie"})


@pytest.fixture
def client(app):
    return app.test_client()
