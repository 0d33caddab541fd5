"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.frontend_runner import FailFastRunner, RecoveringRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [FailFastRunner(), RecoveringRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners:
    - fail-fast: default parse, stops at the first error
    - recovering: parse with recover=True
    """
    return request.param
