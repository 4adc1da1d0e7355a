"""
Fixtures shared by the API and UI suites
Both run against a deployed pet-clinic; unreachable systems skip, not fail
"""

import pytest

from petclinic_e2e.config import get_config, configure_logging


@pytest.fixture(scope="session")
def config():
    """Validated suite configuration"""
    test_config = get_config()
    configure_logging(test_config.log_level)
    return test_config


@pytest.fixture(scope="session")
def nonexistent_id(config) -> int:
    """An id no record in the seeded database ever has"""
    return config.nonexistent_id
