"""Pytest configuration for normcache tests."""

import pytest


@pytest.fixture(autouse=True)
def reset_validator_config():
    """Reset the configured structure validator before each test."""
    import normcache.core.services.structure_validation

    # Store original value
    original_validator = normcache.core.services.structure_validation._validator

    yield

    # Restore original value after test
    normcache.core.services.structure_validation._validator = original_validator
