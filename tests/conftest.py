"""
Pytest configuration and fixtures for MagasiID tests.

Uses scitrera-app-framework dependency injection for service configuration.
Each test session gets an isolated Variables instance that does NOT pull from
environment variables - all configuration is set explicitly for test isolation.

Usage in tests:
    async def test_something(id_service):
        entry = await id_service.generate_and_register("invoice")
"""
import logging
import random

import pytest

from scitrera_app_framework import Variables, get_extension
from magasiid.config import (
    MAGASIID_DATA_DIR,
    MAGASIID_REGISTRY_SERVICE,
    MAGASIID_ID_SERVICE,
)


# -----------------------------------------------------------------------------
# Logging Configuration (initialized by test harness, not framework)
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def test_logger() -> logging.Logger:
    """
    Create a root logger for tests.

    The test harness owns logging configuration, not the framework.
    """
    logger = logging.getLogger("magasiid-test")
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            '%(asctime)s %(levelname)s %(name)s %(funcName)s() > %(message)s',
            datefmt='%Y/%m/%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


# -----------------------------------------------------------------------------
# Framework Initialization with Test Isolation
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def test_configuration(tmp_path_factory):
    """
    Isolated Variables instance with explicit configuration for tests.
    """
    v = Variables()
    v.set(MAGASIID_DATA_DIR, str(tmp_path_factory.mktemp("magasiid_test")))
    v.set(MAGASIID_REGISTRY_SERVICE, "in-memory")
    v.set(MAGASIID_ID_SERVICE, "default")
    return v


@pytest.fixture(scope="session")
def v(test_configuration, test_logger):
    """
    Isolated Variables instance with plugins registered.

    Services initialize lazily on first get_extension() call.
    """
    from magasiid.dependencies import preconfigure

    v, _ = preconfigure(v=test_configuration, test_mode=True, test_logger=test_logger)
    return v


# -----------------------------------------------------------------------------
# Convenience Service Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def id_registry_service(v):
    """Get the shared (session-wide) ID registry service."""
    from magasiid.services.registry import EXT_ID_REGISTRY_SERVICE
    return get_extension(EXT_ID_REGISTRY_SERVICE, v)


@pytest.fixture
def id_service(v):
    """Get the shared (session-wide) ID service."""
    from magasiid.services.ids import EXT_ID_SERVICE
    return get_extension(EXT_ID_SERVICE, v)


@pytest.fixture
def registry(v):
    """Fresh, independent in-memory registry (function-scoped)."""
    from magasiid.services.registry.in_memory import InMemoryIDRegistryService
    return InMemoryIDRegistryService(v=v)


@pytest.fixture
def isolated_id_service(v, registry):
    """ID service bound to a fresh registry."""
    from magasiid.services.ids.default import DefaultIDService
    return DefaultIDService(registry=registry, v=v, batch_max_count=50)


# -----------------------------------------------------------------------------
# Test Data Factories
# -----------------------------------------------------------------------------

@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source for reproducible bodies."""
    return random.Random(1234)


@pytest.fixture
def sias_config() -> dict:
    """Fully specified configuration with every segment enabled."""
    return {
        "prefix": "SIAS",
        "length": 16,
        "include_timestamp": True,
        "use_dashes": True,
        "include_checksum": True,
    }
