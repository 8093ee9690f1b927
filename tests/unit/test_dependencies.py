"""Tests for service wiring through the application lifecycle."""
import pytest

from scitrera_app_framework import Variables

from magasiid.config import (
    MAGASIID_DATA_DIR,
    MAGASIID_REGISTRY_SERVICE,
    MAGASIID_ID_SERVICE,
)
from magasiid.dependencies import preconfigure, initialize_services, shutdown_services
from magasiid.services.ids import get_id_service
from magasiid.services.ids.default import DefaultIDService
from magasiid.services.registry import get_id_registry_service
from magasiid.services.registry.in_memory import InMemoryIDRegistryService


@pytest.fixture
def lifecycle_variables(tmp_path, test_logger) -> Variables:
    """Fresh Variables, separate from the session-wide instance."""
    v = Variables()
    v.set(MAGASIID_DATA_DIR, str(tmp_path))
    v.set(MAGASIID_REGISTRY_SERVICE, "in-memory")
    v.set(MAGASIID_ID_SERVICE, "default")
    v, _ = preconfigure(v=v, test_mode=True, test_logger=test_logger)
    return v


@pytest.mark.asyncio
async def test_initialize_and_shutdown_services(lifecycle_variables):
    v = await initialize_services(lifecycle_variables)
    assert v is lifecycle_variables

    registry = get_id_registry_service(v)
    id_service = get_id_service(v)
    assert isinstance(registry, InMemoryIDRegistryService)
    assert isinstance(id_service, DefaultIDService)
    assert id_service.registry is registry

    entry = await id_service.generate_and_register("lifecycle")
    assert (await registry.get_id_info(entry.id)) == entry

    await shutdown_services(v)


def test_preconfigure_is_idempotent(lifecycle_variables):
    v, _ = preconfigure(v=lifecycle_variables)
    assert v is lifecycle_variables
    assert v.get('__preconfigure_complete__') is True
