"""ID registry service package."""
from .base import (
    IDRegistryService,
    IDRegistryServicePluginBase,
    EXT_ID_REGISTRY_SERVICE,
)

from scitrera_app_framework import Variables, get_extension


def get_id_registry_service(v: Variables = None) -> IDRegistryService:
    """Get the ID registry service instance."""
    return get_extension(EXT_ID_REGISTRY_SERVICE, v)


__all__ = (
    'IDRegistryService',
    'IDRegistryServicePluginBase',
    'get_id_registry_service',
    'EXT_ID_REGISTRY_SERVICE',
)
