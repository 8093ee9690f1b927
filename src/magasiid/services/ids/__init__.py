"""ID service package."""
from .base import (
    IDService,
    IDServicePluginBase,
    EXT_ID_SERVICE,
)

from scitrera_app_framework import Variables, get_extension


def get_id_service(v: Variables = None) -> IDService:
    """Get the ID service instance."""
    return get_extension(EXT_ID_SERVICE, v)


__all__ = (
    'IDService',
    'IDServicePluginBase',
    'get_id_service',
    'EXT_ID_SERVICE',
)
