"""
ID Registry Service - Tracking of issued identifiers.

The registry maps each identifier to an IDTrackingEntry. Keys are unique:
registering a present key is rejected, never overwritten. Entries are never
removed; deactivation only flips is_active to False.

Operations:
- register_id: Track a new identifier (raises DuplicateIDError if present)
- get_id_info: Look up an entry (None if not found)
- deactivate_id: Mark an entry inactive (idempotent)
- get_all_ids: Snapshot of every entry
- count: Number of tracked identifiers
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from scitrera_app_framework.api import Plugin, Variables, enabled_option_pattern

from ...config import MAGASIID_REGISTRY_SERVICE, DEFAULT_MAGASIID_REGISTRY_SERVICE
from ...models import IDTrackingEntry

from .._constants import EXT_ID_REGISTRY_SERVICE


class IDRegistryService(ABC):
    """Interface for the ID registry service."""

    logger: logging.Logger = None

    @abstractmethod
    async def register_id(self, id: str, purpose: str, data: Optional[Any] = None) -> IDTrackingEntry:
        """Start tracking an identifier.

        Args:
            id: Identifier to track
            purpose: Free-text label for why it was issued
            data: Optional opaque payload stored with the entry

        Returns:
            The new entry (active, created now)

        Raises:
            DuplicateIDError: If the identifier is already registered
        """
        pass

    @abstractmethod
    async def get_id_info(self, id: str) -> Optional[IDTrackingEntry]:
        """Retrieve the entry for an identifier, or None if not registered."""
        pass

    @abstractmethod
    async def deactivate_id(self, id: str) -> bool:
        """Mark an identifier inactive.

        Returns:
            False if the identifier is not registered, True otherwise
            (including when it was already inactive)
        """
        pass

    @abstractmethod
    async def get_all_ids(self) -> list[IDTrackingEntry]:
        """Snapshot of all entries in registration order."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of registered identifiers."""
        pass


# noinspection PyAbstractClass
class IDRegistryServicePluginBase(Plugin):
    """Base plugin for the ID registry - extensible for custom implementations."""
    PROVIDER_NAME: str = None

    def name(self) -> str:
        return f"{EXT_ID_REGISTRY_SERVICE}|{self.PROVIDER_NAME}"

    def extension_point_name(self, v: Variables) -> str:
        return EXT_ID_REGISTRY_SERVICE

    def is_enabled(self, v: Variables) -> bool:
        return enabled_option_pattern(self, v, MAGASIID_REGISTRY_SERVICE, self_attr='PROVIDER_NAME')

    def on_registration(self, v: Variables) -> None:
        v.set_default_value(MAGASIID_REGISTRY_SERVICE, DEFAULT_MAGASIID_REGISTRY_SERVICE)
