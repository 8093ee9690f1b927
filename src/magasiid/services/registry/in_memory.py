"""In-memory ID registry implementation."""
import threading
from logging import Logger
from typing import Any, Optional

from scitrera_app_framework import get_logger
from scitrera_app_framework.api import Variables

from .base import IDRegistryService, IDRegistryServicePluginBase
from ...exceptions import DuplicateIDError
from ...models import IDTrackingEntry
from ...utils import utc_now


class InMemoryIDRegistryService(IDRegistryService):
    """
    In-memory ID registry.

    Entries live for the lifetime of the instance and are lost on restart.
    A single lock guards the mapping so the duplicate check and insert in
    register_id are atomic across threads and tasks. Callers always receive
    copies; the stored entries change only through deactivate_id.
    """

    def __init__(self, v: Variables = None):
        # {id -> IDTrackingEntry}
        self._entries: dict[str, IDTrackingEntry] = {}
        self._lock = threading.Lock()

        self.logger = get_logger(v, name=self.__class__.__name__)
        self.logger.info("Initialized IDRegistryService with in-memory storage")

    async def register_id(self, id: str, purpose: str, data: Optional[Any] = None) -> IDTrackingEntry:
        with self._lock:
            if id in self._entries:
                self.logger.warning("Rejected duplicate registration: %s", id)
                raise DuplicateIDError(id)
            entry = IDTrackingEntry(
                id=id,
                created_at=utc_now(),
                purpose=purpose,
                associated_data=data,
                is_active=True,
            )
            self._entries[id] = entry
            snapshot = entry.model_copy()

        self.logger.info("Registered ID: %s (purpose: %s)", id, purpose)
        return snapshot

    async def get_id_info(self, id: str) -> Optional[IDTrackingEntry]:
        with self._lock:
            entry = self._entries.get(id)
            if entry is None:
                self.logger.debug("ID not found: %s", id)
                return None
            return entry.model_copy()

    async def deactivate_id(self, id: str) -> bool:
        with self._lock:
            entry = self._entries.get(id)
            if entry is None:
                self.logger.debug("Cannot deactivate unknown ID: %s", id)
                return False
            entry.is_active = False

        self.logger.debug("Deactivated ID: %s", id)
        return True

    async def get_all_ids(self) -> list[IDTrackingEntry]:
        with self._lock:
            return [entry.model_copy() for entry in self._entries.values()]

    async def count(self) -> int:
        with self._lock:
            return len(self._entries)


class InMemoryIDRegistryServicePlugin(IDRegistryServicePluginBase):
    """Plugin for the in-memory ID registry."""
    PROVIDER_NAME = 'in-memory'

    def initialize(self, v: Variables, logger: Logger) -> IDRegistryService:
        return InMemoryIDRegistryService(v=v)
