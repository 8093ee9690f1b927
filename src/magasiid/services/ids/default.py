"""
Default ID Service implementation.

Builds identifiers with the pure generation utilities and tracks them in the
configured ID registry.
"""
from logging import Logger
from typing import Any, Optional

from scitrera_app_framework import get_logger
from scitrera_app_framework.api import Variables

from ...config import MAGASIID_BATCH_MAX_COUNT, DEFAULT_MAGASIID_BATCH_MAX_COUNT
from ...exceptions import InvalidConfigurationError
from ...models import IDTrackingEntry
from ...utils.id_generation import ConfigLike, generate_advanced_id, generate_batch, validate_id
from ..registry import EXT_ID_REGISTRY_SERVICE, IDRegistryService
from .base import IDService, IDServicePluginBase


class DefaultIDService(IDService):
    """Default ID service implementation."""

    def __init__(
        self,
        registry: IDRegistryService,
        v: Variables = None,
        batch_max_count: int = DEFAULT_MAGASIID_BATCH_MAX_COUNT,
    ):
        """
        Initialize ID service.

        Args:
            registry: Registry that tracks issued identifiers
            v: Variables for logging context
            batch_max_count: Largest batch generate_batch will produce
        """
        self.registry = registry
        self.batch_max_count = batch_max_count
        self.logger = get_logger(v, name=self.__class__.__name__)
        self.logger.info("Initialized DefaultIDService with batch_max_count=%d", batch_max_count)

    async def generate(self, config: ConfigLike = None) -> str:
        return generate_advanced_id(config)

    async def validate(self, id: str, config: ConfigLike = None) -> bool:
        return validate_id(id, config)

    async def generate_and_register(
        self,
        purpose: str,
        config: ConfigLike = None,
        data: Optional[Any] = None,
    ) -> IDTrackingEntry:
        id_ = generate_advanced_id(config)
        self.logger.debug("Generated ID %s for purpose: %s", id_, purpose)
        return await self.registry.register_id(id_, purpose, data)

    async def generate_batch(self, count: int, config: ConfigLike = None) -> list[str]:
        if count > self.batch_max_count:
            raise InvalidConfigurationError(
                f"batch of {count} exceeds the maximum of {self.batch_max_count}"
            )
        ids = generate_batch(count, config)
        self.logger.debug("Generated batch of %d IDs", len(ids))
        return ids


class DefaultIDServicePlugin(IDServicePluginBase):
    """Default ID service plugin."""
    PROVIDER_NAME = 'default'

    def initialize(self, v: Variables, logger: Logger) -> IDService:
        registry: IDRegistryService = self.get_extension(EXT_ID_REGISTRY_SERVICE, v)
        batch_max_count = v.environ(
            MAGASIID_BATCH_MAX_COUNT,
            default=DEFAULT_MAGASIID_BATCH_MAX_COUNT,
            type_fn=int,
        )
        return DefaultIDService(registry=registry, v=v, batch_max_count=batch_max_count)
