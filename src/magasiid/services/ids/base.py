"""
ID Service - Generation composed with registry tracking.

Operations:
- generate: Build a single identifier (no registry side effects)
- validate: Check prefix and checksum of an identifier
- generate_and_register: Build an identifier and start tracking it
- generate_batch: Build several untracked identifiers
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from scitrera_app_framework.api import Plugin, Variables, enabled_option_pattern

from ...config import (
    MAGASIID_ID_SERVICE,
    DEFAULT_MAGASIID_ID_SERVICE,
)
from ...models import IDTrackingEntry
from ...utils.id_generation import ConfigLike

from .._constants import EXT_ID_SERVICE, EXT_ID_REGISTRY_SERVICE


class IDService(ABC):
    """Interface for the ID service."""

    logger: logging.Logger = None

    @abstractmethod
    async def generate(self, config: ConfigLike = None) -> str:
        """Generate one identifier without registering it."""
        pass

    @abstractmethod
    async def validate(self, id: str, config: ConfigLike = None) -> bool:
        """Validate an identifier against a configuration."""
        pass

    @abstractmethod
    async def generate_and_register(
            self,
            purpose: str,
            config: ConfigLike = None,
            data: Optional[Any] = None,
    ) -> IDTrackingEntry:
        """Generate an identifier and register it in one step.

        A freshly generated identifier can collide with a registered one; the
        resulting DuplicateIDError is surfaced and callers may retry.

        Args:
            purpose: Free-text label stored on the entry
            config: Optional partial ID configuration
            data: Optional opaque payload stored on the entry

        Returns:
            The registered entry

        Raises:
            DuplicateIDError: If the generated identifier is already registered
            InvalidConfigurationError: If the configuration is out of domain
        """
        pass

    @abstractmethod
    async def generate_batch(self, count: int, config: ConfigLike = None) -> list[str]:
        """Generate exactly ``count`` identifiers without registering them.

        Uniqueness across the batch is not guaranteed.

        Raises:
            InvalidConfigurationError: If count is negative or above the configured maximum
        """
        pass


# noinspection PyAbstractClass
class IDServicePluginBase(Plugin):
    """Base plugin for the ID service."""
    PROVIDER_NAME: str = None

    def name(self) -> str:
        return f"{EXT_ID_SERVICE}|{self.PROVIDER_NAME}"

    def extension_point_name(self, v: Variables) -> str:
        return EXT_ID_SERVICE

    def is_enabled(self, v: Variables) -> bool:
        return enabled_option_pattern(self, v, MAGASIID_ID_SERVICE, self_attr='PROVIDER_NAME')

    def on_registration(self, v: Variables) -> None:
        v.set_default_value(MAGASIID_ID_SERVICE, DEFAULT_MAGASIID_ID_SERVICE)

    def get_dependencies(self, v: Variables):
        return (EXT_ID_REGISTRY_SERVICE,)
