"""MagasiID - Structured identifier generation, validation and tracking."""

from .exceptions import (
    DuplicateIDError,
    InvalidConfigurationError,
    MagasiIDError,
)
from .models import IDConfiguration, IDTrackingEntry
from .utils.id_generation import (
    calculate_checksum,
    format_id,
    generate_advanced_id,
    generate_batch,
    resolve_config,
    validate_id,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "IDConfiguration",
    "IDTrackingEntry",
    # Generation
    "resolve_config",
    "generate_advanced_id",
    "validate_id",
    "calculate_checksum",
    "format_id",
    "generate_batch",
    # Exceptions
    "MagasiIDError",
    "DuplicateIDError",
    "InvalidConfigurationError",
]
