"""Shared utilities for MagasiID."""

from .datetime import utc_now, epoch_millis
from .id_generation import (
    calculate_checksum,
    format_id,
    generate_advanced_id,
    generate_batch,
    resolve_config,
    to_base36,
    validate_id,
)

__all__ = [
    "utc_now",
    "epoch_millis",
    "calculate_checksum",
    "format_id",
    "generate_advanced_id",
    "generate_batch",
    "resolve_config",
    "to_base36",
    "validate_id",
]
