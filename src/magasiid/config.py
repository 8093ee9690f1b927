"""Configuration constants for MagasiID."""

# ============================================
# Data Home Directory
# ============================================
MAGASIID_DATA_DIR = 'MAGASIID_DATA_DIR'

# ============================================
# Identifier Defaults
# ============================================
DEFAULT_ID_PREFIX = 'SIAS'
DEFAULT_ID_LENGTH = 16
DEFAULT_ID_INCLUDE_TIMESTAMP = True
DEFAULT_ID_USE_DASHES = True
DEFAULT_ID_INCLUDE_CHECKSUM = True
DEFAULT_ID_CHAR_SET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789'

ID_SEGMENT_SEPARATOR = '-'
FORMAT_PLACEHOLDER = 'X'

# ============================================
# Registry Service
# ============================================
MAGASIID_REGISTRY_SERVICE = 'MAGASIID_REGISTRY_SERVICE'
DEFAULT_MAGASIID_REGISTRY_SERVICE = 'in-memory'

# ============================================
# ID Service
# ============================================
MAGASIID_ID_SERVICE = 'MAGASIID_ID_SERVICE'
DEFAULT_MAGASIID_ID_SERVICE = 'default'

MAGASIID_BATCH_MAX_COUNT = 'MAGASIID_BATCH_MAX_COUNT'
DEFAULT_MAGASIID_BATCH_MAX_COUNT = 10_000
