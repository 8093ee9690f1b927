"""
Centralized extension point constants for all MagasiID services.

All EXT_* constants are defined here to avoid circular import issues.
"""

# ============================================
# Registry
# ============================================
EXT_ID_REGISTRY_SERVICE = 'magasiid-registry-service'

# ============================================
# ID Service
# ============================================
EXT_ID_SERVICE = 'magasiid-id-service'
