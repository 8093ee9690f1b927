"""Services package for MagasiID.

This package provides the registry and ID services using the plugin dependency injection pattern from
scitrera-app-framework.

Prefer importing from specific service submodules (e.g., `from .registry import get_id_registry_service`)
rather than from this top-level package.
"""
