"""dependency injection for MagasiID.

Uses scitrera-app-framework plugin pattern for service initialization.
Services are lazily initialized on first access via get_extension().
"""
from logging import Logger

from scitrera_app_framework import (
    Variables, get_variables, get_logger, init_framework_desktop,
    async_plugins_ready, async_plugins_stopping
)
from .config import MAGASIID_DATA_DIR


# noinspection PyTypeHints
def preconfigure(v: Variables = None, test_mode: bool = False, test_logger: Logger = None) -> (Variables, dict):
    """ Pre-configure the framework """
    from scitrera_app_framework import register_package_plugins
    from . import services  # noqa: F401

    # handle test mode
    additional_kwargs = {} if not test_mode else {
        'fault_handler': False,
        'fixed_logger': test_logger,
        'pyroscope': False,
        'shutdown_hooks': False,
    }

    # init framework (has internal protection against multiple invocations)
    v: Variables = init_framework_desktop(
        'magasiid',
        base_plugins=False,  # disable base plugins (we don't need them)
        stateful_chdir=False,  # registry is volatile, nothing is written to the stateful root
        stateful_root_env_key=MAGASIID_DATA_DIR,
        async_auto_enabled=False,  # manage async plugin lifecycle hooks manually
        v=v,  # allow variables instance pass-through
        **additional_kwargs
    )

    # avoid duplicate invocations of preconfigure()
    if v.get('__preconfigure_complete__', default=False):
        return v, services

    logger = get_logger(v)

    logger.debug('Registering core services')
    register_package_plugins(services.__package__, v, recursive=True)

    v.set('__preconfigure_complete__', True)
    return v, services


async def initialize_services(v: Variables = None) -> Variables:
    """Initialize all services on application startup."""

    # ensure preconfigured
    v, services = preconfigure(v)
    logger = get_logger(v)

    logger.debug("Initializing services")
    from scitrera_app_framework.core.plugins import init_all_plugins
    init_all_plugins(v, async_enabled=False)  # handle sync part
    await async_plugins_ready(v)  # handle async part with sequencing managed

    return v


async def shutdown_services(v: Variables = None) -> None:
    """Shutdown all services on application shutdown."""

    v = get_variables(v)
    logger = get_logger(v)

    logger.debug("Shutting down services")
    await async_plugins_stopping(v)

    from scitrera_app_framework.core.plugins import shutdown_all_plugins
    shutdown_all_plugins(v)
