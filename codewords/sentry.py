"""Error tracking for dictionary builds using Sentry."""

from logging import ERROR, INFO
from socket import gethostname
from typing import TYPE_CHECKING

import sentry_sdk
from sentry_sdk.integrations.argv import ArgvIntegration
from sentry_sdk.integrations.logging import LoggingIntegration, ignore_logger

from codewords import logging as logger

if TYPE_CHECKING:
    from dynaconf import Dynaconf  # type: ignore[import]


def get_sentry_integrations(config: "Dynaconf"):
    """Get Sentry integrations."""
    for _logger in config.SENTRY_IGNORED_LOGGERS:
        ignore_logger(_logger)
    available_integrations = {
        "argv": ArgvIntegration(),
        "logging": LoggingIntegration(
            level=config.get("SENTRY_LOGGING_LEVEL", INFO),
            event_level=config.get("SENTRY_EVENT_LEVEL", ERROR),
        ),
    }
    integrations = []
    for integration in config.SENTRY_INTEGRATIONS:
        integration = integration.strip().lower()
        if not integration:
            continue
        if integration not in available_integrations:
            logger.warning(f"Invalid Sentry integration: {integration}")
            continue
        integrations.append(available_integrations[integration])
        logger.debug(f"Enabled Sentry integration: {integration}")
    return integrations


def setup_sentry(config: "Dynaconf") -> bool:
    """Initialize Sentry, returning whether it was enabled."""
    from codewords import __version__

    if not config.get("SENTRY_DSN"):
        logger.debug("SENTRY_DSN is not set. Sentry is disabled.")
        return False
    sentry_sdk.init(
        dsn=config.SENTRY_DSN,
        integrations=get_sentry_integrations(config),
        traces_sample_rate=config.SENTRY_TRACES_SAMPLE_RATE,
        environment=config.current_env,
        release=f"codewords@{__version__}",
        debug=config.get("SENTRY_DEBUG", config.DEBUG),
        server_name=gethostname(),
    )
    logger.info("Sentry initialized.")
    return True
