"""roombroker logging — structlog setup from configuration."""

from roombroker.logging.configuration import configure_logging

__all__ = ["configure_logging"]
