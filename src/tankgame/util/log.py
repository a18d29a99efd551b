"""Logging setup for applications embedding the rule engine."""

import logging

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure root logging.

    Rule evaluation logs individual failures at DEBUG, so pass
    ``logging.DEBUG`` to trace why an action was rejected.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "configure_logging"]
