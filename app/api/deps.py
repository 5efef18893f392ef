"""FastAPI dependencies shared by endpoint handlers."""

import logging

HELLO_LOGGER_NAME = "app.api.endpoints.hello"


def get_logger() -> logging.Logger:
    """Return the logger handed to the greeting handler (override in tests)."""
    return logging.getLogger(HELLO_LOGGER_NAME)
