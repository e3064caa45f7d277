"""Logger setup for the entitlements SDK."""

import logging

SDK_LOGGER_NAME = "SudoEntitlements"

_HANDLER_ATTR = "_sudo_entitlements_handler"


def get_sdk_logger() -> logging.Logger:
    """Return the default logger used by the entitlements client."""
    return logging.getLogger(SDK_LOGGER_NAME)


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a stream handler to the SDK logger and set its level.

    Safe to call repeatedly; only one handler is ever attached.
    """
    sdk_logger = get_sdk_logger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    sdk_logger.setLevel(level)

    if not any(getattr(h, _HANDLER_ATTR, False) for h in sdk_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        setattr(handler, _HANDLER_ATTR, True)
        sdk_logger.addHandler(handler)

    return sdk_logger
