"""
Enhanced structlog-based logging configuration for mudcombat.

This module is the single entry point for obtaining loggers and configuring
the structlog processor chain. All application code should use get_logger()
from this module rather than calling structlog.get_logger() directly.
"""

# pylint: disable=too-few-public-methods  # Reason: Logging configuration classes with focused responsibility, minimal public interface

import json
import logging
import os
import sys
from typing import Any, cast

import structlog
from structlog.contextvars import merge_contextvars
from structlog.stdlib import BoundLogger, LoggerFactory

from mudcombat.structured_logging.logging_processors import add_correlation_id, strip_narration_markup

# Module-level logger for internal use
logger = structlog.get_logger(__name__)

VALID_ENVIRONMENTS = ("unit_test", "local", "production")


class _LoggingState:
    """State container for logging initialization to avoid global statements."""

    initialized: bool = False
    signature: str | None = None


_logging_state = _LoggingState()


def detect_environment() -> str:
    """
    Detect the current environment based on various indicators.

    Returns:
        Environment name: "unit_test", "local", or "production"
    """
    if "pytest" in sys.modules:
        return "unit_test"

    env = os.getenv("LOGGING_ENVIRONMENT", "")
    if env in VALID_ENVIRONMENTS:
        return env

    return "local"


def configure_enhanced_structlog(
    environment: str | None = None,
    log_level: str = "INFO",
    log_config: dict[str, Any] | None = None,
) -> None:
    """
    Configure Structlog with the mudcombat processor chain.

    Args:
        environment: Environment name (auto-detected if None)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_config: Logging configuration dictionary
    """
    if environment is None:
        environment = detect_environment()

    level = getattr(logging, log_level.upper(), logging.INFO)
    if not (log_config and log_config.get("disable_logging", False)):
        logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)

    base_processors = [
        strip_narration_markup,
        add_correlation_id,
        merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Any
    if environment == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "logger", "event"])

    structlog.configure(
        processors=base_processors + [renderer],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=False,
    )

    configured_logger = structlog.get_logger(__name__)
    configured_logger.debug("Structlog configured", environment=environment, log_level=log_level)


def setup_enhanced_logging(config: dict[str, Any], *, force_reconfigure: bool = False) -> None:
    """
    Set up logging from a configuration dictionary.

    Args:
        config: Configuration dictionary with an optional "logging" section
        force_reconfigure: When True, reconfigure even if already initialized
    """
    config_signature = json.dumps(config, sort_keys=True, default=str)

    if _logging_state.initialized and not force_reconfigure:
        get_logger("mudcombat.structured_logging.setup").debug(
            "setup_enhanced_logging skipped; logging system already initialized",
            config_signature=_logging_state.signature,
        )
        return

    logging_config = config.get("logging", {})
    environment = logging_config.get("environment") or detect_environment()
    log_level = logging_config.get("level", "INFO")

    configure_enhanced_structlog(environment, log_level, logging_config)

    get_logger("mudcombat.structured_logging.enhanced").info(
        "Logging system initialized",
        environment=environment,
        log_level=log_level,
    )

    _logging_state.initialized = True
    _logging_state.signature = config_signature


def get_logger(name: str) -> Any:  # Returns BoundLogger but typed as Any for flexibility
    """
    Get a Structlog logger with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured Structlog logger instance
    """
    return structlog.get_logger(name)


def log_exception_once(
    bound_logger: BoundLogger,
    level: str,
    message: str,
    *,
    exc: Exception | None = None,
    mark_logged: bool = True,
    **kwargs: Any,
) -> None:
    """
    Log an exception once, respecting exceptions that have already been logged.

    Args:
        bound_logger: Structlog bound logger instance.
        level: Logging level to use (for example, "error" or "warning").
        message: Log message to emit.
        exc: Optional exception to include in the log entry.
        mark_logged: When True, mark the exception as logged to prevent duplicates.
        **kwargs: Additional key-value pairs for structured logging.
    """
    if exc is not None:
        if getattr(exc, "already_logged", False):
            return
        kwargs.setdefault("error_type", type(exc).__name__)
        kwargs.setdefault("error", str(exc))

    log_method = getattr(bound_logger, level.lower(), bound_logger.error)
    log_method(message, **kwargs)

    if exc is not None and mark_logged:
        marker = getattr(exc, "mark_logged", None)
        if callable(marker):
            marker()  # pylint: disable=not-callable  # Reason: callable() check confirms marker is callable at runtime
        else:
            cast(Any, exc).already_logged = True
