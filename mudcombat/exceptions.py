"""
Exception hierarchy for mudcombat.

Errors carry structured context so that a failure in a combat handler can be
traced back to the character, room and event that caused it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ErrorContext:
    """Contextual information for error handling."""

    character_id: str | None = None
    room_id: str | None = None
    event_kind: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for logging."""
        return {
            "character_id": self.character_id,
            "room_id": self.room_id,
            "event_kind": self.event_kind,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


class MudCombatError(Exception):
    """
    Base exception for all mudcombat errors.

    Provides structured error handling with context and metadata
    for proper error categorization and debugging.
    """

    # Level the error is logged at when constructed
    log_level = "error"

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        details: dict[str, Any] | None = None,
        user_friendly: str | None = None,
    ):
        """
        Initialize mudcombat error.

        Args:
            message: Technical error message
            context: Error context information
            details: Additional error details
            user_friendly: User-friendly error message
        """
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.details = details or {}
        self.user_friendly = user_friendly or message
        self.timestamp = datetime.now()

        self._log_error()
        # Handlers further up use log_exception_once() and skip this error
        self.already_logged = True

    def _log_error(self) -> None:
        """Log the error with structured context."""
        log_method = getattr(logger, self.log_level, logger.error)
        log_method(
            "mudcombat error occurred",
            error_type=self.__class__.__name__,
            message=self.message,
            context=self.context.to_dict(),
            details=self.details,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for structured transports."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "user_friendly": self.user_friendly,
            "context": self.context.to_dict(),
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class CombatError(MudCombatError):
    """Errors raised by the combat engine while resolving a round."""

    def __init__(self, message: str, context: ErrorContext | None = None, combat_action: str | None = None, **kwargs):
        super().__init__(message, context, **kwargs)
        self.combat_action = combat_action
        if combat_action:
            self.details["combat_action"] = combat_action


class CombatInvalidTargetError(CombatError):
    """The character's current target cannot be attacked."""

    log_level = "info"

    def __init__(self, message: str, context: ErrorContext | None = None, target_id: str | None = None, **kwargs):
        kwargs.setdefault("user_friendly", "You can't attack that target.")
        super().__init__(message, context, **kwargs)
        self.target_id = target_id
        if target_id:
            self.details["target_id"] = target_id


class ConfigurationError(MudCombatError):
    """Configuration and setup errors."""

    def __init__(self, message: str, context: ErrorContext | None = None, config_key: str | None = None, **kwargs):
        super().__init__(message, context, **kwargs)
        self.config_key = config_key
        if config_key:
            self.details["config_key"] = config_key


class RespawnLocationError(ConfigurationError):
    """Neither the home waypoint nor the starting room resolves to a room."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        home_room_id: str | None = None,
        starting_room_id: str | None = None,
        **kwargs,
    ):
        super().__init__(message, context, config_key="starting_room", **kwargs)
        self.details["home_room_id"] = home_room_id
        self.details["starting_room_id"] = starting_room_id


def create_error_context(**kwargs) -> ErrorContext:
    """
    Create an error context with the given parameters.

    Args:
        **kwargs: Context parameters

    Returns:
        ErrorContext object
    """
    return ErrorContext(**kwargs)
