"""
Collaborator protocols for the combat presentation layer.

These are owned outside this package: the combat engine resolves rounds,
the command layer runs player commands, and the persistence layer stores
characters. Services depend on these protocols, not on implementations.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from ..events import BaseEvent
from ..models.character import Character

# Delivers a follow-up event (killed, deathblow proxies, weapon hits)
EventDispatcher = Callable[[BaseEvent], Awaitable[None]]


class CombatEngine(Protocol):
    """Protocol for the combat engine dependency."""

    def start_regeneration(self, character: Character) -> None:
        """Apply passive regeneration for this tick."""
        ...

    def update_round(self, character: Character) -> bool:
        """
        Resolve the character's combat round.

        Returns:
            True if any action was taken this tick

        Raises:
            CombatInvalidTargetError: If the current target cannot be attacked
        """
        ...


class CommandDispatcher(Protocol):
    """Protocol for running a player command on a character's behalf."""

    def execute(self, command_name: str, character: Character, args: str = "") -> None: ...


class CharacterPersistence(Protocol):
    """Protocol for persisting character state."""

    def save_character(self, character: Character) -> None: ...
