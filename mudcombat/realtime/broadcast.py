"""
Text output helpers for combat narration.

Broadcaster delivers markup-annotated lines to characters, rooms and
parties. Characters without a live session (NPCs, disconnected players)
are skipped silently. The bar helpers build the fixed-width progress bars
used by the combat prompt.
"""

from collections.abc import Iterable

from ..game.world import WorldRegistry
from ..models.character import Character
from ..models.party import Party
from ..structured_logging.enhanced_logging_config import get_logger
from .session import SessionManager

logger = get_logger(__name__)


def line(width: int, char: str = " ") -> str:
    """A run of ``width`` copies of ``char`` (empty for non-positive widths)."""
    return char[:1] * max(width, 0)


def progress(width: int, percent: int, color: str, bar_char: str = "#", fill_char: str = " ") -> str:
    """
    Render a bracketed progress bar exactly ``width`` columns wide.

    Args:
        width: Visible width including the brackets
        percent: Fill level; values outside 0-100 are clamped
        color: Markup color tag wrapped around the bar
        bar_char: Character used for the filled part
        fill_char: Character used for the empty part

    Returns:
        Markup string such as ``<green>[#####     ]</green>``
    """
    percent = min(max(percent, 0), 100)
    inner = max(width - 2, 0)
    filled = round(inner * percent / 100)
    return f"<{color}>[{line(filled, bar_char)}{line(inner - filled, fill_char)}]</{color}>"


class Broadcaster:
    """Sends narration to characters through their sessions."""

    def __init__(self, world: WorldRegistry, sessions: SessionManager) -> None:
        self._world = world
        self._sessions = sessions

    def say_at(self, character: Character, message: str) -> bool:
        """
        Send one line to a character.

        Returns:
            True if the character had a live session to receive it
        """
        session = self._sessions.get(character.character_id)
        if session is None:
            return False
        session.send(message)
        logger.debug("Narration sent", character_id=character.character_id, message=message)
        return True

    def say_at_many(self, characters: Iterable[Character], message: str) -> None:
        for character in characters:
            self.say_at(character, message)

    def say_at_except(self, room_id: str | None, message: str, excluded_ids: Iterable[str] = ()) -> None:
        """Send a line to every occupant of a room except the excluded characters."""
        excluded = set(excluded_ids)
        for occupant in self._world.characters_in_room(room_id):
            if occupant.character_id in excluded:
                continue
            self.say_at(occupant, message)

    def say_at_party(self, party: Party, message: str) -> None:
        """Send a line to every member of a party, wherever they are."""
        self.say_at_many(self._world.party_members(party), message)

    def prompt(self, character: Character) -> None:
        """Redraw the character's prompts, if their transport renders them."""
        session = self._sessions.get(character.character_id)
        if session is not None:
            session.show_prompt()
