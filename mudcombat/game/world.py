"""
In-memory world registry.

The registry is the authoritative owner of characters, rooms and parties for
the combat presentation layer. Every cross-entity reference (a character's
room, party or combatants; an effect's attacker or target) is an identifier
resolved here, so removing an entity from the registry is all it takes to
end its participation.
"""

from collections.abc import Iterable, Iterator

from ..models.character import Character
from ..models.party import Party
from ..models.room import Room
from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


class RoomManager:
    """Room lookup by identifier."""

    def __init__(self, rooms: Iterable[Room] = ()) -> None:
        self._rooms: dict[str, Room] = {room.room_id: room for room in rooms}

    def add_room(self, room: Room) -> None:
        self._rooms[room.room_id] = room

    def get_room(self, room_id: str | None) -> Room | None:
        """Return the room, or None for a missing or unknown identifier."""
        if not room_id:
            return None
        return self._rooms.get(room_id)

    def __len__(self) -> int:
        return len(self._rooms)


class WorldRegistry:
    """Characters, rooms and parties known to the server."""

    def __init__(self, room_manager: RoomManager | None = None) -> None:
        self.room_manager = room_manager or RoomManager()
        self._characters: dict[str, Character] = {}
        self._parties: dict[str, Party] = {}

    # ---- characters ----
    def add_character(self, character: Character) -> Character:
        self._characters[character.character_id] = character
        return character

    def remove_character(self, character_id: str) -> None:
        self._characters.pop(character_id, None)

    def get_character(self, character_id: str | None) -> Character | None:
        if character_id is None:
            return None
        return self._characters.get(character_id)

    def characters_in_room(self, room_id: str | None) -> list[Character]:
        """Occupants of a room in registration order."""
        if room_id is None:
            return []
        return [character for character in self._characters.values() if character.room_id == room_id]

    def combatants_of(self, character: Character) -> Iterator[Character]:
        """Resolve a character's active combatants, skipping any that no longer exist."""
        for combatant_id in character.combatant_ids:
            combatant = self._characters.get(combatant_id)
            if combatant is not None:
                yield combatant

    # ---- rooms ----
    def add_room(self, room: Room) -> Room:
        self.room_manager.add_room(room)
        return room

    def get_room(self, room_id: str | None) -> Room | None:
        return self.room_manager.get_room(room_id)

    # ---- parties ----
    def add_party(self, party: Party) -> Party:
        """Register a party and point each member at it."""
        self._parties[party.party_id] = party
        for member_id in party.member_ids:
            member = self._characters.get(member_id)
            if member is not None:
                member.party_id = party.party_id
        return party

    def get_party(self, party_id: str | None) -> Party | None:
        if party_id is None:
            return None
        return self._parties.get(party_id)

    def party_of(self, character: Character) -> Party | None:
        return self.get_party(character.party_id)

    def party_members(self, party: Party) -> Iterator[Character]:
        """Resolve party members in party order, skipping unknown ids."""
        for member_id in party.member_ids:
            member = self._characters.get(member_id)
            if member is None:
                logger.debug("Party member not registered", party_id=party.party_id, member_id=member_id)
                continue
            yield member
