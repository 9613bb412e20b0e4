"""
Party fan-out for combat narration.

Party members standing in the same room as the actor witness the actor's
combat actions. Each witness gets a message built for them individually.
"""

from collections.abc import Callable

from ..game.world import WorldRegistry
from ..models.character import Character
from .broadcast import Broadcaster

MessageForMember = Callable[[Character], str]


class PartyBroadcaster:
    """Sends per-member narration to the actor's co-located party members."""

    def __init__(self, world: WorldRegistry, broadcaster: Broadcaster) -> None:
        self._world = world
        self._broadcaster = broadcaster

    def witnesses(self, actor: Character) -> list[Character]:
        """
        Party members who can see the actor act.

        Excludes the actor and anyone not in the actor's room. Order follows
        party membership order.
        """
        party = self._world.party_of(actor)
        if party is None:
            return []
        return [
            member
            for member in self._world.party_members(party)
            if member.character_id != actor.character_id
            and actor.room_id is not None
            and member.room_id == actor.room_id
        ]

    def broadcast(self, actor: Character, message_for_member: MessageForMember) -> int:
        """
        Send ``message_for_member(member)`` to each witness.

        Returns:
            Number of members the message was built for
        """
        witnesses = self.witnesses(actor)
        for member in witnesses:
            self._broadcaster.say_at(member, message_for_member(member))
        return len(witnesses)
