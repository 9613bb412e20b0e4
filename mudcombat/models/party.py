"""
Party model.

Membership is owned by the party layer; combat narration only reads it to
pick broadcast recipients.
"""

from dataclasses import dataclass, field


@dataclass
class Party:
    """
    In-memory party model.

    member_ids keeps insertion order so that broadcasts reach members in a
    stable order.
    """

    party_id: str
    leader_id: str
    member_ids: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Ensure leader is in member list."""
        if self.leader_id not in self.member_ids:
            self.member_ids = [self.leader_id, *self.member_ids]

    def __contains__(self, character_id: object) -> bool:
        return character_id in self.member_ids

    def add_member(self, character_id: str) -> None:
        if character_id not in self.member_ids:
            self.member_ids.append(character_id)

    def remove_member(self, character_id: str) -> None:
        if character_id in self.member_ids:
            self.member_ids.remove(character_id)
