"""Room model: a location identity used for co-location checks and relocation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Room:
    """A room in the world."""

    room_id: str
    name: str
