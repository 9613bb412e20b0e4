"""Equipment items that can be the proximate source of an effect."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An equippable item such as a weapon."""

    item_id: str
    name: str
