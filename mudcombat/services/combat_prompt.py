"""
Combat prompt rendering.

The combat prompt is a block of health bars shown under combat output:
the viewer's own bar first, then one bar per combatant. It is evaluated
each time the prompt is displayed, so it always reflects current values.
"""

from ..game.world import WorldRegistry
from ..models.character import HEALTH, Character
from ..realtime.broadcast import line, progress

COMBAT_PROMPT = "combat"
SELF_LABEL = "You"
LABEL_SEPARATOR = ":  "
SELF_BAR_COLOR = "green"
HOSTILE_BAR_COLOR = "red"
DEFAULT_PROMPT_WIDTH = 60


def health_percentage(character: Character) -> int:
    """``floor(current / max * 100)`` for health; 0 when the maximum is 0."""
    maximum = character.get_max_attribute(HEALTH)
    if maximum <= 0:
        return 0
    return character.get_attribute(HEALTH) * 100 // maximum


class CombatPromptBuilder:
    """Renders the health-bar block for a character in combat."""

    def __init__(self, world: WorldRegistry, width: int = DEFAULT_PROMPT_WIDTH) -> None:
        self._world = world
        self._width = width

    def _bar_line(self, label: str, name_width: int, bar_width: int, character: Character, color: str) -> str:
        pad = line(name_width - len(label))
        bar = progress(bar_width, health_percentage(character), color)
        current = character.get_attribute(HEALTH)
        maximum = character.get_max_attribute(HEALTH)
        return f"<b>{label}{pad}</b>: {bar} <b>{current}/{maximum}</b>"

    def render(self, viewer: Character) -> str:
        """
        Render the prompt for ``viewer``.

        Returns:
            One line per participant joined by CRLF, or an empty string when
            the viewer has no active combatants
        """
        if not viewer.is_in_combat():
            return ""
        combatants = list(self._world.combatants_of(viewer))
        if not combatants:
            return ""

        name_width = max(len(SELF_LABEL), *(len(combatant.name) for combatant in combatants))
        bar_width = self._width - (name_width + len(LABEL_SEPARATOR))

        lines = [self._bar_line(SELF_LABEL, name_width, bar_width, viewer, SELF_BAR_COLOR)]
        lines.extend(
            self._bar_line(combatant.name, name_width, bar_width, combatant, HOSTILE_BAR_COLOR)
            for combatant in combatants
        )
        return "\r\n".join(lines)
