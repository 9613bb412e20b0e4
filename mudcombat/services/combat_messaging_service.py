"""
Combat messaging service for combat narration.

This service turns completed effects into markup-annotated narration for
the acting character, the affected character or a watching party member.
It is pure: no output is sent and nothing is mutated here.
"""

from ..models.character import Character
from ..models.effects import Damage, Effect, Heal

CRITICAL_MARKER = " <red><b>(Critical)</b></red>"
INVALID_TARGET_MESSAGE = "You can't attack that target."


class CombatMessagingService:
    """
    Service for generating combat narration.

    Markup tags (<b>, <red>, <green>) are interpreted by the transport
    renderer.
    """

    # ---- clause helpers ----
    @staticmethod
    def _actor_clause(effect: Effect, actor: Character, verb: str, self_verb: str) -> str:
        """'You hit' / 'Your <b>Sword</b> hit' from the acting character's view."""
        if effect.source is None or effect.source_is(actor.character_id):
            return f"You {self_verb}"
        return f"Your <b>{effect.source.name}</b> {verb}"

    @staticmethod
    def _witness_actor_clause(effect: Effect, actor: Character, verb: str) -> str:
        """'Ann hit' / "Ann's <b>Sword</b> hit" from a party member's view."""
        if effect.source is None or effect.source_is(actor.character_id):
            return f"{actor.name} {verb}"
        return f"{actor.name}'s <b>{effect.source.name}</b> {verb}"

    @staticmethod
    def cause_clause(effect: Effect, attacker: Character | None, viewer_id: str | None = None) -> str:
        """
        Name what caused an effect that landed on someone.

        The attacker is named when known, with the proximate source appended
        possessively when it differs (a weapon or spell). Without an attacker
        the source alone is named, and with neither the cause is "Something".
        An attacker equal to the viewer is treated as absent, so a
        self-applied heal names only its source.
        """
        if attacker is not None and attacker.character_id == viewer_id:
            attacker = None

        source = effect.source
        show_source = (
            source is not None
            and source.source_id != viewer_id
            and (attacker is None or source.source_id != attacker.character_id)
        )

        if attacker is not None and show_source:
            return f"<b>{attacker.name}</b>'s <b>{source.name}</b>"  # type: ignore[union-attr]
        if attacker is not None:
            return f"<b>{attacker.name}</b>"
        if show_source:
            return f"<b>{source.name}</b>"  # type: ignore[union-attr]
        return "Something"

    # ---- hit / damaged ----
    def hit_for_attacker(self, damage: Damage, actor: Character, target: Character, final_amount: int) -> str:
        clause = self._actor_clause(damage, actor, "hit", "hit")
        message = f"{clause} <b>{target.name}</b> for <b>{final_amount}</b> damage."
        if damage.critical:
            message += CRITICAL_MARKER
        return message

    def hit_for_witness(self, damage: Damage, actor: Character, target: Character, final_amount: int) -> str:
        clause = self._witness_actor_clause(damage, actor, "hit")
        return f"{clause} <b>{target.name}</b> for <b>{final_amount}</b> damage."

    def damaged_for_victim(self, damage: Damage, attacker: Character | None, final_amount: int) -> str:
        message = f"{self.cause_clause(damage, attacker)} hit <b>You</b> for <b><red>{final_amount}</red></b> damage."
        if damage.critical:
            message += CRITICAL_MARKER
        return message

    def damaged_for_witness(
        self, damage: Damage, attacker: Character | None, victim: Character, final_amount: int
    ) -> str:
        return (
            f"{self.cause_clause(damage, attacker)} hit <b>{victim.name}</b> "
            f"for <b><red>{final_amount}</red></b> damage."
        )

    # ---- heal / healed ----
    def heal_for_caster(self, heal: Heal, caster: Character, target: Character, final_amount: int) -> str:
        clause = self._actor_clause(heal, caster, "healed", "heal")
        return f"{clause} <b>{target.name}</b> for <b><green>{final_amount}</green></b> {heal.attribute}."

    def heal_for_witness(self, heal: Heal, caster: Character, target: Character, final_amount: int) -> str:
        clause = self._witness_actor_clause(heal, caster, "healed")
        return f"{clause} <b>{target.name}</b> for <b><green>{final_amount}</green></b> {heal.attribute}."

    def healed_for_recipient(
        self, heal: Heal, healer: Character | None, recipient: Character, final_amount: int
    ) -> str:
        cause = self.cause_clause(heal, healer, viewer_id=recipient.character_id)
        if heal.affects_health():
            return f"{cause} heals you for <b><green>{final_amount}</green></b>."
        return f"{cause} restores <b>{final_amount}</b> {heal.attribute}."

    def healed_for_witness(self, heal: Heal, healer: Character | None, recipient: Character, final_amount: int) -> str:
        cause = self.cause_clause(heal, healer, viewer_id=recipient.character_id)
        return f"{cause} heals {recipient.name} for <b><green>{final_amount}</green></b>."

    # ---- death ----
    def death_for_room(self, victim: Character, killer: Character | None) -> str:
        if killer is not None:
            return f"<b><red>{victim.name} collapses to the ground, dead at the hands of {killer.name}.</red></b>"
        return f"<b><red>{victim.name} collapses to the ground, dead.</red></b>"

    def death_for_party(self, victim: Character) -> str:
        return f"<b><green>{victim.name} was killed!</green></b>"

    def respawn_flavor(self) -> str:
        return "<b><red>Whoops, that sucked!</red></b>"

    def killed_by(self, killer: Character) -> str:
        return f"You were killed by {killer.name}."

    def experience_lost(self, amount: int) -> str:
        return f"<red>You lose <b>{amount}</b> experience!</red>"

    def deathblow(self, target: Character) -> str:
        return f"<b><red>You killed {target.name}!</red></b>"

    def invalid_target(self) -> str:
        return INVALID_TARGET_MESSAGE
