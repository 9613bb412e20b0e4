"""
Unit tests for combat narration formatting.

Narration is compared with markup removed unless the markup itself is under
test.
"""

import pytest

from mudcombat.models import Damage, EffectMetadata, EffectSource, Heal, Item
from mudcombat.services.combat_messaging_service import CRITICAL_MARKER, CombatMessagingService
from mudcombat.structured_logging.logging_processors import strip_markup
from mudcombat.tests.fixtures.combat_world import make_character

SWORD = Item("sword-1", "Sword")
CLAWS = Item("claws-1", "Claws")
MENDING = EffectSource("spell-mending", "Mending")


@pytest.fixture
def messaging():
    """Create a CombatMessagingService instance."""
    return CombatMessagingService()


@pytest.fixture
def ann():
    return make_character("ann", "Ann")


@pytest.fixture
def bob():
    return make_character("bob", "Bob", is_npc=True)


@pytest.fixture
def cid():
    return make_character("cid", "Cid")


def test_hit_for_attacker_without_source(messaging, ann, bob):
    """Damage with no source is narrated as the attacker's own hit."""
    damage = Damage(target_id="bob", attacker_id="ann")
    assert strip_markup(messaging.hit_for_attacker(damage, ann, bob, 12)) == "You hit Bob for 12 damage."


def test_hit_for_attacker_with_self_source(messaging, ann, bob):
    """A source that is the attacker reads the same as no source."""
    damage = Damage(target_id="bob", source=EffectSource.from_character(ann), attacker_id="ann")
    assert strip_markup(messaging.hit_for_attacker(damage, ann, bob, 12)) == "You hit Bob for 12 damage."


def test_hit_for_attacker_with_weapon(messaging, ann, bob):
    """A weapon source is named possessively."""
    damage = Damage(target_id="bob", source=EffectSource.from_item(SWORD), attacker_id="ann")
    message = messaging.hit_for_attacker(damage, ann, bob, 12)
    assert message == "Your <b>Sword</b> hit <b>Bob</b> for <b>12</b> damage."


def test_hit_for_attacker_critical(messaging, ann, bob):
    """Critical hits get the critical marker appended."""
    damage = Damage(target_id="bob", attacker_id="ann", metadata=EffectMetadata(critical=True))
    message = messaging.hit_for_attacker(damage, ann, bob, 30)
    assert message.endswith(CRITICAL_MARKER)
    assert strip_markup(message) == "You hit Bob for 30 damage. (Critical)"


def test_hit_for_witness(messaging, ann, bob):
    """Party members see the attacker by name, without the critical marker."""
    plain = Damage(target_id="bob", attacker_id="ann", metadata=EffectMetadata(critical=True))
    armed = Damage(target_id="bob", source=EffectSource.from_item(SWORD), attacker_id="ann")
    assert strip_markup(messaging.hit_for_witness(plain, ann, bob, 12)) == "Ann hit Bob for 12 damage."
    assert strip_markup(messaging.hit_for_witness(armed, ann, bob, 12)) == "Ann's Sword hit Bob for 12 damage."


def test_damaged_for_victim_cause_variants(messaging, bob):
    """The cause clause names attacker, attacker's source, source alone, or Something."""
    by_bob = Damage(target_id="ann", attacker_id="bob")
    by_claws = Damage(target_id="ann", source=EffectSource.from_item(CLAWS), attacker_id="bob")
    by_trap = Damage(target_id="ann", source=EffectSource("trap-1", "Spike Trap"))
    by_nothing = Damage(target_id="ann")

    assert strip_markup(messaging.damaged_for_victim(by_bob, bob, 7)) == "Bob hit You for 7 damage."
    assert strip_markup(messaging.damaged_for_victim(by_claws, bob, 7)) == "Bob's Claws hit You for 7 damage."
    assert strip_markup(messaging.damaged_for_victim(by_trap, None, 7)) == "Spike Trap hit You for 7 damage."
    assert strip_markup(messaging.damaged_for_victim(by_nothing, None, 7)) == "Something hit You for 7 damage."


def test_damaged_for_victim_amount_is_red(messaging, bob):
    """The damage amount is highlighted for the victim."""
    damage = Damage(target_id="ann", attacker_id="bob")
    assert "<b><red>7</red></b>" in messaging.damaged_for_victim(damage, bob, 7)


def test_damaged_for_victim_critical(messaging, bob):
    """The victim sees the critical marker too."""
    damage = Damage(target_id="ann", attacker_id="bob", metadata=EffectMetadata(critical=True))
    assert messaging.damaged_for_victim(damage, bob, 7).endswith(CRITICAL_MARKER)


def test_damaged_for_witness(messaging, ann, bob):
    """Witnesses see the victim named."""
    damage = Damage(target_id="ann", source=EffectSource.from_character(bob), attacker_id="bob")
    assert strip_markup(messaging.damaged_for_witness(damage, bob, ann, 7)) == "Bob hit Ann for 7 damage."


def test_heal_for_caster(messaging, ann, cid):
    """Casters see their heal with the affected attribute."""
    plain = Heal(target_id="cid", attacker_id="ann")
    spell = Heal(target_id="cid", source=MENDING, attacker_id="ann")
    assert strip_markup(messaging.heal_for_caster(plain, ann, cid, 10)) == "You heal Cid for 10 health."
    assert strip_markup(messaging.heal_for_caster(spell, ann, cid, 10)) == "Your Mending healed Cid for 10 health."


def test_heal_for_witness(messaging, ann, cid):
    """Witnesses see the caster by name."""
    spell = Heal(target_id="cid", source=MENDING, attacker_id="ann")
    assert strip_markup(messaging.heal_for_witness(spell, ann, cid, 10)) == "Ann's Mending healed Cid for 10 health."


def test_healed_for_recipient_health(messaging, ann, cid):
    """Health heals read 'heals you for'."""
    heal = Heal(target_id="ann", source=EffectSource.from_character(cid), attacker_id="cid")
    message = messaging.healed_for_recipient(heal, cid, ann, 10)
    assert strip_markup(message) == "Cid heals you for 10."
    assert "<green>10</green>" in message


def test_healed_for_recipient_self_heal_names_only_source(messaging, ann):
    """A self-applied heal treats the healer as absent."""
    heal = Heal(target_id="ann", source=MENDING, attacker_id="ann")
    assert strip_markup(messaging.healed_for_recipient(heal, ann, ann, 10)) == "Mending heals you for 10."


def test_healed_for_recipient_other_attribute(messaging, ann):
    """Heals of other pools read 'restores N <attribute>'."""
    heal = Heal(target_id="ann", source=EffectSource.from_item(Item("potion-1", "Potion")), attribute="mana")
    assert strip_markup(messaging.healed_for_recipient(heal, None, ann, 5)) == "Potion restores 5 mana."


def test_healed_for_witness(messaging, ann, cid):
    """Witnesses see who healed whom."""
    heal = Heal(target_id="ann", attacker_id="cid")
    assert strip_markup(messaging.healed_for_witness(heal, cid, ann, 10)) == "Cid heals Ann for 10."


def test_death_messages(messaging, ann, bob):
    """Death narration varies on killer presence."""
    assert strip_markup(messaging.death_for_room(ann, bob)) == "Ann collapses to the ground, dead at the hands of Bob."
    assert strip_markup(messaging.death_for_room(ann, None)) == "Ann collapses to the ground, dead."
    assert strip_markup(messaging.death_for_party(ann)) == "Ann was killed!"
    assert strip_markup(messaging.respawn_flavor()) == "Whoops, that sucked!"
    assert messaging.killed_by(bob) == "You were killed by Bob."


def test_experience_and_deathblow_messages(messaging, bob):
    """Experience loss and kill credit narration."""
    assert strip_markup(messaging.experience_lost(200)) == "You lose 200 experience!"
    assert strip_markup(messaging.deathblow(bob)) == "You killed Bob!"
    assert messaging.invalid_target() == "You can't attack that target."
