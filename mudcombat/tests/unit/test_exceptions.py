"""
Unit tests for the exception hierarchy.
"""

from mudcombat.exceptions import (
    CombatError,
    CombatInvalidTargetError,
    ConfigurationError,
    MudCombatError,
    RespawnLocationError,
    create_error_context,
)


def test_error_context_to_dict():
    """Context serializes for logging."""
    context = create_error_context(character_id="ann", room_id="arena", event_kind="killed")
    data = context.to_dict()

    assert data["character_id"] == "ann"
    assert data["room_id"] == "arena"
    assert data["event_kind"] == "killed"
    assert "timestamp" in data


def test_invalid_target_error():
    """Invalid targets carry a player-facing message and the target id."""
    error = CombatInvalidTargetError("Target is not attackable", target_id="bob")

    assert isinstance(error, CombatError)
    assert isinstance(error, MudCombatError)
    assert error.user_friendly == "You can't attack that target."
    assert error.details["target_id"] == "bob"
    assert error.target_id == "bob"


def test_respawn_location_error_details():
    """Respawn failures name both candidate rooms."""
    error = RespawnLocationError("No respawn room", home_room_id="cottage", starting_room_id=None)

    assert isinstance(error, ConfigurationError)
    assert error.config_key == "starting_room"
    assert error.details == {"config_key": "starting_room", "home_room_id": "cottage", "starting_room_id": None}


def test_errors_are_logged_on_construction():
    """Errors log themselves once and say so."""
    error = CombatError("Round failed", combat_action="attack")

    assert error.already_logged is True
    assert error.to_dict()["details"] == {"combat_action": "attack"}
    assert error.to_dict()["error_type"] == "CombatError"
