"""
Unit tests for player sessions and their prompts.
"""

from mudcombat.realtime.session import BufferedChannel, PlayerSession, SessionManager, TransportKind


def test_render_prompts_joins_non_empty():
    """Prompts are evaluated in order and empty ones are dropped."""
    session = PlayerSession("ann")
    session.add_prompt("status", lambda: "HP 100")
    session.add_prompt("combat", lambda: "")
    session.add_prompt("quest", lambda: "Quest: 1/3")

    assert session.render_prompts() == "HP 100\r\nQuest: 1/3"


def test_add_prompt_replaces_same_name():
    """A prompt name is attached at most once."""
    session = PlayerSession("ann")
    session.add_prompt("status", lambda: "old")
    session.add_prompt("status", lambda: "new")

    assert session.render_prompts() == "new"


def test_remove_prompt():
    """Removing reports whether anything was attached."""
    session = PlayerSession("ann")
    session.add_prompt("combat", lambda: "bars")

    assert session.remove_prompt("combat") is True
    assert session.remove_prompt("combat") is False
    assert not session.has_prompt("combat")


def test_show_prompt_structured_transport_is_silent():
    """Structured transports never receive rendered prompts."""
    channel = BufferedChannel()
    session = PlayerSession("ann", channel=channel, transport=TransportKind.STRUCTURED)
    session.add_prompt("status", lambda: "HP 100")

    session.show_prompt()

    assert channel.lines == []
    assert session.uses_rendered_prompt is False


def test_show_prompt_skips_empty():
    """Nothing is sent when every prompt renders empty."""
    session = PlayerSession("ann")
    session.add_prompt("combat", lambda: "")

    session.show_prompt()

    assert session.channel.lines == []


def test_session_manager_connect_disconnect():
    """Sessions are tracked by character id."""
    sessions = SessionManager()
    session = sessions.connect(PlayerSession("ann"))

    assert sessions.get("ann") is session
    sessions.disconnect("ann")
    sessions.disconnect("ann")
    assert sessions.get("ann") is None
