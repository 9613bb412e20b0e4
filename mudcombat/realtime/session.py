"""
Player sessions as seen by combat narration.

A session is the output side of a connected player: a text channel, the
transport kind behind it, and the named prompts redrawn after output.
Rendered transports (telnet-style clients) display prompts; structured
transports consume events directly and never get prompt objects.
"""

from collections.abc import Callable
from enum import StrEnum
from typing import Protocol

from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)

PromptRenderer = Callable[[], str]


class TransportKind(StrEnum):
    """How a session consumes server output."""

    RENDERED = "rendered"
    STRUCTURED = "structured"


class OutputChannel(Protocol):
    """Protocol for the transport a session writes to."""

    def write(self, text: str) -> None: ...


class BufferedChannel:
    """Output channel that keeps every line written to it."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, text: str) -> None:
        self.lines.append(text)

    def clear(self) -> None:
        self.lines.clear()


class PlayerSession:
    """Output channel plus prompt state for one connected character."""

    def __init__(
        self,
        character_id: str,
        channel: OutputChannel | None = None,
        transport: TransportKind = TransportKind.RENDERED,
    ) -> None:
        self.character_id = character_id
        self.channel: OutputChannel = channel if channel is not None else BufferedChannel()
        self.transport = transport
        self._prompts: dict[str, PromptRenderer] = {}

    @property
    def uses_rendered_prompt(self) -> bool:
        return self.transport is TransportKind.RENDERED

    def send(self, text: str) -> None:
        self.channel.write(text)

    # ---- prompts ----
    def add_prompt(self, name: str, renderer: PromptRenderer) -> None:
        """Attach a prompt; an existing prompt with the same name is replaced."""
        self._prompts[name] = renderer

    def has_prompt(self, name: str) -> bool:
        return name in self._prompts

    def remove_prompt(self, name: str) -> bool:
        """Detach a prompt. Returns False when it was not attached."""
        return self._prompts.pop(name, None) is not None

    def render_prompts(self) -> str:
        """Evaluate every attached prompt now, dropping empty ones."""
        rendered = (renderer() for renderer in self._prompts.values())
        return "\r\n".join(text for text in rendered if text)

    def show_prompt(self) -> None:
        """Redraw attached prompts on a rendered transport."""
        if not self.uses_rendered_prompt:
            return
        text = self.render_prompts()
        if text:
            self.send(text)


class SessionManager:
    """Live sessions keyed by character id."""

    def __init__(self) -> None:
        self._sessions: dict[str, PlayerSession] = {}

    def connect(self, session: PlayerSession) -> PlayerSession:
        self._sessions[session.character_id] = session
        logger.debug("Session connected", character_id=session.character_id, transport=str(session.transport))
        return session

    def disconnect(self, character_id: str) -> None:
        if self._sessions.pop(character_id, None) is not None:
            logger.debug("Session disconnected", character_id=character_id)

    def get(self, character_id: str) -> PlayerSession | None:
        """The character's live session; None for NPCs and disconnected players."""
        return self._sessions.get(character_id)
