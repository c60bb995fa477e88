"""Host for the current editor state."""

import logging
from typing import Iterable, Optional

from ..models.document import SceneDocument
from ..models.state import EditorState
from .commands import Command, ReplaceDocument
from .reducer import apply_command

logger = logging.getLogger(__name__)


class Session:
    """Holds the single current editor state and applies commands in issue order.

    The session is not thread-safe. Hosts with several edit sources must
    serialize their commands before dispatching them.
    """

    def __init__(self, state: Optional[EditorState] = None) -> None:
        """Initialize the session.

        Args:
            state: Starting state. Defaults to the default document.
        """
        self._state = state or EditorState()
        self._applied = 0

    @property
    def state(self) -> EditorState:
        """Return the current editor state."""
        return self._state

    @property
    def document(self) -> SceneDocument:
        """Return the current document without selection."""
        return self._state.document()

    @property
    def applied(self) -> int:
        """Return how many commands have been dispatched."""
        return self._applied

    def dispatch(self, command: Command) -> EditorState:
        """Apply a command to the current state and keep the result."""
        self._state = apply_command(self._state, command)
        self._applied += 1
        return self._state

    def dispatch_all(self, commands: Iterable[Command]) -> EditorState:
        """Apply commands one after another."""
        for command in commands:
            self.dispatch(command)
        logger.debug(f"Session has applied {self._applied} commands")
        return self._state

    def load(self, document: SceneDocument) -> EditorState:
        """Replace the current document, resetting the selection."""
        return self.dispatch(ReplaceDocument(document=document))
