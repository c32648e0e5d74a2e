from typing import Callable, Optional

from reversi_lite.protocol.events import GameEvent


class EventEmitter:
    """
    Base class for objects that report game progress to a presentation layer.
    The UI registers one callback and renders whatever events arrive, so the
    game core never depends on a particular front end.
    """

    def __init__(self):
        self.on_event: Optional[Callable[[GameEvent], None]] = None

    def set_callback(self, callback: Callable[[GameEvent], None]):
        """Set the callback function to handle events from the game."""
        self.on_event = callback

    def _emit(self, event: GameEvent):
        if self.on_event:
            self.on_event(event)
