"""
Routes recognition results to callbacks registered per template name.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..gestures.recognizer import ClassifyResult, Match

logger = logging.getLogger(__name__)


class GestureDispatcher:
    """Calls `callback(score)` for every listener registered on the matched name."""

    def __init__(self):
        self.listeners: Dict[str, List[Callable[[float], None]]] = {}

    def on(self, name: str, callback: Callable[[float], None]):
        """Register a callback for the template `name`."""
        self.listeners.setdefault(name, []).append(callback)

    def off(self, name: str, callback: Optional[Callable[[float], None]] = None):
        """Remove one callback for `name`, or all of them when none is given."""
        if callback is None:
            self.listeners.pop(name, None)
            return
        callbacks = self.listeners.get(name, [])
        if callback in callbacks:
            callbacks.remove(callback)
        if not callbacks:
            self.listeners.pop(name, None)

    def dispatch(self, result: ClassifyResult) -> int:
        """
        Deliver a result to its listeners.

        Only a Match is dispatched. A callback that raises is logged and
        does not stop the remaining ones. Returns the number of callbacks
        called.
        """
        if not isinstance(result, Match):
            return 0

        callbacks = list(self.listeners.get(result.name, []))
        for callback in callbacks:
            try:
                callback(result.score)
            except Exception:
                logger.exception(f"Listener for '{result.name}' failed")
        if callbacks:
            logger.debug(f"Dispatched '{result.name}' to {len(callbacks)} listener(s)")
        return len(callbacks)
