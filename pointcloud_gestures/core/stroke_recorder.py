"""
Accumulates raw pointer samples into the stroke lists the recognizer takes.
"""

from typing import Dict, Hashable, List, Tuple


class StrokeRecorder:
    """Collects one stroke per pointer key (finger slot, mouse button, ...)."""

    def __init__(self):
        self._finished: List[Tuple[int, List[Tuple[float, float]]]] = []
        self._open: Dict[Hashable, Tuple[int, List[Tuple[float, float]]]] = {}
        self._counter = 0

    @property
    def is_idle(self) -> bool:
        """True when no stroke is currently being drawn."""
        return not self._open

    def begin_stroke(self, key: Hashable):
        """Start a stroke for `key`, closing any stroke still open under it."""
        if key in self._open:
            self.end_stroke(key)
        self._open[key] = (self._counter, [])
        self._counter += 1

    def add_sample(self, key: Hashable, x: float, y: float):
        """Append a sample to the open stroke of `key`; ignored if none is open."""
        if key in self._open:
            self._open[key][1].append((float(x), float(y)))

    def open_stroke(self, key: Hashable) -> List[Tuple[float, float]]:
        """Samples of the stroke still being drawn under `key`."""
        if key in self._open:
            return list(self._open[key][1])
        return []

    def end_stroke(self, key: Hashable):
        if key in self._open:
            self._finished.append(self._open.pop(key))

    def strokes(self) -> List[List[Tuple[float, float]]]:
        """Finished strokes, in the order they were begun."""
        return [list(samples) for _, samples in sorted(self._finished, key=lambda s: s[0])]

    def reset(self):
        self._finished = []
        self._open = {}
        self._counter = 0
