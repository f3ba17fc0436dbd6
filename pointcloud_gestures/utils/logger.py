"""
Logging utilities for recognized gestures.
"""

import datetime
import logging
from typing import List, Tuple

from ..config.settings import RecognizerConfig
from ..gestures.recognizer import (
    ClassifyResult, InsufficientInput, Match, NoConfidentMatch, NoTemplates
)

logger = logging.getLogger(__name__)


class GestureLogger:
    """Prints recognition results and mirrors them to a debug file."""

    def __init__(self, debug_file: str = RecognizerConfig.DEBUG_LOG_FILE):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                print(f"Warning: Could not open debug file: {e}")

    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def log_result(self, result: ClassifyResult, strokes: List[List[Tuple[float, float]]]):
        """Log the outcome of one recognition."""
        timestamp = self._timestamp()
        sample_count = sum(len(stroke) for stroke in strokes)

        if isinstance(result, Match):
            print(f"[{timestamp}] ✅ MATCH: {result.name} "
                  f"[score {result.score:.2f}, distance {result.distance:.3f}]")
        elif isinstance(result, NoConfidentMatch):
            print(f"[{timestamp}] ❓ NO CONFIDENT MATCH [distance {result.distance:.3f}]")
        elif isinstance(result, NoTemplates):
            print(f"[{timestamp}] 📭 NO TEMPLATES REGISTERED")
        elif isinstance(result, InsufficientInput):
            print(f"[{timestamp}] ✋ TOO FEW POINTS: {result.reason}")

        print(f"   Strokes: {len(strokes)}, samples: {sample_count}")

        if self.debug_file:
            try:
                self.debug_file.write(f"[{timestamp}] {result!r} strokes={len(strokes)} "
                                      f"samples={sample_count}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not write debug file: {e}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
