"""
$P Point-Cloud Recognizer

Classifies a multi-stroke gesture against a gallery of named templates.
Both the templates and the query are normalized into point clouds, compared
with greedy cloud matching, and the smallest distance is turned into a score
between 0 and 1.

Reference: http://depts.washington.edu/aimgroup/proj/dollar/pdollar.html
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..config.settings import RecognizerConfig
from ..utils.gesture_utils import DataValidator, InvalidInputError
from .cloud_matcher import greedy_cloud_match
from .point_cloud import PointCloud
from .templates import DEFAULT_TEMPLATES

logger = logging.getLogger(__name__)


class ClassifyResult:
    """Base class of every outcome `Recognizer.classify` can report."""

    @property
    def recognized(self) -> bool:
        return False


@dataclass(frozen=True)
class Match(ClassifyResult):
    """The best template and its score in (0, 1]."""
    name: str
    score: float
    distance: float

    @property
    def recognized(self) -> bool:
        return True


@dataclass(frozen=True)
class NoConfidentMatch(ClassifyResult):
    """Templates exist but even the closest one scored zero."""
    distance: float


@dataclass(frozen=True)
class NoTemplates(ClassifyResult):
    """The gallery is empty."""


@dataclass(frozen=True)
class InsufficientInput(ClassifyResult):
    """No strokes, or a stroke with too few samples to normalize."""
    reason: str


def distance_to_score(distance: float) -> float:
    """Map distance 0 to score 1.0 and anything at or past the scale to 0.0."""
    scale = RecognizerConfig.SCORE_DISTANCE_SCALE
    return max((distance - scale) / -scale, 0.0)


class Recognizer:
    """
    Point-cloud gesture recognizer.

    The gallery is only changed through `add_template`; `classify` just reads
    it, so several callers may classify at once as long as nobody is adding
    templates at the same time.
    """

    def __init__(self):
        self.point_clouds: List[PointCloud] = []
        self.options: Dict[str, Any] = {}

    def add_template(self, name: str, strokes) -> int:
        """
        Add a new gesture template.

        Args:
            name: Gesture name; several templates may share a name
            strokes: List of strokes, each a list of (x, y) samples

        Returns:
            Number of templates registered under `name`
        """
        if not isinstance(name, str) or not name:
            raise InvalidInputError("template name must be a non-empty string")

        strokes = DataValidator.validate_strokes(strokes)
        if not DataValidator.has_sufficient_points(strokes, RecognizerConfig.MIN_STROKE_POINTS):
            raise InvalidInputError(
                f"template '{name}' needs at least one stroke with "
                f"{RecognizerConfig.MIN_STROKE_POINTS} samples in every stroke")

        self.point_clouds.append(PointCloud(name, strokes))
        logger.info(f"Added template for gesture '{name}'")
        return self.template_count(name)

    add = add_template

    def classify(self, strokes) -> ClassifyResult:
        """
        Recognize a gesture.

        Args:
            strokes: List of strokes, each a list of (x, y) samples

        Returns:
            Match, NoConfidentMatch, NoTemplates or InsufficientInput

        Raises:
            InvalidInputError: if a sample is malformed or not finite
        """
        strokes = DataValidator.validate_strokes(strokes)
        if not DataValidator.has_sufficient_points(strokes, RecognizerConfig.MIN_STROKE_POINTS):
            result = InsufficientInput(
                f"need at least {RecognizerConfig.MIN_STROKE_POINTS} samples in every stroke")
            logger.debug(f"Classification skipped: {result.reason}")
            return result

        if not self.point_clouds:
            logger.debug("Classification attempted with no templates")
            return NoTemplates()

        candidate = PointCloud("candidate", strokes)

        best_distance = math.inf
        best_template: Optional[PointCloud] = None
        for template in self.point_clouds:
            d = greedy_cloud_match(candidate, template)
            # strict comparison keeps the earliest template on ties
            if d < best_distance:
                best_distance = d
                best_template = template

        score = distance_to_score(best_distance)
        if score <= 0:
            logger.debug(f"No confident match (best distance {best_distance:.3f})")
            return NoConfidentMatch(best_distance)

        logger.debug(f"Recognized '{best_template.name}' score={score:.3f} "
                     f"distance={best_distance:.3f}")
        return Match(best_template.name, score, best_distance)

    recognize = classify

    def configure(self, **options) -> None:
        """Reserved hook for future tunables; options are recorded but have no effect."""
        self.options.update(options)
        logger.debug(f"Ignoring recognizer options: {sorted(options)}")

    def load_default_templates(self) -> int:
        """Register the built-in template gallery."""
        for name, strokes in DEFAULT_TEMPLATES.items():
            self.add_template(name, strokes)
        return len(self.point_clouds)

    def template_count(self, name: Optional[str] = None) -> int:
        """Number of templates, optionally only those called `name`."""
        if name is None:
            return len(self.point_clouds)
        return sum(1 for cloud in self.point_clouds if cloud.name == name)

    def template_names(self) -> List[str]:
        """Distinct template names in registration order."""
        names = []
        for cloud in self.point_clouds:
            if cloud.name not in names:
                names.append(cloud.name)
        return names

    def clear(self) -> None:
        """Remove every template."""
        self.point_clouds = []
