"""
Shared utilities for point-cloud gesture recognition.

This module provides the point type and the geometric helpers used by the
point cloud pipeline, the matcher and the stroke capture collaborators,
plus validation of raw stroke input.
"""

import math
from typing import Any, List, Sequence, Tuple


class InvalidInputError(ValueError):
    """Raised when raw stroke data is malformed or contains non-finite values."""


class Point:
    """A 2D point tagged with the index of the stroke it belongs to."""

    def __init__(self, x: float, y: float, stroke_id: int = 0):
        self.x = float(x)
        self.y = float(y)
        self.id = stroke_id

    def __repr__(self):
        return f"Point({self.x:.3f}, {self.y:.3f}, id={self.id})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return (self.id == other.id and
                abs(self.x - other.x) < 1e-10 and abs(self.y - other.y) < 1e-10)

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        dx = other.x - self.x
        dy = other.y - self.y
        return math.hypot(dx, dy)


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def calculate_centroid(points: List[Point]) -> Point:
        """Calculate the centroid of a list of points."""
        if not points:
            return Point(0, 0)
        sum_x = sum(p.x for p in points)
        sum_y = sum(p.y for p in points)
        return Point(sum_x / len(points), sum_y / len(points))

    @staticmethod
    def calculate_path_length(points: List[Point]) -> float:
        """
        Calculate total path length.

        Only consecutive points that share a stroke id are connected, so the
        gap between the end of one stroke and the start of the next is not
        counted.
        """
        length = 0.0
        for i in range(1, len(points)):
            if points[i].id == points[i - 1].id:
                length += points[i - 1].distance_to(points[i])
        return length

    @staticmethod
    def interpolate(p1: Point, p2: Point, offset: float) -> Point:
        """Point at `offset` along the segment p1 -> p2, tagged with p2's id."""
        d = p1.distance_to(p2)
        ratio = offset / d
        return Point(p1.x + ratio * (p2.x - p1.x),
                     p1.y + ratio * (p2.y - p1.y),
                     p2.id)


class PathUtils:
    """Utility class for path processing."""

    @staticmethod
    def flatten_strokes(strokes: Sequence[Sequence[Tuple[float, float]]]) -> List[Point]:
        """Concatenate strokes into one point list, tagging points with their stroke index."""
        points = []
        for stroke_id, stroke in enumerate(strokes):
            for x, y in stroke:
                points.append(Point(x, y, stroke_id))
        return points

    @staticmethod
    def get_path_bounds(points: List[Point]) -> Tuple[float, float, float, float]:
        """Get bounding box of a path as (min_x, max_x, min_y, max_y)."""
        if not points:
            return 0.0, 0.0, 0.0, 0.0

        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)

        return min_x, max_x, min_y, max_y


class DataValidator:
    """Utility class for validating stroke data."""

    @staticmethod
    def _coerce_sample(sample: Any, stroke_index: int, sample_index: int) -> Tuple[float, float]:
        if isinstance(sample, dict):
            if 'x' not in sample or 'y' not in sample:
                raise InvalidInputError(
                    f"stroke {stroke_index}, sample {sample_index}: missing 'x' or 'y'")
            raw = (sample['x'], sample['y'])
        else:
            try:
                raw = tuple(sample)
            except TypeError:
                raise InvalidInputError(
                    f"stroke {stroke_index}, sample {sample_index}: "
                    f"expected an (x, y) pair, got {sample!r}") from None
            if len(raw) != 2:
                raise InvalidInputError(
                    f"stroke {stroke_index}, sample {sample_index}: "
                    f"expected 2 coordinates, got {len(raw)}")

        coords = []
        for value in raw:
            if isinstance(value, (str, bytes)):
                raise InvalidInputError(
                    f"stroke {stroke_index}, sample {sample_index}: "
                    f"non-numeric coordinate {value!r}")
            try:
                number = float(value)
            except (TypeError, ValueError):
                raise InvalidInputError(
                    f"stroke {stroke_index}, sample {sample_index}: "
                    f"non-numeric coordinate {value!r}") from None
            if not math.isfinite(number):
                raise InvalidInputError(
                    f"stroke {stroke_index}, sample {sample_index}: "
                    f"non-finite coordinate {number!r}")
            coords.append(number)
        return coords[0], coords[1]

    @staticmethod
    def validate_strokes(strokes: Any) -> List[List[Tuple[float, float]]]:
        """
        Validate raw strokes and return them as lists of float pairs.

        Samples may be (x, y) pairs or dicts with 'x' and 'y' keys.

        Raises:
            InvalidInputError: if the structure is wrong or a coordinate is
                not a finite number.
        """
        if isinstance(strokes, (str, bytes, dict)):
            raise InvalidInputError("strokes must be a sequence of strokes")
        try:
            stroke_list = list(strokes)
        except TypeError:
            raise InvalidInputError("strokes must be a sequence of strokes") from None

        validated = []
        for stroke_index, stroke in enumerate(stroke_list):
            if isinstance(stroke, (str, bytes, dict)):
                raise InvalidInputError(f"stroke {stroke_index} is not a sequence of samples")
            try:
                samples = list(stroke)
            except TypeError:
                raise InvalidInputError(
                    f"stroke {stroke_index} is not a sequence of samples") from None
            validated.append([
                DataValidator._coerce_sample(sample, stroke_index, sample_index)
                for sample_index, sample in enumerate(samples)
            ])
        return validated

    @staticmethod
    def has_sufficient_points(strokes: List[List[Tuple[float, float]]], min_points: int = 2) -> bool:
        """Check that there is at least one stroke and every stroke has `min_points` samples."""
        if not strokes:
            return False
        return all(len(stroke) >= min_points for stroke in strokes)
