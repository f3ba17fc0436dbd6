"""
Point cloud construction and normalization.

A gesture is turned into a fixed-size, unordered cloud of points: strokes are
flattened (each point remembers its stroke index), resampled at equal arc
length within each stroke, scaled to a unit bounding box and translated so
that the centroid sits on the origin.
"""

import math
from typing import List, Sequence, Tuple

from ..config.settings import RecognizerConfig
from ..utils.gesture_utils import GeometryUtils, InvalidInputError, PathUtils, Point


class PointCloud:
    """A named, normalized point cloud built from one or more strokes."""

    def __init__(self, name: str, strokes: Sequence[Sequence[Tuple[float, float]]],
                 resolution: int = RecognizerConfig.RESOLUTION):
        """
        Build the cloud.

        Args:
            name: Template name (or any label for a query cloud)
            strokes: List of strokes, each a list of (x, y) samples
            resolution: Number of points in the normalized cloud, at least 2

        Raises:
            ValueError: if `resolution` is not an integer of at least 2.
            InvalidInputError: if the gesture is too large to measure.
        """
        if isinstance(resolution, bool) or not isinstance(resolution, int) or resolution < 2:
            raise ValueError(f"resolution must be an integer of at least 2, got {resolution!r}")

        self.name = name
        self.resolution = resolution

        self.points = PathUtils.flatten_strokes(strokes)
        self.points = self.resample()
        self.points = self.scale()
        self.points = self.translate_to(Point(*RecognizerConfig.ORIGIN))

    def __repr__(self):
        return f"PointCloud({self.name!r}, {len(self.points)} points)"

    def path_length(self) -> float:
        """Total length of all strokes in the cloud."""
        return GeometryUtils.calculate_path_length(self.points)

    def resample(self) -> List[Point]:
        """Redistribute the points at equal arc length within each stroke."""
        points = self.points
        if not points:
            return []

        length = self.path_length()
        if not math.isfinite(length):
            raise InvalidInputError("gesture path length overflows; coordinates are too large")
        if length == 0:
            # A tap: nothing to walk along
            first = points[0]
            return [Point(first.x, first.y, first.id) for _ in range(self.resolution)]

        interval = length / (self.resolution - 1)
        D = 0.0
        resampled = [points[0]]

        # `prev` stands in for the point just before points[i]; after an
        # interpolated point is emitted it becomes `prev` and the remainder of
        # the same segment is measured again.
        prev = points[0]
        i = 1
        while i < len(points):
            current = points[i]
            if current.id == prev.id:
                d = prev.distance_to(current)
                if D + d >= interval:
                    q = GeometryUtils.interpolate(prev, current, interval - D)
                    resampled.append(q)
                    prev = q
                    D = 0.0
                    continue
                D += d
            prev = current
            i += 1

        # sometimes we fall a rounding-error short of adding the last point
        if len(resampled) == self.resolution - 1:
            last = points[-1]
            resampled.append(Point(last.x, last.y, last.id))

        return resampled[:self.resolution]

    def scale(self) -> List[Point]:
        """Scale to a unit bounding box, keeping the aspect ratio."""
        min_x, max_x, min_y, max_y = PathUtils.get_path_bounds(self.points)
        size = max(max_x - min_x, max_y - min_y)
        if not math.isfinite(size):
            raise InvalidInputError("gesture bounding box overflows; coordinates are too large")
        if size == 0:
            return [Point(p.x, p.y, p.id) for p in self.points]

        return [Point((p.x - min_x) / size, (p.y - min_y) / size, p.id)
                for p in self.points]

    def translate_to(self, origin: Point) -> List[Point]:
        """Move the points so that their centroid lands on `origin`."""
        c = self.centroid()
        return [Point(p.x + origin.x - c.x, p.y + origin.y - c.y, p.id)
                for p in self.points]

    def centroid(self) -> Point:
        """Mean position of the points."""
        return GeometryUtils.calculate_centroid(self.points)
