"""
Greedy point cloud matching.

Two clouds of equal size are compared by greedily pairing every point of one
cloud with its nearest still-unmatched point of the other. Earlier pairings
weigh more than later ones, so the result depends on where the walk starts;
`greedy_cloud_match` tries a spread of start offsets in both directions and
keeps the smallest cost.
"""

import math
from typing import List

from ..utils.gesture_utils import Point


def cloud_distance(pts1: List[Point], pts2: List[Point], start: int) -> float:
    """
    Weighted greedy assignment cost from pts1 to pts2.

    Args:
        pts1: Source points, walked from index `start` with wrap-around
        pts2: Target points, each matched at most once
        start: Index in pts1 where matching begins

    Returns:
        Sum of matched distances, weighted from 1.0 down towards 0
    """
    n = len(pts1)
    matched = [False] * len(pts2)
    total = 0.0
    start = start % n
    i = start

    while True:
        index = -1
        best = math.inf
        for j, candidate in enumerate(pts2):
            if matched[j]:
                continue
            d = pts1[i].distance_to(candidate)
            if d < best:
                best = d
                index = j

        matched[index] = True
        weight = 1 - ((i - start + n) % n) / n
        total += weight * best

        i = (i + 1) % n
        if i == start:
            break

    return total


def match_step(n: int) -> int:
    """Stride between start offsets tried for a cloud of n points."""
    return max(1, int(math.floor(n ** 0.5)))


def greedy_cloud_match(cloud1, cloud2) -> float:
    """Smallest cloud distance over the sampled start offsets, in both directions."""
    points1 = cloud1.points
    points2 = cloud2.points
    n = len(points1)
    if n == 0 or len(points2) != n:
        raise ValueError(
            f"cannot match clouds of {n} and {len(points2)} points")

    minimum = math.inf
    for i in range(0, n, match_step(n)):
        d1 = cloud_distance(points1, points2, i)
        d2 = cloud_distance(points2, points1, i)
        minimum = min(minimum, d1, d2)

    return minimum
