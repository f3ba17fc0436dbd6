"""
Point Cloud Gestures Package
A $P point-cloud recognizer for multi-stroke touch and mouse gestures.
"""

from .gestures.recognizer import (
    Recognizer,
    ClassifyResult,
    Match,
    NoConfidentMatch,
    NoTemplates,
    InsufficientInput,
)
from .gestures.point_cloud import PointCloud
from .utils.gesture_utils import Point, InvalidInputError

__version__ = "1.0.0"
__all__ = [
    "Recognizer",
    "ClassifyResult",
    "Match",
    "NoConfidentMatch",
    "NoTemplates",
    "InsufficientInput",
    "PointCloud",
    "Point",
    "InvalidInputError",
]
