"""
Utilities package for point-cloud gesture recognition.

This package provides the point type, geometry helpers and input
validation shared by the recognizer and the stroke capture code.
"""

from .gesture_utils import (
    Point,
    GeometryUtils,
    PathUtils,
    DataValidator,
    InvalidInputError
)

__all__ = [
    'Point',
    'GeometryUtils',
    'PathUtils',
    'DataValidator',
    'InvalidInputError'
]
