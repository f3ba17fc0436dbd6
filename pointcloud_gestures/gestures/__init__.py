"""
Gesture recognition.

This module provides point cloud normalization, greedy cloud matching and
the recognizer that classifies strokes against a gallery of templates.
"""

from .point_cloud import PointCloud
from .cloud_matcher import cloud_distance, greedy_cloud_match
from .recognizer import (
    Recognizer,
    ClassifyResult,
    Match,
    NoConfidentMatch,
    NoTemplates,
    InsufficientInput,
)
from .templates import DEFAULT_TEMPLATES

__all__ = [
    'PointCloud',
    'cloud_distance',
    'greedy_cloud_match',
    'Recognizer',
    'ClassifyResult',
    'Match',
    'NoConfidentMatch',
    'NoTemplates',
    'InsufficientInput',
    'DEFAULT_TEMPLATES'
]
