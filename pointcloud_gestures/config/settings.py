"""
Configuration settings for the point-cloud gesture recognizer.
"""

class RecognizerConfig:
    """Configuration constants for point-cloud gesture recognition."""

    # Number of points every cloud is resampled to
    RESOLUTION = 32

    # Fewer samples than this in any stroke is insufficient input
    MIN_STROKE_POINTS = 2

    # Clouds are centered on this point after scaling
    ORIGIN = (0.0, 0.0)

    # Distance at which the score reaches zero; calibrated for a unit bounding box
    SCORE_DISTANCE_SCALE = 2.0

    # Listener debug output
    DEBUG_LOG_FILE = 'gesture_debug.log'
