"""
Device management for touchscreen discovery.
"""

import evdev
from evdev import ecodes
import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

class DeviceManager:
    """Finds the multitouch device whose finger strokes are recognized."""

    def __init__(self, device_path: Optional[str] = None):
        self.device_path = device_path
        self.device = None
        self.screen_width = 1920  # Default
        self.screen_height = 1080   # Default

    @staticmethod
    def multitouch_axes(device) -> Optional[Dict]:
        """Absolute axis info of a device that tracks fingers in slots, else None."""
        axes = dict(device.capabilities().get(ecodes.EV_ABS, []))
        return axes if ecodes.ABS_MT_SLOT in axes else None

    def _candidates(self):
        if self.device_path:
            return [self.device_path]
        return evdev.list_devices()

    def find_device(self):
        """
        Open the touchscreen and read its coordinate range.

        With a `device_path` only that node is tried; otherwise the first
        device reporting multitouch slots wins. Returns None if none fits.
        """
        for path in self._candidates():
            try:
                device = evdev.InputDevice(path)
            except OSError as e:
                logger.warning(f"Cannot open {path}: {e}")
                continue

            axes = self.multitouch_axes(device)
            if axes is None:
                logger.debug(f"Skipping {device.name}: no multitouch slots")
                continue

            # stroke samples are raw ABS_MT_POSITION values, so the screen
            # size is the axis range
            if ecodes.ABS_MT_POSITION_X in axes:
                self.screen_width = axes[ecodes.ABS_MT_POSITION_X].max + 1
            if ecodes.ABS_MT_POSITION_Y in axes:
                self.screen_height = axes[ecodes.ABS_MT_POSITION_Y].max + 1

            self.device = device
            logger.info(f"Found touchscreen: {device.name} ({path})")
            logger.info(f"Screen resolution: {self.screen_width}x{self.screen_height}")
            return device

        logger.error("No touchscreen device found")
        return None

    def get_device_info(self):
        """Get device and screen information."""
        return {
            'device': self.device,
            'name': self.device.name if self.device else None,
            'screen_width': self.screen_width,
            'screen_height': self.screen_height,
        }
