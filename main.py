#!/usr/bin/env python3
"""
Point Cloud Gestures - Main Entry Point
Recognizes gestures drawn on a Linux touchscreen.
"""

import logging
import sys
import time
from pointcloud_gestures.core.listener import TouchListener

def main():
    """Main entry point for the touchscreen gesture recognizer."""
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    # optional: an explicit /dev/input/eventN node
    device_path = sys.argv[1] if len(sys.argv) > 1 else None
    listener = TouchListener(device_path=device_path)

    for name in listener.recognizer.template_names():
        listener.on(name, lambda score, name=name: print(f"🎉 {name} ({score:.2f})"))

    if not listener.start():
        return

    try:
        while True:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()

if __name__ == "__main__":
    main()
