"""
Touchscreen listener that turns finger strokes into recognized gestures.
"""

import threading
import logging
from typing import Callable, Dict, Optional
from evdev import ecodes

from ..device.device_manager import DeviceManager
from ..gestures.recognizer import ClassifyResult, Recognizer
from ..utils.logger import GestureLogger
from .dispatcher import GestureDispatcher
from .stroke_recorder import StrokeRecorder

logger = logging.getLogger(__name__)


class TouchListener:
    """
    Records one stroke per finger and classifies the gesture once every
    finger has been lifted.
    """

    def __init__(self, recognizer: Optional[Recognizer] = None,
                 dispatcher: Optional[GestureDispatcher] = None,
                 gesture_logger: Optional[GestureLogger] = None,
                 device_path: Optional[str] = None):
        self.device_manager = DeviceManager(device_path)
        if recognizer is None:
            recognizer = Recognizer()
            recognizer.load_default_templates()
        self.recognizer = recognizer
        self.dispatcher = dispatcher or GestureDispatcher()
        self.logger = gesture_logger or GestureLogger()
        self.recorder = StrokeRecorder()

        # State management
        self.running = False
        self.current_slot = 0
        self.slot_data: Dict[int, Dict[str, Optional[int]]] = {}
        self.active_slots = set()
        self.moved_slots = set()
        self.last_result: Optional[ClassifyResult] = None

        # Gallery changes must not overlap a classification
        self.gallery_lock = threading.Lock()
        self.thread = None

    def on(self, name: str, callback: Callable[[float], None]):
        """Call `callback(score)` whenever the gesture `name` is recognized."""
        self.dispatcher.on(name, callback)

    def add_template(self, name: str, strokes) -> int:
        with self.gallery_lock:
            return self.recognizer.add_template(name, strokes)

    def classify(self, strokes) -> ClassifyResult:
        with self.gallery_lock:
            return self.recognizer.classify(strokes)

    def start(self) -> bool:
        """Start the touchscreen listener."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No touchscreen found")
            return False

        self.running = True
        self._print_startup_info(self.device_manager.get_device_info())

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()

        return True

    def stop(self):
        """Stop the touchscreen listener."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)
        self.logger.close()

    def _print_startup_info(self, device_info: Dict):
        print(f"✅ Found: {device_info['name']}")
        print(f"📺 Screen: {device_info['screen_width']}x{device_info['screen_height']}")
        print(f"📚 Templates: {', '.join(self.recognizer.template_names())}")
        print("🎯 Ready! Draw a gesture with one or more fingers.")

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    self._process_event_batch(event_batch)
                    event_batch = []

        except KeyboardInterrupt:
            pass
        except Exception as e:
            logger.error(f"Error in event loop: {e}")

    def _process_event_batch(self, event_batch):
        """Process the events of one SYN_REPORT frame."""
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)

        self._flush_samples()

    def _handle_abs_event(self, ev):
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
        elif ev.code == ecodes.ABS_MT_TRACKING_ID:
            if ev.value == -1:
                self._handle_finger_lift(self.current_slot)
            else:
                self._handle_finger_place(self.current_slot)
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            self._handle_position(self.current_slot, 'x', ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            self._handle_position(self.current_slot, 'y', ev.value)

    def _handle_finger_place(self, slot: int):
        # unchanged axes are not re-sent, so the last known position carries over
        self.slot_data.setdefault(slot, {'x': None, 'y': None})
        self.active_slots.add(slot)
        self.moved_slots.add(slot)
        self.recorder.begin_stroke(slot)

    def _handle_position(self, slot: int, axis: str, value: int):
        self.slot_data.setdefault(slot, {'x': None, 'y': None})[axis] = value
        if slot in self.active_slots:
            self.moved_slots.add(slot)

    def _handle_finger_lift(self, slot: int):
        if slot not in self.active_slots:
            return

        self._flush_slot(slot)
        self.recorder.end_stroke(slot)
        self.active_slots.discard(slot)

        if self.recorder.is_idle:
            self._process_gesture()

    def _flush_samples(self):
        """Record one sample for every finger that moved in this frame."""
        for slot in sorted(self.moved_slots):
            self._flush_slot(slot)
        self.moved_slots.clear()

    def _flush_slot(self, slot: int):
        data = self.slot_data.get(slot)
        if slot not in self.moved_slots or data is None:
            return
        self.moved_slots.discard(slot)
        if data['x'] is None or data['y'] is None:
            return
        self.recorder.add_sample(slot, data['x'], data['y'])

    def _process_gesture(self):
        """Classify the finished strokes and notify listeners."""
        strokes = self.recorder.strokes()
        self.recorder.reset()
        if not strokes:
            return None

        result = self.classify(strokes)
        self.last_result = result
        self.logger.log_result(result, strokes)
        self.dispatcher.dispatch(result)
        return result
