"""Tests for stroke recording, result dispatch and gesture logging."""

import pytest

from pointcloud_gestures.core.dispatcher import GestureDispatcher
from pointcloud_gestures.core.stroke_recorder import StrokeRecorder
from pointcloud_gestures.gestures.recognizer import (
    InsufficientInput, Match, NoConfidentMatch, NoTemplates, Recognizer
)
from pointcloud_gestures.utils.logger import GestureLogger


class TestStrokeRecorder:

    def test_records_strokes_in_begin_order(self):
        recorder = StrokeRecorder()
        recorder.begin_stroke("a")
        recorder.begin_stroke("b")
        recorder.add_sample("a", 0, 0)
        recorder.add_sample("b", 5, 5)
        recorder.add_sample("a", 1, 1)
        recorder.add_sample("b", 6, 6)
        recorder.end_stroke("b")
        assert not recorder.is_idle
        recorder.end_stroke("a")

        assert recorder.is_idle
        assert recorder.strokes() == [[(0.0, 0.0), (1.0, 1.0)], [(5.0, 5.0), (6.0, 6.0)]]

    def test_open_strokes_are_not_returned(self):
        recorder = StrokeRecorder()
        recorder.begin_stroke(1)
        recorder.add_sample(1, 3, 4)
        assert recorder.strokes() == []
        assert recorder.open_stroke(1) == [(3.0, 4.0)]

    def test_samples_without_open_stroke_are_ignored(self):
        recorder = StrokeRecorder()
        recorder.add_sample(0, 1, 1)
        recorder.end_stroke(0)
        assert recorder.strokes() == []
        assert recorder.is_idle

    def test_reused_key_starts_new_stroke(self):
        recorder = StrokeRecorder()
        recorder.begin_stroke(0)
        recorder.add_sample(0, 0, 0)
        recorder.begin_stroke(0)
        recorder.add_sample(0, 9, 9)
        recorder.end_stroke(0)
        assert recorder.strokes() == [[(0.0, 0.0)], [(9.0, 9.0)]]

    def test_reset(self):
        recorder = StrokeRecorder()
        recorder.begin_stroke(0)
        recorder.add_sample(0, 0, 0)
        recorder.end_stroke(0)
        recorder.begin_stroke(1)
        recorder.reset()
        assert recorder.strokes() == []
        assert recorder.is_idle

    def test_recorded_strokes_feed_the_recognizer(self):
        recognizer = Recognizer()
        recognizer.add_template("line", [[(0, 0), (100, 0)]])
        recorder = StrokeRecorder()
        recorder.begin_stroke("mouse")
        for x in range(0, 101, 10):
            recorder.add_sample("mouse", x, 40)
        recorder.end_stroke("mouse")
        assert recognizer.classify(recorder.strokes()).name == "line"


class TestGestureDispatcher:

    def test_match_reaches_listeners_in_order(self):
        dispatcher = GestureDispatcher()
        calls = []
        dispatcher.on("circle", lambda score: calls.append(("first", score)))
        dispatcher.on("circle", lambda score: calls.append(("second", score)))
        dispatcher.on("line", lambda score: calls.append(("line", score)))

        assert dispatcher.dispatch(Match("circle", 0.9, 0.2)) == 2
        assert calls == [("first", 0.9), ("second", 0.9)]

    @pytest.mark.parametrize("result", [
        NoConfidentMatch(3.0),
        NoTemplates(),
        InsufficientInput("too few points"),
    ])
    def test_non_matches_are_not_dispatched(self, result):
        dispatcher = GestureDispatcher()
        calls = []
        dispatcher.on("circle", calls.append)
        assert dispatcher.dispatch(result) == 0
        assert calls == []

    def test_failing_callback_does_not_stop_the_others(self, caplog):
        dispatcher = GestureDispatcher()
        calls = []

        def broken(score):
            raise RuntimeError("boom")

        dispatcher.on("circle", broken)
        dispatcher.on("circle", calls.append)

        assert dispatcher.dispatch(Match("circle", 0.8, 0.4)) == 2
        assert calls == [0.8]
        assert "Listener for 'circle' failed" in caplog.text

    def test_unregistered_name(self):
        assert GestureDispatcher().dispatch(Match("zigzag", 0.7, 0.6)) == 0

    def test_off_removes_one_or_all(self):
        dispatcher = GestureDispatcher()
        calls = []
        first = lambda score: calls.append("first")
        second = lambda score: calls.append("second")
        dispatcher.on("x", first)
        dispatcher.on("x", second)

        dispatcher.off("x", first)
        dispatcher.dispatch(Match("x", 0.5, 1.0))
        assert calls == ["second"]

        dispatcher.off("x")
        assert dispatcher.dispatch(Match("x", 0.5, 1.0)) == 0
        assert "x" not in dispatcher.listeners


class TestGestureLogger:

    def test_writes_debug_file(self, tmp_path, capsys):
        path = tmp_path / "debug.log"
        gesture_logger = GestureLogger(str(path))
        gesture_logger.log_result(Match("line", 0.95, 0.1), [[(0, 0), (1, 0)]])
        gesture_logger.close()

        out = capsys.readouterr().out
        assert "MATCH: line" in out
        assert "Strokes: 1, samples: 2" in out
        content = path.read_text()
        assert "Debug logging started" in content
        assert "Match(name='line'" in content

    @pytest.mark.parametrize("result, text", [
        (NoConfidentMatch(2.5), "NO CONFIDENT MATCH"),
        (NoTemplates(), "NO TEMPLATES"),
        (InsufficientInput("need more"), "TOO FEW POINTS: need more"),
    ])
    def test_prints_each_outcome(self, capsys, result, text):
        gesture_logger = GestureLogger(debug_file=None)
        gesture_logger.log_result(result, [])
        assert text in capsys.readouterr().out

    def test_unopenable_debug_file_is_reported(self, tmp_path, capsys):
        gesture_logger = GestureLogger(str(tmp_path))
        assert gesture_logger.debug_file is None
        assert "Could not open debug file" in capsys.readouterr().out
        gesture_logger.close()
