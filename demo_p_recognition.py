#!/usr/bin/env python3
"""$P Point-Cloud Recognition Demo with Visual Feedback.

This demo shows how to use the $P Point-Cloud Recognizer to recognize
multi-stroke gestures drawn with the mouse. Every drag is one stroke;
press R to recognize everything drawn so far.
"""

import os
import sys
from typing import List, Optional, Tuple

import pygame

# Add the project root to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "."))

from pointcloud_gestures.core.stroke_recorder import StrokeRecorder
from pointcloud_gestures.gestures.recognizer import (
    InsufficientInput,
    Match,
    NoConfidentMatch,
    NoTemplates,
    Recognizer,
)
from pointcloud_gestures.utils.gesture_utils import InvalidInputError


class PRecognitionDemo:
    """Interactive demo for $P gesture recognition."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((1600, 1100))
        pygame.display.set_caption("$P Point-Cloud Recognition Demo")

        self.recognizer = Recognizer()
        self.recognizer.load_default_templates()
        self.recorder = StrokeRecorder()
        self.stroke_key = 0
        self.is_drawing = False
        self.recognition_result: Optional[str] = None
        self.similarity_score = 0.0

        # Template naming mode (after pressing A)
        self.naming = False
        self.pending_name = ""

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.RED = (255, 0, 0)
        self.GREEN = (0, 160, 0)
        self.BLUE = (0, 0, 255)
        self.GRAY = (128, 128, 128)
        self.ORANGE = (255, 165, 0)

        # Fonts
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 32)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:  # Left click
                        self.start_drawing(event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    if self.is_drawing:
                        self.continue_drawing(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1:
                        self.finish_drawing()
                elif event.type == pygame.KEYDOWN:
                    if self.naming:
                        self.handle_name_key(event)
                    elif event.key == pygame.K_c:
                        self.clear_screen()
                    elif event.key == pygame.K_r:
                        self.recognize_gesture()
                    elif event.key == pygame.K_a:
                        self.naming = True
                        self.pending_name = ""

            self.draw()
            clock.tick(60)

    def start_drawing(self, pos: Tuple[int, int]) -> None:
        """Start a new stroke."""
        self.stroke_key += 1
        self.recorder.begin_stroke(self.stroke_key)
        self.is_drawing = True
        self.recorder.add_sample(self.stroke_key, *pos)

    def continue_drawing(self, pos: Tuple[int, int]) -> None:
        """Add a point while drawing."""
        self.recorder.add_sample(self.stroke_key, *pos)

    def finish_drawing(self) -> None:
        """Finish the stroke; recognition happens on 'R'."""
        self.is_drawing = False
        self.recorder.end_stroke(self.stroke_key)

    def current_strokes(self) -> List[List[Tuple[float, float]]]:
        return self.recorder.strokes()

    def recognize_gesture(self) -> None:
        """Recognize the drawn strokes."""
        result = self.recognizer.classify(self.current_strokes())
        if isinstance(result, Match):
            self.recognition_result = result.name
            self.similarity_score = result.score
        elif isinstance(result, NoConfidentMatch):
            self.recognition_result = "No confident match"
            self.similarity_score = 0.0
        elif isinstance(result, NoTemplates):
            self.recognition_result = "No templates"
            self.similarity_score = 0.0
        elif isinstance(result, InsufficientInput):
            self.recognition_result = "Draw more points!"
            self.similarity_score = 0.0

    def handle_name_key(self, event) -> None:
        """Collect the template name; Enter adds it, Escape cancels."""
        if event.key == pygame.K_RETURN:
            self.naming = False
            self.add_template(self.pending_name.strip())
        elif event.key == pygame.K_ESCAPE:
            self.naming = False
        elif event.key == pygame.K_BACKSPACE:
            self.pending_name = self.pending_name[:-1]
        elif event.unicode and event.unicode.isprintable():
            self.pending_name += event.unicode

    def add_template(self, name: str) -> None:
        """Add the current drawing as a template."""
        try:
            count = self.recognizer.add_template(name, self.current_strokes())
        except InvalidInputError as e:
            self.recognition_result = f"Not added: {e}"
            self.similarity_score = 0.0
            return
        self.recognition_result = f"Added '{name}' ({count} sample(s))"
        self.similarity_score = 0.0

    def clear_screen(self) -> None:
        """Clear the drawing and results."""
        self.recorder.reset()
        self.is_drawing = False
        self.recognition_result = None
        self.similarity_score = 0.0

    def draw(self) -> None:
        """Render the UI and current drawing."""
        self.screen.fill(self.WHITE)

        drawing_area = pygame.Rect(300, 220, 1000, 760)
        pygame.draw.rect(self.screen, self.GRAY, drawing_area, 3)

        instructions = [
            "$P Point-Cloud Gesture Recognition Demo",
            "Each mouse drag is one stroke; stroke order and direction do not matter.",
            "Controls:  C: Clear   R: Recognize   A: Add drawing as template",
            "Templates: " + ", ".join(self.recognizer.template_names()),
        ]
        if self.naming:
            instructions.append(f"Template name: {self.pending_name}_  (Enter to add, Esc to cancel)")

        y = 10
        for line in instructions:
            font = self.font if line.startswith("$P") else self.small_font
            self.screen.blit(font.render(line, True, self.BLACK), (10, y))
            y += 36

        # Finished strokes plus the one being drawn
        strokes = list(self.current_strokes())
        if self.is_drawing:
            strokes.append(self.recorder.open_stroke(self.stroke_key))
        for stroke in strokes:
            if len(stroke) > 1:
                pygame.draw.lines(self.screen, self.RED, False, stroke, 5)
            for x, y in stroke:
                pygame.draw.circle(self.screen, self.BLUE, (int(x), int(y)), 5)

        if self.recognition_result:
            if self.similarity_score > 0.8:
                color = self.GREEN
            elif self.similarity_score > 0.5:
                color = self.ORANGE
            else:
                color = self.RED
            self.screen.blit(
                self.font.render(f"Recognized: {self.recognition_result}", True, color), (300, 1000)
            )
            self.screen.blit(
                self.font.render(f"Score: {self.similarity_score:.2f}", True, color), (300, 1045)
            )

        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    demo = PRecognitionDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
