"""
Map Reference: Mouse, wheel and touch input on the map window.
Purpose: Pointer/touch event variants and pygame event translation.
Dependencies: pygame, dataclasses, typing, core/config.py.
Ext Hooks: Pinch-zoom from two-finger gestures.
Client Only: Input plumbing; no map state here.
"""

from dataclasses import dataclass
from typing import Tuple
import pygame
from core.config import WHEEL_NOTCH


@dataclass(frozen=True)
class PointerEvent:
    pos: Tuple[float, float]
    movement: Tuple[float, float] = (0.0, 0.0)

    @property
    def is_multi_touch(self):
        return False


@dataclass(frozen=True)
class TouchEvent:
    pos: Tuple[float, float]
    movement: Tuple[float, float] = (0.0, 0.0)
    touch_count: int = 1

    @property
    def is_multi_touch(self):
        return self.touch_count > 1


class EventTranslator:
    """
    Turns pygame events into controller calls.
    Finger coordinates arrive normalized to 0..1 and are scaled to the window.
    """

    def __init__(self, controller, window_size):
        self.controller = controller
        self.window_size = window_size
        self.fingers = set()  # Live finger ids

    def _finger_pos(self, event):
        width, height = self.window_size
        return event.x * width, event.y * height

    def _finger_movement(self, event):
        width, height = self.window_size
        return event.dx * width, event.dy * height

    def handle(self, event):
        """Dispatch one pygame event. Returns True if it was consumed."""
        controller = self.controller
        if event.type == pygame.MOUSEMOTION:
            if getattr(event, 'touch', False):
                return False  # Synthesized from a finger; FINGERMOTION covers it
            controller.pointer_move(PointerEvent(event.pos, event.rel))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if getattr(event, 'touch', False):
                return False
            controller.pointer_down()
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if getattr(event, 'touch', False):
                return False
            controller.pointer_up()
            controller.click(PointerEvent(event.pos))
        elif event.type == pygame.MOUSEWHEEL:
            return controller.wheel(-event.y * WHEEL_NOTCH)
        elif event.type == pygame.WINDOWLEAVE:
            controller.pointer_leave()
        elif event.type == pygame.FINGERDOWN:
            self.fingers.add(event.finger_id)
            if len(self.fingers) == 1:
                controller.pointer_down()
        elif event.type == pygame.FINGERMOTION:
            touch = TouchEvent(self._finger_pos(event), self._finger_movement(event), len(self.fingers))
            controller.pointer_move(touch)
        elif event.type == pygame.FINGERUP:
            # Count includes the lifting finger, as the tap is judged on release.
            touch = TouchEvent(self._finger_pos(event), touch_count=len(self.fingers))
            self.fingers.discard(event.finger_id)
            controller.click(touch)
            if not self.fingers:
                controller.pointer_up()
        else:
            return False
        return True
