"""
Map Reference: Hover, select, drag-to-pan and wheel-zoom on the star map.
Purpose: Handle pointer/touch input and translate it to viewport and hexagon state.
Dependencies: core/viewport.py, core/config.py, logging.
Ext Hooks: Future input mapping, pinch zoom.
Client Only: Input handling only; drawing is delegated to the redraw callback.
"""

import logging
from core.config import WHEEL_SENSITIVITY

logger = logging.getLogger(__name__)


class InteractionController:
    """
    Handles all user input events and translates them to map actions.
    Owns the panning flag; hexagon flags and the viewport are mutated in place.
    """

    def __init__(self, viewport, hexagons=None, redraw=None, is_ready=None):
        """
        Initialize the controller.

        Args:
            viewport: Viewport used for screen -> world conversion, pan and zoom
            hexagons: List of Hexagon instances to hit-test
            redraw: Callable invoked at the end of every handled event
            is_ready: Callable telling whether the map finished loading;
                defaults to the armed flag
        """
        self.viewport = viewport
        self.hexagons = hexagons if hexagons is not None else []
        self.redraw = redraw or (lambda: None)
        self.is_ready = is_ready or (lambda: self.armed)
        self.panning = False
        self.armed = False
        self._loading_warned = False

    def arm(self):
        """Start reacting to events (called once loading completes)."""
        self.armed = True
        self.panning = False

    def disarm(self):
        self.armed = False
        self.panning = False

    def _still_loading(self):
        if self.is_ready():
            self._loading_warned = False
            return False
        if not self._loading_warned:
            logger.warning("The map is still loading, please wait")
            self._loading_warned = True
        return True

    def _hit(self, event):
        """Return the hexagon under the event position, or None."""
        x, y = self.viewport.screen_to_world(*event.pos)
        match = None
        for hexagon in self.hexagons:
            if hexagon.is_in(x, y):
                match = hexagon  # Last match wins on overlap
        return match

    def pointer_down(self):
        if not self.is_ready():
            return  # Presses during loading never start a drag
        self.panning = True

    def pointer_up(self):
        self.panning = False

    def pointer_leave(self):
        self.panning = False

    def pointer_move(self, event):
        """Update hover flags and drag the view while the pointer is held."""
        if self._still_loading():
            return
        if event.is_multi_touch:
            return

        target = self._hit(event)
        for hexagon in self.hexagons:
            hexagon.active = hexagon is target

        if self.panning:
            dx, dy = event.movement
            self.viewport.pan(-dx, -dy)

        self.redraw()

    def wheel(self, delta_y):
        """Zoom; returns True when default scrolling should be suppressed."""
        if self._still_loading():
            return False
        self.viewport.zoom(-delta_y / WHEEL_SENSITIVITY)
        self.redraw()
        return True

    def click(self, event):
        """Select the hexagon under a click or tap, clearing any other selection."""
        if self._still_loading():
            return
        if event.is_multi_touch:
            return

        target = self._hit(event)
        for hexagon in self.hexagons:
            hexagon.selected = hexagon is target
        if target is not None:
            logger.debug("Selected hexagon row=%d column=%d", target.coord.row, target.coord.column)

        self.redraw()
