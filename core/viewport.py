"""
Map Reference: Pan/zoom over the star map image.
Purpose: Viewport transform (scale + offset) and screen <-> world mapping.
Dependencies: core/config.py, core/hex/hexagon.py (Point), math.
Ext Hooks: Zoom around the pointer instead of the view center.
"""

import math
from core.config import MIN_SCALE, MAX_SCALE
from core.hex.hexagon import Point


class Viewport:
    """Visible region of the world, kept inside the world bounds.

    At scale 1 the whole world fills the screen; at scale ``s`` the visible
    region is ``world_size / s`` wide and high, starting at ``offset``.
    """

    def __init__(self, world_width, world_height, screen_width, screen_height,
                 min_scale=MIN_SCALE, max_scale=MAX_SCALE, scale=None, offset=(0.0, 0.0)):
        if world_width <= 0 or world_height <= 0:
            raise ValueError("World dimensions must be positive")
        if screen_width <= 0 or screen_height <= 0:
            raise ValueError("Screen dimensions must be positive")
        if not 0 < min_scale <= max_scale:
            raise ValueError("Scale bounds must satisfy 0 < min_scale <= max_scale")
        self.world_width = float(world_width)
        self.world_height = float(world_height)
        self.screen_width = float(screen_width)
        self.screen_height = float(screen_height)
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.scale = self._clamp_scale(min_scale if scale is None else scale)
        self.offset_x, self.offset_y = float(offset[0]), float(offset[1])
        self._clamp_offset()

    @property
    def offset(self):
        return Point(self.offset_x, self.offset_y)

    def visible_width(self):
        return self.world_width / self.scale

    def visible_height(self):
        return self.world_height / self.scale

    def visible_rect(self):
        """(x, y, width, height) of the visible world region."""
        return (self.offset_x, self.offset_y, self.visible_width(), self.visible_height())

    def factor_width(self):
        return self.world_width / self.screen_width / self.scale

    def factor_height(self):
        return self.world_height / self.screen_height / self.scale

    def _clamp_scale(self, scale):
        return min(max(scale, self.min_scale), self.max_scale)

    def _clamp_offset(self):
        max_x = self.world_width - self.visible_width()
        max_y = self.world_height - self.visible_height()
        self.offset_x = min(max(self.offset_x, 0.0), max(max_x, 0.0))
        self.offset_y = min(max(self.offset_y, 0.0), max(max_y, 0.0))

    def zoom(self, delta):
        """Scale by ``1 + delta`` keeping the view center fixed."""
        new_scale = self.scale * (1 + delta)
        if math.isnan(new_scale):
            return
        center_x = self.offset_x + self.visible_width() / 2
        center_y = self.offset_y + self.visible_height() / 2
        self.scale = self._clamp_scale(new_scale)
        self.offset_x = center_x - self.visible_width() / 2
        self.offset_y = center_y - self.visible_height() / 2
        self._clamp_offset()

    def pan(self, dx, dy):
        """Move the view by a screen-space distance."""
        self.offset_x += dx * self.factor_width()
        self.offset_y += dy * self.factor_height()
        self._clamp_offset()

    def set_world_size(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError("World dimensions must be positive")
        self.world_width = float(width)
        self.world_height = float(height)
        self._clamp_offset()

    def set_screen_size(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError("Screen dimensions must be positive")
        self.screen_width = float(width)
        self.screen_height = float(height)

    def screen_to_world(self, sx, sy):
        # Must mirror how the drawer places the visible region on screen.
        wx = self.factor_width() * sx + self.offset_x
        wy = self.factor_height() * sy + self.offset_y
        return wx, wy

    def world_to_screen(self, wx, wy):
        sx = (wx - self.offset_x) / self.factor_width()
        sy = (wy - self.offset_y) / self.factor_height()
        return sx, sy

    def render_offset(self):
        return self.offset

    def __repr__(self):
        return f"Viewport(scale={self.scale:.3f}, offset=({self.offset_x:.1f}, {self.offset_y:.1f}))"
