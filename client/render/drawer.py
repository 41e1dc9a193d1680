"""
Map Reference: Canvas-style drawing for the star map window.
Purpose: pygame drawing surface: map-sized backing buffer scaled to the window.
Dependencies: pygame, utils/draw_utils.py, core/config.py.
Ext Hooks: Labels for selected hexagons.
Client Only: All visuals; no map state.
"""

import math
import pygame
from core.config import BACKGROUND_COLOR, ACTIVE_COLOR, SELECTED_COLOR, HEX_ALPHA
from utils.draw_utils import draw_hex_overlay


class Drawer:
    """
    Draws into a backing surface sized like the map image, then scales it
    to the window on present(). Screen -> world conversion in the viewport
    assumes exactly this placement.
    """

    def __init__(self, screen):
        self.screen = screen
        self.buffer = None

    def get_screen_size(self):
        return self.screen.get_size()

    def set_size(self, width, height):
        if self.buffer is None or self.buffer.get_size() != (width, height):
            self.buffer = pygame.Surface((width, height))

    def clear(self):
        self.buffer.fill(BACKGROUND_COLOR)

    def draw_scaled_region(self, offset_x, offset_y, scale, image):
        """Blit the visible image region, enlarged by ``scale``, over the whole buffer.

        World point (x, y) lands at ((x - offset_x) * scale, (y - offset_y) * scale),
        the same placement draw_hexagon and the viewport use.
        """
        width, height = self.buffer.get_size()
        left, top = math.floor(offset_x), math.floor(offset_y)
        frac_x, frac_y = offset_x - left, offset_y - top
        # One extra source pixel covers the fractional shift
        region = pygame.Rect(left, top,
                             math.ceil(width / scale + frac_x) + 1,
                             math.ceil(height / scale + frac_y) + 1)
        region = region.clip(image.get_rect())
        if region.width == 0 or region.height == 0:
            return
        part = image.subsurface(region)
        scaled = pygame.transform.scale(part, (round(region.width * scale), round(region.height * scale)))
        self.buffer.blit(scaled, (-round(frac_x * scale), -round(frac_y * scale)))

    def draw_hexagon(self, hexagon, viewport):
        offset = viewport.render_offset()
        scale = viewport.scale
        points = [((x - offset.x) * scale, (y - offset.y) * scale) for x, y in hexagon.corners()]
        color = SELECTED_COLOR if hexagon.selected else ACTIVE_COLOR
        draw_hex_overlay(self.buffer, points, color, HEX_ALPHA)

    def present(self):
        if self.buffer is None:
            return
        if self.buffer.get_size() == self.screen.get_size():
            self.screen.blit(self.buffer, (0, 0))
        else:
            self.screen.blit(pygame.transform.smoothscale(self.buffer, self.screen.get_size()), (0, 0))
        pygame.display.flip()
