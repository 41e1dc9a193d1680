"""
Map Reference: Interactive star map widget.
Purpose: Own the hexagons, viewport and input controller for one drawing target.
Dependencies: core/hex/grid.py, core/viewport.py, client/input_handler.py,
    client/loader.py, client/render/map_renderer.py, core/config.py, logging.
Ext Hooks: Several maps per window (one StarMap per drawer).
Client Only: Composition root; no globals.
"""

import logging
from core.config import MAP_WIDTH, MAP_HEIGHT
from core.hex.grid import build_hexagons, find_hexagon
from core.viewport import Viewport
from client.input_handler import InteractionController
from client.loader import MapLoader
from client.render import map_renderer

logger = logging.getLogger(__name__)


class StarMap:
    """
    Hexagon map over a raster image.

    Events are ignored until load() has joined both fetches and armed the
    controller; set_image/set_metadata may be called again at any time.
    """

    def __init__(self, drawer, screen_size=None):
        self.drawer = drawer
        screen_width, screen_height = screen_size or drawer.get_screen_size()
        self.viewport = Viewport(MAP_WIDTH, MAP_HEIGHT, screen_width, screen_height)
        self.image = None
        self.metadata = None
        self.hexagons = []
        self.controller = InteractionController(
            self.viewport,
            self.hexagons,
            redraw=self.draw_map,
            is_ready=self._is_ready,
        )

    def _is_ready(self):
        return self.controller.armed and not self.still_loading()

    def still_loading(self):
        return self.image is None or self.metadata is None

    def load(self, fetch_metadata, fetch_image):
        """Fetch metadata and image concurrently, build the grid, then arm input."""
        metadata, image = MapLoader(fetch_metadata, fetch_image).load()
        return self.finish_load(metadata, image)

    def finish_load(self, metadata, image):
        """Install loaded data and arm the controller. Call on the UI thread."""
        self.set_metadata(metadata)
        self.set_image(image)
        self.controller.arm()
        logger.info("Star map ready with %d hexagons", len(self.hexagons))
        return self

    def set_image(self, image):
        self.image = image
        self.viewport.set_world_size(*image.get_size())
        self.draw_map()
        return self

    def set_metadata(self, metadata):
        """Replace the metadata and rebuild the grid (flags start cleared)."""
        self.metadata = metadata
        self.hexagons = build_hexagons(metadata)
        self.controller.hexagons = self.hexagons
        self.draw_map()
        return self

    def resize(self, width, height):
        self.viewport.set_screen_size(width, height)
        self.draw_map()
        return self

    def draw_map(self):
        if self.image is None:
            return self
        map_renderer.render(self.drawer, self.image, self.viewport, self.hexagons)
        return self

    def selected_hexagons(self):
        return [h for h in self.hexagons if h.selected]

    def active_hexagon(self):
        for hexagon in self.hexagons:
            if hexagon.active:
                return hexagon
        return None

    def unselect(self):
        for hexagon in self.hexagons:
            hexagon.selected = False
        self.draw_map()

    def find_hexagon(self, row, column):
        return find_hexagon(self.hexagons, row, column)
