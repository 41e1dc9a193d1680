"""
Map Reference: Star map viewer window.
Purpose: pygame main loop: load the map in the background, pump input, redraw.
Dependencies: pygame, threading, argparse, logging, client/star_map.py,
    client/events.py, client/loader.py, client/network/client.py, core/config.py.
Ext Hooks: Side panel listing the selected system.
Client Only: Input and visuals.
"""

import argparse
import logging
import threading
import pygame
from core.config import SCREEN_WIDTH, SCREEN_HEIGHT, FPS, WINDOW_TITLE, SERVER_URL, BACKGROUND_COLOR
from client.events import EventTranslator
from client.loader import MapLoader, server_fetchers
from client.network.client import NetworkClient
from client.render.drawer import Drawer
from client.star_map import StarMap

logger = logging.getLogger(__name__)


class StarMapApp:
    """Window, clock and event pump around one StarMap."""

    def __init__(self, server_url=SERVER_URL, size=(SCREEN_WIDTH, SCREEN_HEIGHT)):
        pygame.init()
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.star_map = StarMap(Drawer(self.screen))
        self.translator = EventTranslator(self.star_map.controller, self.screen.get_size())
        self.client = NetworkClient(server_url)

        # Loading state, written by the loader thread and read by the loop
        self.loaded = None
        self.load_error = None
        self.running = True

    def start_loading(self):
        loader = MapLoader(*server_fetchers(self.client))

        def run():
            try:
                self.loaded = loader.load()
            except Exception as e:
                self.load_error = e

        thread = threading.Thread(target=run, daemon=True)
        thread.start()
        return thread

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.translator.window_size = event.size
                self.star_map.resize(*event.size)
            elif event.type == pygame.WINDOWEXPOSED:
                self.star_map.draw_map()
            else:
                self.translator.handle(event)

    def check_loading(self):
        """Install the loaded map on this thread once the barrier has released."""
        if self.load_error is not None:
            error, self.load_error = self.load_error, None
            raise error
        if self.loaded is not None and not self.star_map.controller.armed:
            metadata, image = self.loaded
            self.star_map.finish_load(metadata, image)

    def run(self):
        """Main loop."""
        self.start_loading()
        try:
            while self.running:
                self.clock.tick(FPS)
                self.check_loading()
                self.handle_events()
                if self.star_map.still_loading():
                    self.screen.fill(BACKGROUND_COLOR)
                    pygame.display.flip()
        finally:
            pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive star map viewer")
    parser.add_argument("--server", default=SERVER_URL, help="Map server base URL")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    StarMapApp(server_url=args.server).run()


if __name__ == "__main__":
    main()
