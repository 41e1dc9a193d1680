"""
Map Reference: Initial load of the star map (metadata + image).
Purpose: Run both fetches concurrently and join them before the map goes live.
Dependencies: threading, io, logging, pygame, client/network/client.py, core/hex/metadata.py.
Ext Hooks: Progress reporting, cancellation.
Client Only: Loading layer; fetch failures are raised, never swallowed.
"""

import io
import logging
import threading
import pygame
from core.config import METADATA_ENDPOINT, IMAGE_ENDPOINT
from core.hex.metadata import Metadata

logger = logging.getLogger(__name__)


class MapLoadError(Exception):
    """Raised when the metadata or image fetch failed."""


class MapLoader:
    """Load barrier: two independent fetches, both joined before returning."""

    def __init__(self, fetch_metadata, fetch_image):
        self.fetch_metadata = fetch_metadata
        self.fetch_image = fetch_image

    def load(self):
        """Return (metadata, image) once both fetches have finished."""
        results = {}
        errors = {}

        def run(name, fetch):
            try:
                results[name] = fetch()
            except Exception as e:  # Re-raised below on the calling thread
                errors[name] = e

        threads = [
            threading.Thread(target=run, args=('metadata', self.fetch_metadata), daemon=True),
            threading.Thread(target=run, args=('image', self.fetch_image), daemon=True),
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for name in ('metadata', 'image'):
            if name in errors:
                raise MapLoadError(f"Failed to load map {name}: {errors[name]}") from errors[name]
        logger.info("Map metadata and image loaded")
        return results['metadata'], results['image']


def server_fetchers(client):
    """Fetch callables reading metadata and image from the map server."""

    def fetch_metadata():
        return Metadata.from_json(client.get_json_with_retry(METADATA_ENDPOINT))

    def fetch_image():
        data = client.get_bytes_with_retry(IMAGE_ENDPOINT)
        return pygame.image.load(io.BytesIO(data))

    return fetch_metadata, fetch_image
