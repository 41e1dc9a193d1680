"""
Map Reference: Star map data server.
Purpose: Flask server for map metadata and image.
Dependencies: flask, server/routes/map.py.
Ext Hooks: Add more routes.
Client/Server: Server for static map data.
"""

import sys
import os
import logging
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flask import Flask
from server.routes.map import bp as map_bp

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "data"))


def create_app(data_dir=None):
    app = Flask(__name__)
    app.config['STARMAP_DATA_DIR'] = data_dir or os.environ.get("STARMAP_DATA_DIR", DEFAULT_DATA_DIR)
    app.register_blueprint(map_bp)
    logger.info("Serving map data from %s", app.config['STARMAP_DATA_DIR'])
    return app


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    create_app().run(debug=True)


if __name__ == "__main__":
    main()
