"""
Map Reference: /api/metadata and /api/map.
Purpose: Serve the star map metadata JSON and raster image.
Dependencies: flask, json, pathlib.
Ext Hooks: Several maps keyed by name.
Server Only: Static map data.
"""
import json
from pathlib import Path
from flask import Blueprint, current_app, jsonify, send_file

bp = Blueprint('map', __name__)

METADATA_FILE = "metadata.json"
IMAGE_FILE = "map.png"


def _data_path(name):
    return Path(current_app.config['STARMAP_DATA_DIR']) / name


@bp.route("/api/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


@bp.route("/api/metadata", methods=["GET"])
def get_metadata():
    path = _data_path(METADATA_FILE)
    if not path.is_file():
        return jsonify({"error": "Metadata not found"}), 404
    with path.open(encoding="utf-8") as f:
        return jsonify(json.load(f))


@bp.route("/api/map", methods=["GET"])
def get_map_image():
    path = _data_path(IMAGE_FILE)
    if not path.is_file():
        return jsonify({"error": "Map image not found"}), 404
    return send_file(path.resolve(), mimetype="image/png")
