"""
Map Reference: Star map rows 1..71, one optional skipped cell per row.
Purpose: Build the hexagon grid from placement metadata.
Dependencies: core/hex/hexagon.py, core/hex/metadata.py, core/config.py, math, logging.
Ext Hooks: Spatial index keyed by (row, column) if the map grows.
"""

import logging
import math
from core.config import ROW_COUNT, HEX_SIZE
from core.hex.hexagon import Hexagon

logger = logging.getLogger(__name__)


def js_round(value):
    """JavaScript `Math.round` semantics: halves round toward +inf (-0.5 -> 0, 2.5 -> 3)."""
    return math.floor(value + 0.5)


def skip_columns(special):
    """Map row -> zero-based column to omit; ``special`` columns are 1-based."""
    return {row: col - 1 for row, col in special}


def build_hexagons(metadata, row_count=ROW_COUNT, hex_size=HEX_SIZE):
    """Create one Hexagon per non-skipped cell, row by row, left to right.

    Rows missing a row-length or left-offset entry produce no cells.
    """
    skip = skip_columns(metadata.special)
    hexagons = []
    for row in range(1, row_count + 1):
        length = metadata.row_length.get(row)
        left = metadata.left_offset.get(row)
        if length is None or left is None:
            logger.debug("Row %d has no placement data, treating as empty", row)
            continue

        y = metadata.bottom_offset + row * metadata.vertical_step - js_round(metadata.flatten * row)
        skip_count = 0
        for col in range(length):
            if skip.get(row) == col:
                skip_count += 1
                continue
            hexagons.append(Hexagon(
                left + col * metadata.horizontal_step,
                y,
                hex_size,
                hex_size,
                row,
                col + 1 - skip_count,
            ))
    logger.info("Built %d hexagons over %d rows", len(hexagons), row_count)
    return hexagons


def find_hexagon(hexagons, row, column):
    """Return the hexagon at a logical (row, column), or None."""
    for hexagon in hexagons:
        if hexagon.coord.row == row and hexagon.coord.column == column:
            return hexagon
    return None
