"""
Utility script to generate a placeholder star map image and matching metadata.
In the grand scheme, this gives the map server something to serve until the real artwork and survey data are dropped into data/.
Dependencies: pygame, json, math, random, os, core/hex/grid.py.
"""

import json
import math
import os
import random
import pygame
from core.config import MAP_WIDTH, MAP_HEIGHT, ROW_COUNT
from core.hex.grid import build_hexagons
from core.hex.metadata import Metadata

HORIZONTAL_STEP = 12
VERTICAL_STEP = 13
FLATTEN = 0.1
MAX_ROW_LENGTH = 70
SPECIAL = [(12, 5), (36, 35), (60, 10)]


def generate_metadata():
    """Disc-shaped layout centered on the image, odd rows shifted by half a step."""
    row_length = {}
    left_offset = {}
    middle = (ROW_COUNT + 1) / 2
    for row in range(1, ROW_COUNT + 1):
        ratio = (row - middle) / middle
        length = max(1, int(MAX_ROW_LENGTH * math.sqrt(1 - ratio * ratio)))
        row_length[row] = length
        left_offset[row] = (MAP_WIDTH - (length - 1) * HORIZONTAL_STEP) / 2 + (row % 2) * HORIZONTAL_STEP / 2
    return Metadata(
        row_length=row_length,
        left_offset=left_offset,
        bottom_offset=0,
        horizontal_step=HORIZONTAL_STEP,
        vertical_step=VERTICAL_STEP,
        flatten=FLATTEN,
        special=list(SPECIAL),
    )


def generate_image(metadata, seed=7):
    rng = random.Random(seed)
    image = pygame.Surface((MAP_WIDTH, MAP_HEIGHT))
    image.fill((5, 5, 20))
    for _ in range(1500):
        shade = rng.randint(120, 255)
        image.set_at((rng.randrange(MAP_WIDTH), rng.randrange(MAP_HEIGHT)), (shade, shade, shade))
    for hexagon in build_hexagons(metadata):
        pygame.draw.lines(image, (40, 60, 90), True, hexagon.corners(), 1)
    return image


def generate_map(output_dir='data'):
    pygame.init()
    metadata = generate_metadata()
    os.makedirs(output_dir, exist_ok=True)
    with open(os.path.join(output_dir, 'metadata.json'), 'w', encoding='utf-8') as f:
        json.dump(metadata.to_json(), f, indent=2)
    pygame.image.save(generate_image(metadata), os.path.join(output_dir, 'map.png'))
    pygame.quit()
    print(f"Placeholder map generated in {output_dir}")

if __name__ == '__main__':
    generate_map()
