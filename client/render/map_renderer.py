"""
Map Reference: Star map frame.
Purpose: Compose one frame: map image at the current zoom, then highlighted hexagons.
Dependencies: a drawing surface (client/render/drawer.py or any object with the same methods).
Client Only: Dispatch loop over the drawer.
"""


def render(drawer, image, viewport, hexagons):
    width, height = image.get_size()
    drawer.set_size(width, height)
    drawer.clear()
    offset = viewport.render_offset()
    drawer.draw_scaled_region(offset.x, offset.y, viewport.scale, image)
    for hexagon in hexagons:
        if hexagon.active or hexagon.selected:
            drawer.draw_hexagon(hexagon, viewport)
    drawer.present()
