"""In-memory stand-ins for the pygame drawing surface and image."""


class FakeImage:
    def __init__(self, width=100, height=100):
        self.width = width
        self.height = height

    def get_size(self):
        return self.width, self.height


class FakeDrawer:
    def __init__(self, screen_size=(100, 100)):
        self.screen_size = screen_size
        self.calls = []
        self.drawn = []
        self.frames = 0

    def get_screen_size(self):
        return self.screen_size

    def set_size(self, width, height):
        self.calls.append(('set_size', width, height))

    def clear(self):
        self.calls.append(('clear',))
        self.drawn = []

    def draw_scaled_region(self, offset_x, offset_y, scale, image):
        self.calls.append(('draw_scaled_region', offset_x, offset_y, scale, image))

    def draw_hexagon(self, hexagon, viewport):
        self.drawn.append(hexagon)

    def present(self):
        self.frames += 1
