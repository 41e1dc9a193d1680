import math
import random
import unittest
from core.config import MAX_SCALE, MIN_SCALE
from core.viewport import Viewport


class TestViewport(unittest.TestCase):
    def assertInBounds(self, viewport):
        x, y, width, height = viewport.visible_rect()
        self.assertGreaterEqual(x, -1e-9)
        self.assertGreaterEqual(y, -1e-9)
        self.assertLessEqual(x + width, viewport.world_width + 1e-9)
        self.assertLessEqual(y + height, viewport.world_height + 1e-9)

    def test_screen_to_world_scenario(self):
        viewport = Viewport(100, 100, 100, 100, scale=2, offset=(5, 5))
        self.assertEqual(viewport.screen_to_world(0, 0), (5, 5))
        self.assertEqual(viewport.screen_to_world(100, 0), (5 + 100 / 2, 5))

    def test_screen_to_world_uses_world_to_screen_ratio(self):
        viewport = Viewport(962, 924, 481, 462)
        self.assertEqual(viewport.screen_to_world(10, 10), (20, 20))

    def test_world_to_screen_is_inverse(self):
        viewport = Viewport(962, 924, 800, 600, scale=3.3, offset=(120.5, 310.25))
        for wx, wy in [(120.5, 310.25), (200, 400), (300.75, 555.5)]:
            sx, sy = viewport.world_to_screen(wx, wy)
            rx, ry = viewport.screen_to_world(sx, sy)
            self.assertAlmostEqual(rx, wx)
            self.assertAlmostEqual(ry, wy)

    def test_screen_to_world_is_pure(self):
        viewport = Viewport(100, 100, 100, 100, scale=2, offset=(5, 5))
        before = (viewport.scale, viewport.offset)
        viewport.screen_to_world(40, 60)
        self.assertEqual((viewport.scale, viewport.offset), before)

    def test_zoom_clamps_to_max(self):
        viewport = Viewport(100, 100, 100, 100)
        for _ in range(50):
            viewport.zoom(0.5)
            self.assertLessEqual(viewport.scale, MAX_SCALE)
        self.assertEqual(viewport.scale, MAX_SCALE)
        viewport.zoom(math.inf)
        self.assertEqual(viewport.scale, MAX_SCALE)
        self.assertInBounds(viewport)

    def test_zoom_clamps_to_min(self):
        viewport = Viewport(100, 100, 100, 100, scale=4)
        viewport.zoom(-math.inf)
        self.assertEqual(viewport.scale, MIN_SCALE)
        viewport.zoom(-5)
        self.assertEqual(viewport.scale, MIN_SCALE)
        self.assertEqual((viewport.offset_x, viewport.offset_y), (0, 0))

    def test_zoom_keeps_center(self):
        viewport = Viewport(100, 100, 100, 100)
        viewport.zoom(1)
        self.assertEqual(viewport.scale, 2)
        self.assertEqual((viewport.offset_x, viewport.offset_y), (25, 25))

    def test_zoom_nan_is_ignored(self):
        viewport = Viewport(100, 100, 100, 100, scale=2)
        viewport.zoom(math.nan)
        self.assertEqual(viewport.scale, 2)

    def test_pan_scales_screen_distance(self):
        viewport = Viewport(200, 200, 100, 100, scale=2)
        viewport.pan(10, 4)
        self.assertEqual((viewport.offset_x, viewport.offset_y), (10, 4))

    def test_pan_clamps(self):
        viewport = Viewport(100, 100, 100, 100, scale=2)
        viewport.pan(-1000, -1000)
        self.assertEqual((viewport.offset_x, viewport.offset_y), (0, 0))
        viewport.pan(1000, 1000)
        self.assertEqual((viewport.offset_x, viewport.offset_y), (50, 50))

    def test_pan_at_min_scale_does_nothing(self):
        viewport = Viewport(100, 100, 100, 100)
        viewport.pan(30, 30)
        self.assertEqual((viewport.offset_x, viewport.offset_y), (0, 0))

    def test_random_pan_zoom_stays_in_bounds(self):
        rng = random.Random(42)
        viewport = Viewport(962, 924, 640, 480)
        for _ in range(500):
            if rng.random() < 0.3:
                viewport.zoom(rng.uniform(-1.5, 1.5))
            else:
                viewport.pan(rng.uniform(-300, 300), rng.uniform(-300, 300))
            self.assertInBounds(viewport)
            self.assertTrue(MIN_SCALE <= viewport.scale <= MAX_SCALE)

    def test_set_world_size_reclamps(self):
        viewport = Viewport(200, 200, 100, 100, scale=2, offset=(100, 100))
        viewport.set_world_size(100, 100)
        self.assertEqual((viewport.offset_x, viewport.offset_y), (50, 50))
        self.assertInBounds(viewport)

    def test_render_offset(self):
        viewport = Viewport(100, 100, 100, 100, scale=2, offset=(5, 7))
        offset = viewport.render_offset()
        self.assertEqual((offset.x, offset.y), (5, 7))

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            Viewport(0, 100, 100, 100)
        with self.assertRaises(ValueError):
            Viewport(100, 100, 100, -1)
        with self.assertRaises(ValueError):
            Viewport(100, 100, 100, 100, min_scale=2, max_scale=1)


if __name__ == '__main__':
    unittest.main()
