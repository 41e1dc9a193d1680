import unittest
from core.hex.grid import build_hexagons
from core.hex.hexagon import Hexagon
from core.hex.metadata import Metadata


class TestHexagon(unittest.TestCase):
    def setUp(self):
        self.hexagon = Hexagon(50, 50, 10, 10, 3, 4)

    def test_center_and_corners_are_inside(self):
        self.assertTrue(self.hexagon.is_in(50, 50))
        for x, y in self.hexagon.corners():
            self.assertTrue(self.hexagon.is_in(x, y))

    def test_bounding_box_corners_are_outside(self):
        # Inside the 10x10 box but outside the hexagon
        self.assertFalse(self.hexagon.is_in(45.5, 45.5))
        self.assertFalse(self.hexagon.is_in(54.5, 54.5))
        self.assertFalse(self.hexagon.is_in(54.5, 45.5))

    def test_far_points_are_outside(self):
        self.assertFalse(self.hexagon.is_in(56, 50))
        self.assertFalse(self.hexagon.is_in(50, 44))

    def test_is_in_does_not_mutate(self):
        self.hexagon.is_in(50, 50)
        self.assertFalse(self.hexagon.active)
        self.assertFalse(self.hexagon.selected)

    def test_geometry_is_read_only(self):
        with self.assertRaises(AttributeError):
            self.hexagon.position = None
        self.assertEqual((self.hexagon.coord.row, self.hexagon.coord.column), (3, 4))

    def test_grid_hit_regions_do_not_overlap(self):
        meta = Metadata(
            row_length={r: 8 for r in range(1, 11)},
            left_offset={r: 20 + (r % 2) * 6 for r in range(1, 11)},
            bottom_offset=0,
            horizontal_step=12,
            vertical_step=13,
            flatten=0.1,
            special=[(4, 3)],
        )
        hexagons = build_hexagons(meta)
        for hexagon in hexagons:
            hits = [h for h in hexagons if h.is_in(hexagon.position.x, hexagon.position.y)]
            self.assertEqual(hits, [hexagon])


if __name__ == '__main__':
    unittest.main()
