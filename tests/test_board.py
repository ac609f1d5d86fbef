import unittest

from game import (
    EMPTY,
    Grid,
    InvalidDimensions,
    OutOfBounds,
    SameGameError,
    create_grid,
    random_fill,
    at,
    width,
    height,
)

A, B, C = 0, 1, 2
_ = EMPTY


class TestGrid(unittest.TestCase):
    def test_given_size_only_when_creating_then_all_cells_empty(self):
        g = create_grid(3, 2)
        self.assertEqual((g.width, g.height), (3, 2))
        self.assertEqual(len(g.cells), 6)
        self.assertTrue(all(c is EMPTY for c in g.cells))

    def test_given_rows_when_creating_then_cells_addressed_by_column_and_row(self):
        g = create_grid(3, 2, [
            [A, B, C],
            [C, _, A],
        ])
        self.assertEqual(g.at(0, 0), A)
        self.assertEqual(g.at(2, 0), C)
        self.assertEqual(g.at(0, 1), C)
        self.assertIsNone(g.at(1, 1))
        self.assertEqual(g.index(2, 1), 5)
        self.assertEqual(at(g, 1, 0), B)
        self.assertEqual(width(g), 3)
        self.assertEqual(height(g), 2)

    def test_given_wrong_row_count_when_creating_then_invalid_dimensions(self):
        with self.assertRaises(InvalidDimensions):
            create_grid(2, 3, [[A, B], [B, A]])

    def test_given_ragged_rows_when_creating_then_invalid_dimensions(self):
        with self.assertRaises(InvalidDimensions):
            create_grid(2, 2, [[A, B], [B]])

    def test_given_flat_cells_of_wrong_length_when_constructing_then_invalid_dimensions(self):
        with self.assertRaises(InvalidDimensions):
            Grid(width=2, height=2, cells=(A, B, C))
        with self.assertRaises(InvalidDimensions):
            Grid(width=0, height=2, cells=())

    def test_given_invalid_dimensions_when_caught_as_value_error_then_still_matches(self):
        with self.assertRaises(ValueError):
            create_grid(1, 1, [[A, A]])

    def test_given_coordinate_outside_when_reading_then_out_of_bounds(self):
        g = create_grid(2, 2, [[A, B], [B, A]])
        for x, y in [(-1, 0), (0, -1), (2, 0), (0, 2)]:
            with self.assertRaises(OutOfBounds) as ctx:
                g.at(x, y)
            self.assertEqual((ctx.exception.x, ctx.exception.y), (x, y))
            self.assertIsInstance(ctx.exception, SameGameError)
            self.assertIsInstance(ctx.exception, IndexError)

    def test_given_grid_when_reading_columns_and_rows_then_consistent_views(self):
        g = create_grid(2, 3, [
            [A, B],
            [C, _],
            [A, A],
        ])
        self.assertEqual(g.column(0), (A, C, A))
        self.assertEqual(g.column(1), (B, _, A))
        self.assertEqual(list(g.rows()), [(A, B), (C, _), (A, A)])
        self.assertEqual(g.to_rows(), [[A, B], [C, _], [A, A]])
        self.assertEqual(list(g.coords())[:3], [(0, 0), (1, 0), (0, 1)])
        self.assertEqual(g.filled_count(), 5)

    def test_given_grid_when_pretty_then_empty_cells_are_dots(self):
        g = create_grid(2, 2, [[A, _], [B, C]])
        self.assertEqual(g.pretty(), "0 .\n1 2")
        self.assertEqual(g.pretty(highlight={(0, 1)}), "0 .\n* 2")

    def test_given_color_id_without_glyph_when_pretty_then_value_error(self):
        self.assertEqual(create_grid(1, 1, [[35]]).pretty(), "Z")
        with self.assertRaises(ValueError):
            create_grid(2, 1, [[0, 36]]).pretty()

    def test_given_grid_when_assigning_attribute_then_frozen(self):
        g = create_grid(1, 1, [[A]])
        with self.assertRaises(AttributeError):
            g.width = 5  # type: ignore[misc]


class TestRandomFill(unittest.TestCase):
    def test_given_palette_when_filling_then_every_cell_holds_a_color(self):
        g = random_fill(20, 10, 3, seed=1)
        self.assertEqual((g.width, g.height), (20, 10))
        self.assertTrue(all(c in (0, 1, 2) for c in g.cells))

    def test_given_same_seed_when_filling_twice_then_same_board(self):
        self.assertEqual(random_fill(5, 4, 3, seed=42), random_fill(5, 4, 3, seed=42))

    def test_given_single_color_palette_when_filling_then_uniform_board(self):
        g = random_fill(4, 4, 1, seed=0)
        self.assertEqual(set(g.cells), {0})

    def test_given_bad_sizes_when_filling_then_invalid_dimensions(self):
        with self.assertRaises(InvalidDimensions):
            random_fill(0, 3, 3)
        with self.assertRaises(InvalidDimensions):
            random_fill(3, 3, 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
