import unittest

from ndgrad.domain.utils._layout import (
    flatten,
    shape_of,
    rebuild,
    numel,
    row_major_strides,
    ravel_index,
    unravel_index,
)
from ndgrad.domain._errors import BoundsError


class TestFlattenAndShape(unittest.TestCase):
    def test_flatten_nested_is_depth_first(self):
        self.assertEqual(flatten([[1, 2], [3, [4, 5]]]), [1, 2, 3, 4, 5])

    def test_flatten_scalar_yields_single_element(self):
        self.assertEqual(flatten(7.5), [7.5])

    def test_flatten_accepts_tuples(self):
        self.assertEqual(flatten(((1, 2), (3, 4))), [1, 2, 3, 4])

    def test_shape_of_follows_first_element(self):
        self.assertEqual(shape_of([[1, 2, 3], [4, 5, 6]]), (2, 3))
        self.assertEqual(shape_of([[[1], [2]]]), (1, 2, 1))

    def test_shape_of_scalar_and_empty(self):
        self.assertEqual(shape_of(3), ())
        self.assertEqual(shape_of([]), (0,))

    def test_ragged_literal_is_not_validated(self):
        ragged = [[1, 2], [3]]
        self.assertEqual(shape_of(ragged), (2, 2))
        self.assertEqual(len(flatten(ragged)), 3)


class TestRebuild(unittest.TestCase):
    def test_rebuild_inverts_flatten(self):
        for d in (
            [1, 2, 3],
            [[1, 2], [3, 4], [5, 6]],
            [[[1, 2, 3], [4, 5, 6]], [[7, 8, 9], [10, 11, 12]]],
            [[[0.5]]],
        ):
            with self.subTest(d=d):
                self.assertEqual(rebuild(flatten(d), shape_of(d)), d)

    def test_rebuild_scalar_shape(self):
        self.assertEqual(rebuild([4.0], ()), 4.0)

    def test_rebuild_zero_extent(self):
        self.assertEqual(rebuild([], (0,)), [])
        self.assertEqual(rebuild([], (0, 3)), [])


class TestRowMajorIndexing(unittest.TestCase):
    def test_numel(self):
        self.assertEqual(numel(()), 1)
        self.assertEqual(numel((2, 3, 4)), 24)
        self.assertEqual(numel((2, 0, 4)), 0)

    def test_row_major_strides(self):
        self.assertEqual(row_major_strides((2, 3, 4)), (12, 4, 1))
        self.assertEqual(row_major_strides((5,)), (1,))
        self.assertEqual(row_major_strides(()), ())

    def test_ravel_unravel_are_inverse(self):
        shape = (2, 3, 4)
        for flat in range(numel(shape)):
            coord = unravel_index(flat, shape)
            self.assertEqual(ravel_index(coord, shape), flat)

    def test_ravel_index_value(self):
        self.assertEqual(ravel_index((1, 2, 3), (2, 3, 4)), 23)
        self.assertEqual(unravel_index(5, (2, 3)), (1, 2))

    def test_ravel_index_out_of_range_raises(self):
        with self.assertRaises(BoundsError) as ctx:
            ravel_index((0, 3), (2, 3))
        self.assertEqual(ctx.exception.index, 3)
        self.assertEqual(ctx.exception.extent, 3)

    def test_ravel_index_wrong_length_raises(self):
        with self.assertRaises(BoundsError):
            ravel_index((0,), (2, 3))

    def test_unravel_index_out_of_range_raises(self):
        with self.assertRaises(BoundsError):
            unravel_index(6, (2, 3))
        with self.assertRaises(BoundsError):
            unravel_index(-1, (2, 3))


if __name__ == "__main__":
    unittest.main()
