import itertools
import unittest
import numpy as np

from ndgrad.infrastructure.tensor import Tensor
from ndgrad.domain._errors import InvalidPermutationError


def _inverse(perm):
    inv = [0] * len(perm)
    for i, p in enumerate(perm):
        inv[p] = i
    return inv


class TestTensorPermute(unittest.TestCase):
    def setUp(self):
        self.arr = np.arange(24, dtype=np.float64).reshape(2, 3, 4)
        self.t = Tensor.from_numpy(self.arr)

    def test_2d_transpose(self):
        t = Tensor.from_nested([[1, 2, 3], [4, 5, 6]])
        p = t.permute(1, 0)
        self.assertEqual(p.shape, (3, 2))
        self.assertEqual(p.data, [[1, 4], [2, 5], [3, 6]])

    def test_matches_numpy_transpose_for_all_permutations(self):
        for perm in itertools.permutations(range(3)):
            with self.subTest(perm=perm):
                out = self.t.permute(*perm)
                self.assertEqual(out.shape, tuple(self.arr.shape[d] for d in perm))
                np.testing.assert_array_equal(
                    out.to_numpy(), np.transpose(self.arr, perm)
                )

    def test_inverse_permutation_restores_data(self):
        for perm in itertools.permutations(range(3)):
            with self.subTest(perm=perm):
                back = self.t.permute(perm).permute(_inverse(perm))
                self.assertEqual(back.data, self.t.data)

    def test_identity_permutation(self):
        self.assertEqual(self.t.permute(0, 1, 2).data, self.t.data)

    def test_rank0_and_empty(self):
        self.assertEqual(Tensor.from_nested(2.0).permute().data, 2.0)
        e = Tensor.zeros((0, 3)).permute(1, 0)
        self.assertEqual(e.shape, (3, 0))

    def test_preserves_kind(self):
        t = Tensor.from_nested([[1, 2]], "int8")
        self.assertIs(t.permute(1, 0).kind, t.kind)

    def test_invalid_permutations_raise(self):
        for dims in ((0, 1), (0, 1, 1), (0, 1, 3), (0, 1, 2, 3), (0.0, 1, 2)):
            with self.subTest(dims=dims):
                with self.assertRaises(InvalidPermutationError) as ctx:
                    self.t.permute(*dims)
                self.assertEqual(ctx.exception.rank, 3)


if __name__ == "__main__":
    unittest.main()
