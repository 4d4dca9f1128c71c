import unittest
import numpy as np

from ndgrad.infrastructure.tensor import Tensor
from ndgrad.infrastructure.tensor._kinds import dtype_of, kind_of, store_as_kind
from ndgrad.domain._element_kind import ElementKind


class TestKindMapping(unittest.TestCase):
    def test_dtype_of_and_kind_of_agree(self):
        for kind in ElementKind:
            with self.subTest(kind=kind):
                self.assertIs(kind_of(dtype_of(kind)), kind)

    def test_kind_of_rejects_unknown_dtype(self):
        with self.assertRaises(ValueError):
            kind_of(np.int16)


class TestStoreSemantics(unittest.TestCase):
    def test_float32_rounds_to_precision(self):
        t = Tensor.from_nested([0.1], "float32")
        self.assertEqual(t.data[0], float(np.float32(0.1)))

    def test_float64_keeps_precision(self):
        self.assertEqual(Tensor.from_nested([0.1], "float64").data, [0.1])

    def test_integer_kinds_truncate_toward_zero(self):
        t = Tensor.from_nested([2.7, -2.7, 0.5], "int32")
        self.assertEqual(t.data, [2, -2, 0])

    def test_integer_kinds_map_non_finite_to_zero(self):
        t = Tensor.from_nested([float("nan"), float("inf"), -float("inf")], "int32")
        self.assertEqual(t.data, [0, 0, 0])

    def test_uint8_wraps_modulo_256(self):
        t = Tensor.from_nested([300, -1, 256], "uint8")
        self.assertEqual(t.data, [44, 255, 0])

    def test_int8_wraps_into_signed_range(self):
        t = Tensor.from_nested([200, -129, 127], "int8")
        self.assertEqual(t.data, [-56, 127, 127])

    def test_int32_wraps(self):
        t = Tensor.from_nested([2**31], "int32")
        self.assertEqual(t.data, [-(2**31)])

    def test_store_as_kind_returns_flat_read_only_buffer(self):
        buf = store_as_kind([[1, 2], [3, 4]], "float64")
        self.assertEqual(buf.shape, (4,))
        self.assertFalse(buf.flags.writeable)
        self.assertTrue(buf.flags.c_contiguous)

    def test_store_as_kind_shares_immutable_buffer(self):
        buf = store_as_kind([1.0, 2.0], ElementKind.FLOAT32)
        self.assertIs(store_as_kind(buf, ElementKind.FLOAT32), buf)
        self.assertIsNot(store_as_kind(buf, ElementKind.FLOAT64), buf)


if __name__ == "__main__":
    unittest.main()
