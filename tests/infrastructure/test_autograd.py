import unittest
import numpy as np

from ndgrad.infrastructure.tensor import Tensor, Context
from ndgrad.domain._grad_rule import GradRule


def scalar(x: float, kind: str = "float64") -> Tensor:
    return Tensor.from_nested(x, kind)


def finite_difference(fn, x_np: np.ndarray, eps: float = 1e-6) -> np.ndarray:
    """
    Central differences of an elementwise function ``fn`` at ``x_np``.
    """
    plus = fn(Tensor.from_numpy(x_np + eps)).to_numpy()
    minus = fn(Tensor.from_numpy(x_np - eps)).to_numpy()
    return (plus - minus) / (2 * eps)


class TestBackwardBasics(unittest.TestCase):
    def test_product_rule_on_scalars(self):
        a = scalar(2.0)
        b = scalar(5.0)
        c = a * b
        self.assertEqual(c.backward(a).item(), 5.0)
        self.assertEqual(c.backward(b).item(), 2.0)

    def test_square_derivative(self):
        a = scalar(3.0)
        self.assertEqual((a * a).backward(a).item(), 6.0)

    def test_self_is_ones(self):
        t = Tensor.from_nested([[1.0, 2.0], [3.0, 4.0]])
        g = t.backward(t)
        self.assertEqual(g.shape, (2, 2))
        self.assertEqual(g.data, [[1, 1], [1, 1]])
        self.assertIs(g.kind, t.kind)

    def test_unrelated_variable_is_zeros(self):
        x = Tensor.from_nested([1.0, 2.0, 3.0])
        t = x * x
        u = Tensor.from_nested([1.0, 2.0, 3.0])
        g = t.backward(u)
        self.assertEqual(g.shape, t.shape)
        self.assertEqual(g.data, [0, 0, 0])

    def test_target_matched_by_identity_not_value(self):
        a = scalar(2.0)
        twin = scalar(2.0)
        self.assertEqual((a * 3).backward(twin).item(), 0.0)

    def test_target_may_be_derived_tensor(self):
        x = scalar(2.0)
        y = x * x
        z = y * 3
        self.assertEqual(z.backward(y).item(), 3.0)

    def test_non_tensor_target_raises(self):
        with self.assertRaises(TypeError):
            scalar(1.0).backward(1.0)

    def test_result_is_a_derived_tensor(self):
        a = scalar(2.0)
        g = (a * a).backward(a)
        self.assertFalse(g.is_leaf)


class TestBackwardRules(unittest.TestCase):
    def test_add_and_sub(self):
        a, b = scalar(2.0), scalar(5.0)
        self.assertEqual((a + b).backward(a).item(), 1.0)
        self.assertEqual((a - b).backward(b).item(), -1.0)

    def test_scalar_constants(self):
        a = scalar(4.0)
        self.assertEqual((a * 3).backward(a).item(), 3.0)
        self.assertEqual((a / 2).backward(a).item(), 0.5)
        self.assertEqual((1 - a).backward(a).item(), -1.0)

    def test_quotient_rule(self):
        a, b = scalar(3.0), scalar(2.0)
        c = a / b
        self.assertAlmostEqual(c.backward(a).item(), 0.5)
        self.assertAlmostEqual(c.backward(b).item(), -3.0 / 4.0)

    def test_exp_rule(self):
        a = scalar(1.5)
        self.assertAlmostEqual(a.exp().backward(a).item(), np.exp(1.5))

    def test_ln_rule(self):
        a = scalar(4.0)
        self.assertAlmostEqual(a.ln().backward(a).item(), 0.25)

    def test_chain_through_exp(self):
        # d/dx exp(2x) = 2 exp(2x)
        x = scalar(0.3)
        y = (x * 2).exp()
        self.assertAlmostEqual(y.backward(x).item(), 2 * np.exp(0.6))


class TestBackwardAgainstFiniteDifferences(unittest.TestCase):
    def test_composite_elementwise_function(self):
        def fn(x):
            return x.exp().mul(x.ln()).div(x.add(1.0)).sub(x.mul(x))

        x_np = np.array([0.5, 1.0, 2.0, 3.5], dtype=np.float64)
        x = Tensor.from_numpy(x_np)
        analytic = fn(x).backward(x).to_numpy()
        numeric = finite_difference(fn, x_np)
        np.testing.assert_allclose(analytic, numeric, rtol=1e-5, atol=1e-6)

    def test_square_matches_finite_difference(self):
        x_np = np.array([3.0])
        x = Tensor.from_numpy(x_np)
        numeric = finite_difference(lambda t: t * t, x_np)
        np.testing.assert_allclose((x * x).backward(x).to_numpy(), numeric, rtol=1e-6)


class TestBackwardGraphShapes(unittest.TestCase):
    def test_diamond_graph_sums_both_paths(self):
        a = Tensor.from_nested([1.0, 2.0], "float64")
        b = Tensor.from_nested([3.0, 4.0], "float64")
        y = a * b
        z = y + y
        self.assertEqual(z.backward(a).data, [6.0, 8.0])
        self.assertEqual(z.backward(y).data, [2.0, 2.0])

    def test_broadcast_operand_gradient_has_output_shape(self):
        a = Tensor.from_nested([1.0, 2.0, 3.0], "float64")
        b = Tensor.from_numpy(np.arange(6, dtype=np.float64).reshape(2, 3))
        c = a * b
        g = c.backward(a)
        self.assertEqual(g.shape, (2, 3))
        np.testing.assert_array_equal(g.to_numpy(), b.to_numpy())

    def test_leaf_gradients_against_scalar_target(self):
        s = scalar(2.0)
        v = Tensor.from_nested([1.0, 2.0, 3.0], "float64")
        out = v * s
        self.assertEqual(out.backward(s).data, [1.0, 2.0, 3.0])


class TestHigherOrder(unittest.TestCase):
    def test_second_derivative_of_square(self):
        x = scalar(3.0)
        first = (x * x).backward(x)
        self.assertEqual(first.item(), 6.0)
        self.assertEqual(first.backward(x).item(), 2.0)

    def test_second_derivative_of_cube(self):
        x = scalar(2.0)
        y = x * x * x
        self.assertEqual(y.backward(x).item(), 12.0)
        self.assertEqual(y.backward(x).backward(x).item(), 12.0)

    def test_exp_is_its_own_derivative(self):
        x = scalar(0.7)
        y = x.exp()
        d2 = y.backward(x).backward(x)
        self.assertAlmostEqual(d2.item(), np.exp(0.7))


class TestContext(unittest.TestCase):
    def test_parents_are_stored_as_tuple(self):
        a = scalar(1.0)
        b = scalar(2.0)
        ctx = Context(parents=[a, b], rule=GradRule.ADD)
        self.assertEqual(ctx.parents, (a, b))

    def test_arity_is_enforced(self):
        a = scalar(1.0)
        with self.assertRaises(ValueError):
            Context(parents=(a,), rule=GradRule.MUL)
        with self.assertRaises(ValueError):
            Context(parents=(a, a), rule=GradRule.EXP)

    def test_tensor_exposes_context(self):
        a = scalar(1.0)
        out = a.exp()
        self.assertIsNone(a._get_ctx())
        self.assertIs(out._get_ctx().rule, GradRule.EXP)


if __name__ == "__main__":
    unittest.main()
