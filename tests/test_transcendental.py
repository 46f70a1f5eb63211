import cmath
import math
import unittest

from complexvalue import Complex, ZERO, ONE, I, NaN, INF


def close(z: Complex, expected: complex, tol: float = 1e-14) -> bool:
	return Complex.equals_with_relative_tolerance(z, Complex(expected.real, expected.imag), tol)


class TestAbsArgument(unittest.TestCase):
	def test_abs(self):
		self.assertEqual(Complex(3, 4).abs(), 5.0)
		self.assertEqual(Complex(4, -3).abs(), 5.0)
		self.assertEqual(Complex(0, -3).abs(), 3.0)
		self.assertEqual(Complex(-2, 0).abs(), 2.0)
		self.assertEqual(ZERO.abs(), 0.0)

	def test_abs_does_not_overflow(self):
		r = Complex(1e300, 1e300).abs()
		self.assertFalse(math.isinf(r))
		self.assertAlmostEqual(r / 1e300, math.sqrt(2.0), places=14)

	def test_abs_special_values(self):
		self.assertTrue(math.isnan(NaN.abs()))
		self.assertTrue(math.isnan(Complex(math.inf, math.nan).abs()))
		self.assertEqual(Complex(-math.inf, 1).abs(), math.inf)
		self.assertEqual(INF.abs(), math.inf)

	def test_get_argument(self):
		self.assertEqual(Complex(0, 1).get_argument(), math.pi / 2)
		self.assertEqual(Complex(-1, 0).get_argument(), math.pi)
		self.assertEqual(Complex(-1, -0.0).get_argument(), -math.pi)
		self.assertEqual(INF.get_argument(), math.pi / 4)
		self.assertTrue(math.isnan(Complex(math.nan, 1).get_argument()))


class TestSqrt(unittest.TestCase):
	def test_sqrt_branches(self):
		self.assertEqual(Complex(3, 4).sqrt(), Complex(2, 1))
		self.assertEqual(Complex(-3, 4).sqrt(), Complex(1, 2))
		self.assertEqual(Complex(-3, -4).sqrt(), Complex(1, -2))
		self.assertEqual(Complex(-4, 0).sqrt(), Complex(0, 2))
		self.assertEqual(Complex(-4, -0.0).sqrt(), Complex(0, -2))

	def test_sqrt_of_zero(self):
		self.assertEqual(ZERO.sqrt(), ZERO)
		self.assertEqual(Complex(-0.0, -0.0).sqrt(), ZERO)

	def test_sqrt_nan(self):
		self.assertIs(NaN.sqrt(), NaN)

	def test_sqrt1z(self):
		z = Complex(0.5, 0).sqrt1z()
		self.assertTrue(Complex.equals_eps(z, Complex(math.sqrt(0.75), 0), 1e-15))
		self.assertTrue(close(Complex(0.5, 0.3).sqrt1z(), cmath.sqrt(1 - (0.5 + 0.3j) ** 2)))


class TestExpLogPow(unittest.TestCase):
	def test_exp(self):
		self.assertEqual(ZERO.exp(), ONE)
		self.assertTrue(Complex.equals_eps(Complex(0, math.pi).exp(), Complex(-1, 0), 1e-15))
		self.assertTrue(close(Complex(0.5, 0.7).exp(), cmath.exp(0.5 + 0.7j)))

	def test_exp_overflow_is_a_value(self):
		self.assertEqual(Complex(1000, 0.5).exp(), INF)
		self.assertIs(NaN.exp(), NaN)

	def test_log(self):
		self.assertEqual(ONE.log(), ZERO)
		self.assertEqual(I.log(), Complex(0, math.pi / 2))
		self.assertEqual(Complex(-1, 0).log(), Complex(0, math.pi))
		self.assertTrue(close(Complex(3, -4).log(), cmath.log(3 - 4j)))

	def test_log_of_zero_is_a_value(self):
		z = ZERO.log()
		self.assertEqual(z.real, -math.inf)
		self.assertEqual(z.imaginary, 0.0)

	def test_pow_real(self):
		self.assertTrue(Complex.equals_eps(Complex(2, 0).pow(3), Complex(8, 0), 1e-13))
		self.assertTrue(Complex.equals_eps(Complex(-4, 0).pow(0.5), Complex(0, 2), 1e-14))

	def test_pow_complex(self):
		z = I.pow(I)
		self.assertTrue(Complex.equals_eps(z, Complex(math.exp(-math.pi / 2), 0), 1e-15))

	def test_pow_nan(self):
		self.assertTrue(NaN.pow(2).is_nan)
		self.assertTrue(ONE.pow(NaN).is_nan)
		self.assertTrue(ONE.pow(math.nan).is_nan)


class TestCircularHyperbolic(unittest.TestCase):
	Z = 0.5 + 0.7j

	def test_sin_cos(self):
		z = Complex(self.Z.real, self.Z.imag)
		self.assertTrue(close(z.sin(), cmath.sin(self.Z)))
		self.assertTrue(close(z.cos(), cmath.cos(self.Z)))

	def test_sinh_cosh(self):
		z = Complex(self.Z.real, self.Z.imag)
		self.assertTrue(close(z.sinh(), cmath.sinh(self.Z)))
		self.assertTrue(close(z.cosh(), cmath.cosh(self.Z)))

	def test_nan_short_circuits(self):
		for name in ("sin", "cos", "sinh", "cosh", "tan", "tanh", "asin", "acos", "atan", "exp", "log", "sqrt", "sqrt1z"):
			with self.subTest(op=name):
				self.assertTrue(getattr(Complex(math.nan, 1), name)().is_nan)

	def test_infinities_propagate_without_raising(self):
		z = Complex(1, 1000).sin()
		self.assertTrue(math.isinf(z.real) and math.isinf(z.imaginary))
		w = Complex(1000, 0).cosh()
		self.assertEqual(w.real, math.inf)


class TestTanTanh(unittest.TestCase):
	def test_tan(self):
		self.assertTrue(close(Complex(1, 1).tan(), cmath.tan(1 + 1j), 1e-13))

	def test_tan_cutoff_boundary(self):
		at = Complex(1, 20.0).tan()
		self.assertNotEqual(at.real, 0.0)
		self.assertGreater(at.real, 0.0)
		self.assertEqual(Complex(1, 20.0001).tan(), Complex(0.0, 1.0))
		self.assertEqual(Complex(1, -25).tan(), Complex(0.0, -1.0))
		self.assertEqual(Complex(1, math.inf).tan(), Complex(0.0, 1.0))

	def test_tan_infinite_real_is_nan(self):
		self.assertIs(Complex(math.inf, 0).tan(), NaN)

	def test_tanh(self):
		self.assertTrue(close(Complex(1, 1).tanh(), cmath.tanh(1 + 1j), 1e-13))

	def test_tanh_cutoff(self):
		at = Complex(20.0, 1).tanh()
		self.assertNotEqual(at.imaginary, 0.0)
		self.assertEqual(Complex(20.0001, 1).tanh(), Complex(1.0, 0.0))
		self.assertEqual(Complex(-25, 1).tanh(), Complex(-1.0, 0.0))
		self.assertEqual(Complex(math.inf, 0).tanh(), Complex(1.0, 0.0))

	def test_tanh_infinite_imaginary_is_nan(self):
		self.assertIs(Complex(0, math.inf).tanh(), NaN)


class TestInverseCircular(unittest.TestCase):
	Z = 0.5 + 0.3j

	def test_asin(self):
		z = Complex(self.Z.real, self.Z.imag)
		self.assertTrue(Complex.equals_eps(z.asin(), Complex(cmath.asin(self.Z).real, cmath.asin(self.Z).imag), 1e-12))

	def test_acos(self):
		z = Complex(self.Z.real, self.Z.imag)
		self.assertTrue(Complex.equals_eps(z.acos(), Complex(cmath.acos(self.Z).real, cmath.acos(self.Z).imag), 1e-12))

	def test_atan(self):
		z = Complex(self.Z.real, self.Z.imag)
		self.assertTrue(Complex.equals_eps(z.atan(), Complex(cmath.atan(self.Z).real, cmath.atan(self.Z).imag), 1e-12))

	def test_sin_of_asin(self):
		z = Complex(0.2, -0.4)
		self.assertTrue(Complex.equals_eps(z.asin().sin(), z, 1e-12))


if __name__ == "__main__":
	unittest.main()
