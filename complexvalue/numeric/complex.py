"""
Complex value type (production)

Class Complex models an immutable float64 pair real + imaginary·i with a full
arithmetic and transcendental operation set under IEEE-754 edge semantics:

  • Any NaN-bearing operand short-circuits to the shared NaN constant.
  • Multiplying by an infinite operand collapses to INF; dividing a finite
    value by an infinite one collapses to ZERO.
  • Division and reciprocal use Smith's prescaled algorithm, never the naive
    (ac + bd) / (c² + d²) form.
  • Overflow, division by zero and domain errors come back as inf/nan
    components; only precondition violations raise (see complexvalue.errors).

Equality is value equality: all NaN values form one class, otherwise the two
components are compared bit for bit, so +0.0 and -0.0 differ. The static
helpers equals_ulps / equals_eps / equals_with_relative_tolerance compare with
a ULP budget or a tolerance.

Public API:
  • class Complex and the constants ZERO, ONE, I, NaN, INF
  • make(real, imaginary): the factory every operation builds results with
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import List, Union
import math
import numpy as np

from complexvalue.config import NUMERIC
from complexvalue.errors import InvalidArgumentError, NullArgumentError
from complexvalue.numeric.ulp import FloatEquality


Operand = Union["Complex", float, int]
INT32_MAX = 2**31 - 1
INT64_MAX = 2**63 - 1


@dataclass(frozen=True, eq=False)
class Complex:
	"""Immutable complex number real + imaginary·i over float64."""
	real: float
	imaginary: float = 0.0

	def __post_init__(self) -> None:
		if isinstance(self.real, Complex) or isinstance(self.imaginary, Complex):
			raise TypeError("Complex components must be real numbers, not Complex")
		object.__setattr__(self, "real", float(self.real))
		object.__setattr__(self, "imaginary", float(self.imaginary))

	# ---------- factories ----------
	@staticmethod
	def value_of(real: float, imaginary: float = 0.0) -> "Complex":
		"""Like the constructor, but NaN input returns the shared NaN constant."""
		if math.isnan(real) or math.isnan(imaginary):
			return NaN
		return Complex(real, imaginary)

	@staticmethod
	def from_polar(r: float, theta: float) -> "Complex":
		"""
		Return r·(cos θ + i sin θ). NaN or infinite θ is not pre-checked and
		propagates through the trig functions as NaN.
		"""
		if r < 0:
			raise InvalidArgumentError(f"Complex modulus must be non-negative, got {r}")
		with np.errstate(all="ignore"):
			return Complex(r * np.cos(theta), r * np.sin(theta))

	# ---------- state ----------
	@property
	def is_nan(self) -> bool:
		return math.isnan(self.real) or math.isnan(self.imaginary)

	@property
	def is_infinite(self) -> bool:
		return not self.is_nan and (math.isinf(self.real) or math.isinf(self.imaginary))

	def get_real(self) -> float:
		return self.real

	def get_imaginary(self) -> float:
		return self.imaginary

	def _has_infinite_part(self) -> bool:
		return math.isinf(self.real) or math.isinf(self.imaginary)

	# ---------- arithmetic ----------
	def add(self, addend: Operand) -> "Complex":
		if _as_scalar(addend):
			addend = _to_float(addend)
			if self.is_nan or math.isnan(addend):
				return NaN
			return make(self.real + addend, self.imaginary)
		if self.is_nan or addend.is_nan:
			return NaN
		return make(self.real + addend.real, self.imaginary + addend.imaginary)

	def subtract(self, subtrahend: Operand) -> "Complex":
		if _as_scalar(subtrahend):
			subtrahend = _to_float(subtrahend)
			if self.is_nan or math.isnan(subtrahend):
				return NaN
			return make(self.real - subtrahend, self.imaginary)
		if self.is_nan or subtrahend.is_nan:
			return NaN
		return make(self.real - subtrahend.real, self.imaginary - subtrahend.imaginary)

	def negate(self) -> "Complex":
		if self.is_nan:
			return NaN
		return make(-self.real, -self.imaginary)

	def conjugate(self) -> "Complex":
		if self.is_nan:
			return NaN
		return make(self.real, -self.imaginary)

	def multiply(self, factor: Operand) -> "Complex":
		"""
		Product with a Complex or a real factor. Any infinite component on
		either side yields INF rather than a per-component infinity pattern.
		"""
		if _as_scalar(factor):
			factor = _to_float(factor)
			if self.is_nan or math.isnan(factor):
				return NaN
			if self._has_infinite_part() or math.isinf(factor):
				return INF
			return make(self.real * factor, self.imaginary * factor)
		if self.is_nan or factor.is_nan:
			return NaN
		if self._has_infinite_part() or factor._has_infinite_part():
			return INF
		a, b = self.real, self.imaginary
		c, d = factor.real, factor.imaginary
		return make(a * c - b * d, a * d + b * c)

	def divide(self, divisor: Operand) -> "Complex":
		"""
		Quotient by a Complex or a real divisor.

		A zero divisor gives NaN and a finite value over an infinite divisor
		gives ZERO. Otherwise the divisor is prescaled by its larger
		component (Smith's algorithm) to keep intermediates in range.
		"""
		if _as_scalar(divisor):
			divisor = _to_float(divisor)
			if self.is_nan or math.isnan(divisor):
				return NaN
			if divisor == 0:
				return NaN
			if math.isinf(divisor):
				return ZERO if not self.is_infinite else NaN
			with np.errstate(all="ignore"):
				x = np.float64(divisor)
				return make(self.real / x, self.imaginary / x)
		if self.is_nan or divisor.is_nan:
			return NaN
		c = np.float64(divisor.real)
		d = np.float64(divisor.imaginary)
		if c == 0.0 and d == 0.0:
			return NaN
		if divisor.is_infinite and not self.is_infinite:
			return ZERO
		a = np.float64(self.real)
		b = np.float64(self.imaginary)
		with np.errstate(all="ignore"):
			if abs(c) < abs(d):
				q = c / d
				denominator = c * q + d
				return make((a * q + b) / denominator, (b * q - a) / denominator)
			q = d / c
			denominator = d * q + c
			return make((b * q + a) / denominator, (b - a * q) / denominator)

	def reciprocal(self) -> "Complex":
		if self.is_nan:
			return NaN
		if self.real == 0.0 and self.imaginary == 0.0:
			return INF
		if self.is_infinite:
			return ZERO
		a = np.float64(self.real)
		b = np.float64(self.imaginary)
		with np.errstate(all="ignore"):
			if abs(a) < abs(b):
				q = a / b
				scale = 1.0 / (a * q + b)
				return make(scale * q, -scale)
			q = b / a
			scale = 1.0 / (b * q + a)
			return make(scale, -scale * q)

	# ---------- modulus / argument ----------
	def abs(self) -> float:
		"""
		Modulus via a scaled hypotenuse, |b|·sqrt(1 + (a/b)²) with the larger
		component outside the root, so large finite values do not overflow.
		"""
		if self.is_nan:
			return math.nan
		if self.is_infinite:
			return math.inf
		a, b = self.real, self.imaginary
		if abs(a) < abs(b):
			if a == 0.0:
				return abs(b)
			q = a / b
			return abs(b) * math.sqrt(1 + q * q)
		if b == 0.0:
			return abs(a)
		q = b / a
		return abs(a) * math.sqrt(1 + q * q)

	def get_argument(self) -> float:
		"""Angle atan2(imaginary, real) in (-π, π]."""
		return math.atan2(self.imaginary, self.real)

	# ---------- exponential family ----------
	def exp(self) -> "Complex":
		if self.is_nan:
			return NaN
		with np.errstate(all="ignore"):
			exp_real = np.exp(self.real)
			return make(exp_real * np.cos(self.imaginary), exp_real * np.sin(self.imaginary))

	def log(self) -> "Complex":
		if self.is_nan:
			return NaN
		with np.errstate(all="ignore"):
			return make(np.log(self.abs()), math.atan2(self.imaginary, self.real))

	def pow(self, x: Operand) -> "Complex":
		"""Principal power exp(x · log(self)) for a Complex or real exponent."""
		_require(x)
		return self.log().multiply(x).exp()

	def sqrt(self) -> "Complex":
		"""
		Principal square root. The branch on the sign of the real part keeps
		the subtraction out of the formula, so no cancellation occurs.
		"""
		if self.is_nan:
			return NaN
		if self.real == 0.0 and self.imaginary == 0.0:
			return make(0.0, 0.0)
		a = np.float64(self.real)
		b = np.float64(self.imaginary)
		with np.errstate(all="ignore"):
			t = np.sqrt((abs(a) + self.abs()) / 2.0)
			if a >= 0.0:
				return make(t, b / (2.0 * t))
			return make(abs(b) / (2.0 * t), np.copysign(1.0, b) * t)

	def sqrt1z(self) -> "Complex":
		"""sqrt(1 - self²)."""
		return make(1.0, 0.0).subtract(self.multiply(self)).sqrt()

	# ---------- circular / hyperbolic ----------
	def sin(self) -> "Complex":
		if self.is_nan:
			return NaN
		a, b = self.real, self.imaginary
		with np.errstate(all="ignore"):
			return make(np.sin(a) * np.cosh(b), np.cos(a) * np.sinh(b))

	def cos(self) -> "Complex":
		if self.is_nan:
			return NaN
		a, b = self.real, self.imaginary
		with np.errstate(all="ignore"):
			return make(np.cos(a) * np.cosh(b), -np.sin(a) * np.sinh(b))

	def sinh(self) -> "Complex":
		if self.is_nan:
			return NaN
		a, b = self.real, self.imaginary
		with np.errstate(all="ignore"):
			return make(np.sinh(a) * np.cos(b), np.cosh(a) * np.sin(b))

	def cosh(self) -> "Complex":
		if self.is_nan:
			return NaN
		a, b = self.real, self.imaginary
		with np.errstate(all="ignore"):
			return make(np.cosh(a) * np.cos(b), np.sinh(a) * np.sin(b))

	def tan(self) -> "Complex":
		"""
		Double-angle form sin 2a / d + i sinh 2b / d with d = cos 2a + cosh 2b.
		Past the cutoff the hyperbolic terms dominate and the result is ±i.
		"""
		if self.is_nan or math.isinf(self.real):
			return NaN
		if self.imaginary > NUMERIC.hyperbolic_cutoff:
			return make(0.0, 1.0)
		if self.imaginary < -NUMERIC.hyperbolic_cutoff:
			return make(0.0, -1.0)
		real2 = 2.0 * self.real
		imaginary2 = 2.0 * self.imaginary
		with np.errstate(all="ignore"):
			d = np.cos(real2) + np.cosh(imaginary2)
			return make(np.sin(real2) / d, np.sinh(imaginary2) / d)

	def tanh(self) -> "Complex":
		"""
		Double-angle form sinh 2a / d + i sin 2b / d with d = cosh 2a + cos 2b.
		"""
		if self.is_nan or math.isinf(self.imaginary):
			return NaN
		if self.real > NUMERIC.hyperbolic_cutoff:
			return make(1.0, 0.0)
		if self.real < -NUMERIC.hyperbolic_cutoff:
			return make(-1.0, 0.0)
		real2 = 2.0 * self.real
		imaginary2 = 2.0 * self.imaginary
		with np.errstate(all="ignore"):
			d = np.cosh(real2) + np.cos(imaginary2)
			return make(np.sinh(real2) / d, np.sin(imaginary2) / d)

	# ---------- inverse circular ----------
	def asin(self) -> "Complex":
		"""-i · log(sqrt(1 - z²) + i·z)"""
		if self.is_nan:
			return NaN
		return self.sqrt1z().add(self.multiply(I)).log().multiply(I.negate())

	def acos(self) -> "Complex":
		"""-i · log(z + i·sqrt(1 - z²))"""
		if self.is_nan:
			return NaN
		return self.add(self.sqrt1z().multiply(I)).log().multiply(I.negate())

	def atan(self) -> "Complex":
		"""(i/2) · log((i + z) / (i - z))"""
		if self.is_nan:
			return NaN
		return self.add(I).divide(I.subtract(self)).log().multiply(I.divide(make(2.0, 0.0)))

	# ---------- roots ----------
	def nth_root(self, n: int) -> List["Complex"]:
		"""
		Return the n roots of self in order k = 0..n-1, the k-th at angle
		arg/n + 2πk/n. NaN gives [NaN] and an infinite value gives [INF].
		"""
		if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
			raise InvalidArgumentError(f"Root order must be an integer, got {n!r}")
		if n <= 0:
			raise InvalidArgumentError(f"Cannot compute nth root for non-positive n: {n}")
		n = int(n)
		result: List[Complex] = []
		if self.is_nan:
			result.append(NaN)
			return result
		if self.is_infinite:
			result.append(INF)
			return result

		nth_root_of_abs = float(np.power(self.abs(), 1.0 / n))
		nth_phi = self.get_argument() / n
		slice_ = 2 * math.pi / n
		inner = nth_phi
		for _ in range(n):
			result.append(make(nth_root_of_abs * math.cos(inner), nth_root_of_abs * math.sin(inner)))
			inner += slice_
		return result

	# ---------- equality ----------
	def equals(self, other: object) -> bool:
		"""
		Value equality: any NaN equals any NaN; otherwise both components
		must be bitwise identical (+0.0 and -0.0 differ).
		"""
		if self is other:
			return True
		if not isinstance(other, Complex):
			return False
		if other.is_nan:
			return self.is_nan
		return (
			FloatEquality.equals_bitwise(self.real, other.real)
			and FloatEquality.equals_bitwise(self.imaginary, other.imaginary)
		)

	@staticmethod
	def equals_ulps(x: "Complex", y: "Complex", max_ulps: int = NUMERIC.default_max_ulps) -> bool:
		"""
		Both components within max_ulps representable doubles of each other.
		False when either value is NaN.
		"""
		_require(x)
		_require(y)
		return (
			FloatEquality.equals_ulps(x.real, y.real, max_ulps)
			and FloatEquality.equals_ulps(x.imaginary, y.imaginary, max_ulps)
		)

	@staticmethod
	def equals_eps(x: "Complex", y: "Complex", eps: float) -> bool:
		"""Per component: adjacent doubles or |x - y| <= eps."""
		_require(x)
		_require(y)
		return (
			FloatEquality.equals_eps(x.real, y.real, eps)
			and FloatEquality.equals_eps(x.imaginary, y.imaginary, eps)
		)

	@staticmethod
	def equals_with_relative_tolerance(x: "Complex", y: "Complex", eps: float) -> bool:
		"""Per component: adjacent doubles or |x - y| / max(|x|, |y|) <= eps."""
		_require(x)
		_require(y)
		return (
			FloatEquality.equals_relative(x.real, y.real, eps)
			and FloatEquality.equals_relative(x.imaginary, y.imaginary, eps)
		)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Complex):
			return NotImplemented
		return self.equals(other)

	def __ne__(self, other: object) -> bool:
		if not isinstance(other, Complex):
			return NotImplemented
		return not self.equals(other)

	def __hash__(self) -> int:
		if self.is_nan:
			return NUMERIC.nan_hash
		return NUMERIC.hash_real_weight * (NUMERIC.hash_imag_weight * hash(self.imaginary) + hash(self.real))

	# ---------- dunder sugar ----------
	def __add__(self, other):
		if not isinstance(other, (Complex, Real)):
			return NotImplemented
		return self.add(other)

	def __radd__(self, other):
		if not isinstance(other, Real):
			return NotImplemented
		return self.add(other)

	def __sub__(self, other):
		if not isinstance(other, (Complex, Real)):
			return NotImplemented
		return self.subtract(other)

	def __rsub__(self, other):
		if not isinstance(other, Real):
			return NotImplemented
		return make(other, 0.0).subtract(self)

	def __mul__(self, other):
		if not isinstance(other, (Complex, Real)):
			return NotImplemented
		return self.multiply(other)

	def __rmul__(self, other):
		if not isinstance(other, Real):
			return NotImplemented
		return self.multiply(other)

	def __truediv__(self, other):
		if not isinstance(other, (Complex, Real)):
			return NotImplemented
		return self.divide(other)

	def __rtruediv__(self, other):
		if not isinstance(other, Real):
			return NotImplemented
		return make(other, 0.0).divide(self)

	def __pow__(self, other):
		if not isinstance(other, (Complex, Real)):
			return NotImplemented
		return self.pow(other)

	def __rpow__(self, other):
		if not isinstance(other, Real):
			return NotImplemented
		return make(other, 0.0).pow(self)

	def __neg__(self):
		return self.negate()

	def __abs__(self):
		return self.abs()

	def __float__(self):
		return self.abs()

	def __int__(self):
		return narrow(self.abs(), INT32_MAX)

	def __complex__(self):
		return complex(self.real, self.imaginary)

	def __reduce__(self):
		return (Complex, (self.real, self.imaginary))

	def __str__(self):
		return f"({self.real!r}, {self.imaginary!r})"


def make(real: float, imaginary: float) -> Complex:
	"""Build an operation result. Callers needing a specialized variant wrap this."""
	return Complex(real, imaginary)


def _require(value) -> None:
	"""Raise NullArgumentError when a required Complex argument is missing."""
	if value is None:
		raise NullArgumentError("Complex argument must not be None")


def _as_scalar(value) -> bool:
	"""
	Classify a binary-operation argument: True for a real scalar, False for a
	Complex. None raises NullArgumentError, anything else TypeError.
	"""
	_require(value)
	if isinstance(value, Complex):
		return False
	if isinstance(value, Real):
		return True
	raise TypeError(f"Unsupported operand type: {type(value).__name__}")


def _to_float(value) -> float:
	"""Convert a real scalar argument to float64; out-of-range integers are rejected."""
	try:
		return float(value)
	except OverflowError:
		raise InvalidArgumentError(f"Real argument is out of float64 range: {value}") from None


def narrow(value: float, limit: int) -> int:
	"""Truncate a non-negative float to an int saturating at limit (NaN → 0)."""
	if math.isnan(value):
		return 0
	if value >= limit:
		return limit
	return int(value)


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
I = Complex(0.0, 1.0)
NaN = Complex(math.nan, math.nan)
INF = Complex(math.inf, math.inf)

Complex.ZERO = ZERO
Complex.ONE = ONE
Complex.I = I
Complex.NaN = NaN
Complex.INF = INF
