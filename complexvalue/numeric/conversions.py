"""
Numeric conversions for Complex values.

The narrowing conversions collapse a value to its modulus, not its real part:
to_int(Complex(3, 4)) == 5. Integer targets truncate toward zero and saturate
the way a fixed-width cast does (NaN → 0, too large → the type's maximum).

Interop helpers move values to and from Python's built-in complex and
numpy.complex128 without going through the modulus.
"""

from __future__ import annotations
import numpy as np

from complexvalue.numeric.complex import Complex, INT32_MAX, INT64_MAX, make, narrow


def to_int(z: Complex) -> int:
	"""Modulus truncated to a signed 32-bit range."""
	return narrow(z.abs(), INT32_MAX)


def to_long(z: Complex) -> int:
	"""Modulus truncated to a signed 64-bit range."""
	return narrow(z.abs(), INT64_MAX)


def to_float32(z: Complex) -> np.float32:
	"""Modulus rounded to single precision."""
	with np.errstate(all="ignore"):
		return np.float32(z.abs())


def to_float64(z: Complex) -> float:
	"""Modulus as a double."""
	return z.abs()


def to_builtin(z: Complex) -> complex:
	return complex(z.real, z.imaginary)


def to_numpy(z: Complex) -> np.complex128:
	return np.complex128(complex(z.real, z.imaginary))


def from_builtin(c) -> Complex:
	"""
	Build a Complex from a built-in or NumPy complex (or any real number),
	keeping both components verbatim.
	"""
	c = complex(c)
	return make(c.real, c.imag)
