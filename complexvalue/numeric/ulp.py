"""
Scalar float64 equality primitives (production)

All comparisons work on raw IEEE-754 bit patterns obtained through a NumPy
int64 view, so the distance between two doubles is the number of
representable values separating them:

  • equals_bitwise(x, y)          — identical values; NaN == NaN, +0.0 != -0.0
  • ulp_distance(x, y)            — signed-magnitude distance, measured through
                                    zero when the signs differ
  • equals_ulps(x, y, max_ulps)   — distance <= max_ulps and neither is NaN
  • equals_eps(x, y, eps)         — adjacent (1 ULP) or |x - y| <= eps
  • equals_relative(x, y, eps)    — adjacent or |x - y| / max(|x|, |y|) <= eps

Public API:
  • class FloatEquality: static methods implementing all comparisons
  • top-level proxies with the same names for ergonomic imports
"""

from __future__ import annotations
import math
import numpy as np


class FloatEquality:
	"""ULP-aware equality checks on float64 scalars."""

	SGN_MASK: int = 0x8000000000000000
	POSITIVE_ZERO_BITS: int = int(np.float64(0.0).view(np.int64))
	NEGATIVE_ZERO_BITS: int = int(np.float64(-0.0).view(np.int64))

	@staticmethod
	def raw_bits(x: float) -> int:
		"""Return the raw bit pattern of x as a signed 64-bit integer."""
		return int(np.float64(x).view(np.int64))

	@staticmethod
	def equals_bitwise(x: float, y: float) -> bool:
		"""
		Value identity: every NaN equals every NaN, signed zeros differ.
		"""
		if math.isnan(x) or math.isnan(y):
			return math.isnan(x) and math.isnan(y)
		return FloatEquality.raw_bits(x) == FloatEquality.raw_bits(y)

	@staticmethod
	def ulp_distance(x: float, y: float) -> int:
		"""
		Return the number of representable doubles between x and y.

		Same-sign values subtract their bit patterns directly. Opposite-sign
		values add the distance of each side to its own signed zero, so
		+0.0 and -0.0 are 0 apart and 0.0 and the smallest negative subnormal
		are 1 apart.
		"""
		x_int = FloatEquality.raw_bits(x)
		y_int = FloatEquality.raw_bits(y)
		if ((x_int ^ y_int) & FloatEquality.SGN_MASK) == 0:
			return abs(x_int - y_int)
		if x_int < y_int:
			delta_plus = y_int - FloatEquality.POSITIVE_ZERO_BITS
			delta_minus = x_int - FloatEquality.NEGATIVE_ZERO_BITS
		else:
			delta_plus = x_int - FloatEquality.POSITIVE_ZERO_BITS
			delta_minus = y_int - FloatEquality.NEGATIVE_ZERO_BITS
		return delta_plus + delta_minus

	@staticmethod
	def equals_ulps(x: float, y: float, max_ulps: int = 1) -> bool:
		"""
		Return True when at most (max_ulps - 1) doubles lie strictly between
		x and y. Always False when either value is NaN.
		"""
		if math.isnan(x) or math.isnan(y):
			return False
		return FloatEquality.ulp_distance(x, y) <= int(max_ulps)

	@staticmethod
	def equals_eps(x: float, y: float, eps: float) -> bool:
		"""Adjacent doubles, or absolute difference within eps."""
		return FloatEquality.equals_ulps(x, y, 1) or abs(y - x) <= eps

	@staticmethod
	def equals_relative(x: float, y: float, eps: float) -> bool:
		"""Adjacent doubles, or relative difference within eps."""
		if FloatEquality.equals_ulps(x, y, 1):
			return True
		absolute_max = max(abs(x), abs(y))
		with np.errstate(all="ignore"):
			relative_difference = abs(np.float64(x - y) / np.float64(absolute_max))
		return bool(relative_difference <= eps)



def raw_bits(x): return FloatEquality.raw_bits(x)
def equals_bitwise(x, y): return FloatEquality.equals_bitwise(x, y)
def ulp_distance(x, y): return FloatEquality.ulp_distance(x, y)

def equals_ulps(x, y, max_ulps: int = 1): return FloatEquality.equals_ulps(x, y, max_ulps)
def equals_eps(x, y, eps: float): return FloatEquality.equals_eps(x, y, eps)
def equals_relative(x, y, eps: float): return FloatEquality.equals_relative(x, y, eps)
