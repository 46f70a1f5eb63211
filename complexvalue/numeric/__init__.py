"""
Complex value type and float64 equality primitives: package re-exports

Public API:
  Complex, make, ZERO, ONE, I, NaN, INF, FloatEquality, conversion functions
"""

from .complex import Complex, make, ZERO, ONE, I, NaN, INF
from .ulp import FloatEquality
from .conversions import (
	to_int, to_long, to_float32, to_float64,
	to_builtin, to_numpy, from_builtin,
)

__all__ = [
	"Complex", "make", "ZERO", "ONE", "I", "NaN", "INF",
	"FloatEquality",
	"to_int", "to_long", "to_float32", "to_float64",
	"to_builtin", "to_numpy", "from_builtin",
]
