"""
Top-level re-exports for the complexvalue package.

The value type lives in complexvalue/numeric/*, the error taxonomy in
complexvalue/errors.py and the identity probe in complexvalue/acceptance/*.
"""

from .numeric.complex import Complex, make, ZERO, ONE, I, NaN, INF
from .numeric.ulp import FloatEquality
from .numeric.conversions import (
	to_int, to_long, to_float32, to_float64,
	to_builtin, to_numpy, from_builtin,
)
from .errors import ComplexValueError, NullArgumentError, InvalidArgumentError
from .config import NumericConfig, ProbeConfig, LogEvent, NUMERIC
from .acceptance import IdentityProbe, ProbeResult, ProbeReportWriter

value_of = Complex.value_of
from_polar = Complex.from_polar

__all__ = [
	"Complex", "make", "value_of", "from_polar",
	"ZERO", "ONE", "I", "NaN", "INF",
	"FloatEquality",
	"to_int", "to_long", "to_float32", "to_float64",
	"to_builtin", "to_numpy", "from_builtin",
	"ComplexValueError", "NullArgumentError", "InvalidArgumentError",
	"NumericConfig", "ProbeConfig", "LogEvent", "NUMERIC",
	"IdentityProbe", "ProbeResult", "ProbeReportWriter",
]
