"""
Numeric constants and probe configuration for complexvalue.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class NumericConfig:
	"""
	Fixed constants used by the Complex value type.

	hyperbolic_cutoff : |component| beyond which tan/tanh return (0, ±1) / (±1, 0)
	nan_hash          : hash shared by every NaN value
	hash_real_weight  : outer multiplier of the component hash combination
	hash_imag_weight  : multiplier applied to the imaginary hash
	default_max_ulps  : ULP budget of the two-argument static equality
	"""
	hyperbolic_cutoff: float = 20.0
	nan_hash: int = 7
	hash_real_weight: int = 37
	hash_imag_weight: int = 17
	default_max_ulps: int = 1


NUMERIC = NumericConfig()


@dataclass(frozen=True)
class ProbeConfig:
	"""
	Sampling schedule and tolerances for the identity probe.
	"""
	n: int = 256
	seed: int = 1729
	magnitude_lo: float = 1e-3
	magnitude_hi: float = 1e3
	rel_tol: float = 1e-12
	root_orders: Tuple[int, ...] = (2, 3, 5)


@dataclass
class LogEvent:
	"""
	Structured event for probe logging.
	"""
	kind: str
	payload: Dict[str, object] = field(default_factory=dict)
	t: int = 0
