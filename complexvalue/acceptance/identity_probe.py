"""
Identity probe for the Complex value type.

Samples a deterministic set of finite, well-scaled complex values and checks
the algebraic identities the operation set must honour:

  • a + b == b + a and a · b == b · a           (exact value equality)
  • (a / b) · b ≈ a                             (Smith division round trip)
  • sqrt(z · z) ≈ z or -z                       (principal-branch ambiguity)
  • |root| ≈ |z|^(1/k) and root^k ≈ z           (every k-th root)

Approximate checks use the error relative to the modulus of the expected
value, so a small component next to a large one does not dominate. Every
failure is recorded as a LogEvent with a logical-time counter.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Tuple
import math
import numpy as np

from complexvalue.config import LogEvent, ProbeConfig
from complexvalue.numeric.complex import Complex


@dataclass(frozen=True)
class ProbeResult:
	"""
	Outcome of one probe run.

	ok             : True when no identity check failed
	checks         : number of identity checks evaluated
	failures       : number of failed checks
	max_rel_error  : largest modulus-relative error among approximate checks
	events         : structured event log (probe_start, identity_fail, probe_end)
	"""
	ok: bool
	checks: int
	failures: int
	max_rel_error: float
	events: Tuple[LogEvent, ...] = field(default_factory=tuple)

	def summary(self) -> Dict[str, object]:
		return {
			"ok": self.ok,
			"checks": self.checks,
			"failures": self.failures,
			"max_rel_error": self.max_rel_error,
		}


class IdentityProbe:
	"""Seeded identity checks over log-uniform complex samples."""

	def __init__(self, config: ProbeConfig | None = None) -> None:
		if config is None:
			config = ProbeConfig()
		self.config = config
		self._events: List[LogEvent] = []
		self._checks = 0
		self._failures = 0
		self._max_rel = 0.0

	def sample(self, n: int) -> List[Complex]:
		"""
		Draw n values with log-uniform modulus in [magnitude_lo, magnitude_hi]
		and uniform angle in [-π, π).
		"""
		cfg = self.config
		rng = np.random.default_rng(int(cfg.seed))
		mag = np.exp(rng.uniform(np.log(cfg.magnitude_lo), np.log(cfg.magnitude_hi), size=int(n)))
		ang = rng.uniform(-math.pi, math.pi, size=int(n))
		out: List[Complex] = []
		for i in range(int(n)):
			out.append(Complex.from_polar(float(mag[i]), float(ang[i])))
		return out

	@staticmethod
	def rel_error(actual: Complex, expected: Complex) -> float:
		"""|actual - expected| / |expected|, or the absolute error when expected is zero."""
		diff = actual.subtract(expected).abs()
		scale = expected.abs()
		if scale == 0.0:
			return diff
		return diff / scale

	def _emit(self, kind: str, payload: Dict[str, object]) -> None:
		self._events.append(LogEvent(kind=kind, payload=payload, t=len(self._events)))

	def _exact(self, name: str, actual: Complex, expected: Complex) -> None:
		self._checks += 1
		if not actual.equals(expected):
			self._failures += 1
			self._emit("identity_fail", {"check": name, "actual": str(actual), "expected": str(expected)})

	def _approx(self, name: str, actual: Complex, *expected: Complex) -> None:
		self._checks += 1
		err = min(self.rel_error(actual, e) for e in expected)
		if err > self._max_rel:
			self._max_rel = err
		if not (err <= self.config.rel_tol):
			self._failures += 1
			self._emit("identity_fail", {
				"check": name,
				"actual": str(actual),
				"expected": str(expected[0]),
				"rel_error": err,
			})

	def _check_pair(self, a: Complex, b: Complex) -> None:
		self._exact("add_commutes", a.add(b), b.add(a))
		self._exact("multiply_commutes", a.multiply(b), b.multiply(a))
		self._approx("divide_inverse", a.divide(b).multiply(b), a)
		self._approx("sqrt_of_square", a.multiply(a).sqrt(), a, a.negate())

	def _check_roots(self, z: Complex, k: int) -> None:
		roots = z.nth_root(k)
		self._checks += 1
		if len(roots) != k:
			self._failures += 1
			self._emit("identity_fail", {"check": "root_count", "order": k, "count": len(roots)})
			return
		expected_mag = float(np.power(z.abs(), 1.0 / k))
		for root in roots:
			self._approx("root_modulus", Complex(root.abs()), Complex(expected_mag))
			self._approx("root_power", root.pow(float(k)), z)

	def probe(self) -> ProbeResult:
		"""
		Run every identity over 2·n samples paired as (a_i, b_i). The result is
		deterministic for a given seed.
		"""
		cfg = self.config
		self._events = []
		self._checks = 0
		self._failures = 0
		self._max_rel = 0.0

		n = int(cfg.n)
		if n <= 0:
			return ProbeResult(True, 0, 0, 0.0, ())

		self._emit("probe_start", {"n": n, "seed": int(cfg.seed), "rel_tol": float(cfg.rel_tol)})
		values = self.sample(2 * n)
		for i in range(n):
			a = values[2 * i]
			b = values[2 * i + 1]
			self._check_pair(a, b)
			for k in cfg.root_orders:
				self._check_roots(a, int(k))

		self._emit("probe_end", {
			"checks": self._checks,
			"failures": self._failures,
			"max_rel_error": self._max_rel,
		})
		return ProbeResult(
			ok=self._failures == 0,
			checks=self._checks,
			failures=self._failures,
			max_rel_error=self._max_rel,
			events=tuple(self._events),
		)
