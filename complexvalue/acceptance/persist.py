"""Persistence helpers for identity-probe reports (class-based)."""

from __future__ import annotations
import hashlib
import json
import math
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Iterable

from complexvalue.config import LogEvent
from complexvalue.acceptance.identity_probe import ProbeResult


def _finite_or_text(o):
	"""Replace non-finite floats with their text form ('nan', 'inf', '-inf'), recursively."""
	if isinstance(o, float) and not math.isfinite(o):
		return repr(o)
	if isinstance(o, dict):
		return {k: _finite_or_text(v) for k, v in o.items()}
	if isinstance(o, (list, tuple)):
		return [_finite_or_text(v) for v in o]
	return o


class ProbeReportWriter:
	"""Writes canonical JSON reports and JSONL event streams for probe runs."""

	def __init__(self) -> None:
		"""Initialize stateless writer."""

	@staticmethod
	def canonical_json(o: Dict[str, object]) -> str:
		"""
		Return a canonical JSON string with sorted keys and fixed separators.
		Non-finite floats are written as strings so the output stays valid JSON.
		"""
		return json.dumps(_finite_or_text(o), sort_keys=True, ensure_ascii=False, separators=(",", ":"), allow_nan=False)

	@staticmethod
	def sha256_hex(b: bytes) -> str:
		"""
		Return the hexadecimal SHA-256 digest of a bytes buffer.
		"""
		h = hashlib.sha256()
		h.update(b)
		return h.hexdigest()

	def report_payload(self, result: ProbeResult) -> Dict[str, object]:
		"""
		Summary fields plus report_hash, the SHA-256 of the canonical summary.
		"""
		core = result.summary()
		payload = dict(core)
		payload["report_hash"] = self.sha256_hex(self.canonical_json(core).encode("utf-8"))
		return payload

	def _write_json(self, path: Path, payload: Dict[str, object]) -> None:
		"""Write a compact, stable JSON payload to 'path'."""
		with path.open("w", encoding="utf-8") as f:
			f.write(self.canonical_json(payload))

	def _write_events(self, path: Path, events: Iterable[LogEvent]) -> None:
		"""Write one canonical JSON object per event, in logical-time order."""
		with path.open("w", encoding="utf-8") as f:
			for ev in events:
				f.write(self.canonical_json(asdict(ev)) + "\n")

	def persist(self, out_dir: Path, result: ProbeResult) -> Dict[str, object]:
		"""
		Write probe_report.json and probe_events.jsonl under out_dir and return
		the report payload.
		"""
		out_dir = Path(out_dir)
		out_dir.mkdir(parents=True, exist_ok=True)
		payload = self.report_payload(result)
		self._write_json(out_dir / "probe_report.json", payload)
		self._write_events(out_dir / "probe_events.jsonl", result.events)
		return payload
