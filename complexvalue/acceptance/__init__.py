"""
Identity probe & report persistence: package re-exports

Public API:
  IdentityProbe, ProbeResult, ProbeReportWriter
"""

from .identity_probe import IdentityProbe, ProbeResult
from .persist import ProbeReportWriter

__all__ = ["IdentityProbe", "ProbeResult", "ProbeReportWriter"]
