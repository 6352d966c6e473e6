"""dirspace data models."""

from dirspace.models.node import NodeKind, Probed, ProbeResult, Skipped
from dirspace.models.report import Entry, Report, ReportSummary

__all__ = [
    "Entry",
    "NodeKind",
    "Probed",
    "ProbeResult",
    "Report",
    "ReportSummary",
    "Skipped",
]
