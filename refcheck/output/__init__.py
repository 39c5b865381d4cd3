"""Output subsystem: renders folder reports."""

from refcheck.output.printer import render_report, render_reports, reports_to_json

__all__ = [
    "render_report",
    "render_reports",
    "reports_to_json",
]
