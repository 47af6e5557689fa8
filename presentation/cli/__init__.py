"""Presentation CLI exports."""
from .report_command import ReportCommand, ReportOptions

__all__ = [
    "ReportCommand",
    "ReportOptions",
]
