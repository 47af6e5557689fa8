"""Presentation layer - CLI command and report rendering."""
from .cli import ReportCommand, ReportOptions
from .report_renderer import render_json, render_text, success_rate, write_json_report

__all__ = [
    "ReportCommand",
    "ReportOptions",
    "render_json",
    "render_text",
    "success_rate",
    "write_json_report",
]
