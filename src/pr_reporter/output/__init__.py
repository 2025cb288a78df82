"""Output handlers for PR Reporter."""

from pr_reporter.output.console import print_summary, print_table
from pr_reporter.output.json_writer import format_json, write_json
from pr_reporter.output.render import render

__all__ = [
    "render",
    "print_table",
    "print_summary",
    "format_json",
    "write_json",
]
