"""
Keywarden Output Module
========================

Console display and report generation for Keywarden results.
"""

from keywarden.output.console import KeywardenConsoleOutput
from keywarden.output.report import KeywardenReportGenerator

__all__ = [
    "KeywardenConsoleOutput",
    "KeywardenReportGenerator",
]
