"""Colorized terminal output for readiness runs."""

import sys
from typing import Optional, TextIO

from colorama import Fore, Style, init

from .checks import CheckResult, CheckStatus
from .readiness_report import ReadinessReport, format_check_line, format_verdict

_STATUS_COLORS = {
    CheckStatus.PASS: Fore.GREEN,
    CheckStatus.FAIL: Fore.RED,
    CheckStatus.INFO: "",
    CheckStatus.SKIP: Fore.YELLOW,
    CheckStatus.ERROR: Fore.YELLOW,
}


class TerminalReporter:
    """
    Print the banner, each check line as it arrives, and the verdict.

    With no explicit stream, sys.stdout is read after colorama's init() so
    Windows consoles get the converting wrapper.
    """

    def __init__(self, stream: Optional[TextIO] = None, color: bool = False):
        self.color = color
        if color:
            init()
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, text: str, color: str = "") -> None:
        if self.color and color:
            text = f"{color}{text}{Style.RESET_ALL}"
        print(text, file=self.stream, flush=True)

    def banner(self, title: str) -> None:
        self._write("=" * 60, Fore.CYAN)
        self._write(f"  {title}", Fore.CYAN)
        self._write("=" * 60, Fore.CYAN)

    def result(self, result: CheckResult) -> None:
        self._write(format_check_line(result), _STATUS_COLORS[result.status])

    def verdict(self, report: ReadinessReport) -> None:
        color = Fore.GREEN if report.ready else Fore.RED
        self._write("-" * 60, Fore.CYAN)
        for line in format_verdict(report):
            self._write(line, color)
