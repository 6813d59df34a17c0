"""
Readiness Report - Run the checks and fold them into one verdict.

The report replaces a free-standing "overall pass" flag: it accumulates
results in run order and derives readiness from them.

    ready == no BLOCKING result with status FAIL or ERROR

Every result is handed to the caller's callback the moment its check
finishes, so output appears line by line as the run progresses.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .checks import ALL_CHECKS, CheckResult, CheckStatus, ReadinessCheck
from .config import ReadinessConfig

logger = logging.getLogger(__name__)

ResultCallback = Callable[[CheckResult], None]

# Tags printed in front of each check line
STATUS_TAGS = {
    CheckStatus.PASS: "[OK]",
    CheckStatus.FAIL: "[FAIL]",
    CheckStatus.INFO: "[INFO]",
    CheckStatus.SKIP: "[INFO]",
    CheckStatus.ERROR: "[WARN]",
}

PASS_MESSAGE = "This machine is ready to run the workload."
FAIL_MESSAGE = "Review the [FAIL] and [WARN] lines above and fix them before continuing."


@dataclass
class ReadinessReport:
    """
    Structured readiness report.

    Attributes:
        checks: Check results in run order
    """
    checks: List[CheckResult] = field(default_factory=list)

    def add(self, result: CheckResult) -> None:
        self.checks.append(result)

    @property
    def ready(self) -> bool:
        return not any(c.blocks_readiness for c in self.checks)

    @property
    def failed_checks(self) -> List[CheckResult]:
        return [c for c in self.checks if c.status in (CheckStatus.FAIL, CheckStatus.ERROR)]

    @property
    def blocking_failures(self) -> int:
        return sum(1 for c in self.checks if c.blocks_readiness)

    @property
    def skipped_checks(self) -> List[CheckResult]:
        return [c for c in self.checks if c.status == CheckStatus.SKIP]


def run_checks(
    config: ReadinessConfig,
    on_result: Optional[ResultCallback] = None,
    checks: Optional[Sequence[ReadinessCheck]] = None,
) -> ReadinessReport:
    """
    Run every check in order and return the folded report.

    Any exception raised by a check becomes an ERROR result for that check;
    the remaining checks still run. An exception raised by on_result is
    logged and the run continues.

    Args:
        config: Thresholds and probe targets
        on_result: Called with each result as soon as its check completes
        checks: Check list override (default: ALL_CHECKS)

    Returns:
        ReadinessReport with one result per check
    """
    report = ReadinessReport()
    for check in checks if checks is not None else ALL_CHECKS:
        try:
            result = check.run(config)
        except Exception as e:
            logger.warning("Check %s could not gather data: %s", check.id, e)
            result = CheckResult(
                id=check.id,
                label=check.label,
                status=CheckStatus.ERROR,
                detail=f"Unable to gather data: {e}",
                severity=check.severity,
            )
        else:
            # The list entry owns severity
            result.severity = check.severity
        report.add(result)
        if on_result is not None:
            try:
                on_result(result)
            except Exception as e:
                # Output failures (e.g. a closed pipe) must not stop the run
                logger.warning("Could not report result of %s: %s", check.id, e)
    return report


def format_check_line(result: CheckResult) -> str:
    """Format one result as `[TAG] <label> - <detail>`."""
    line = f"{STATUS_TAGS[result.status]} {result.label} - {result.detail}"
    if result.hint and not result.passed:
        line = f"{line}. {result.hint}"
    return line


def format_verdict(report: ReadinessReport) -> List[str]:
    """Format the final verdict block."""
    if report.ready:
        lines = [
            "Overall readiness: PASS",
            PASS_MESSAGE,
        ]
        skipped = report.skipped_checks
        if skipped:
            lines.append(f"Note: {len(skipped)} check(s) skipped: {', '.join(c.label for c in skipped)}")
        return lines

    lines = [
        "Overall readiness: FAIL",
        f"{report.blocking_failures} blocking check(s) failed. {FAIL_MESSAGE}",
    ]
    for check in report.failed_checks:
        marker = " [BLOCKING]" if check.blocks_readiness else ""
        lines.append(f"  - {check.label}{marker}")
    return lines
