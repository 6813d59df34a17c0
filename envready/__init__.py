"""
envready - Environment readiness checks for Python workloads that call a
remote HTTPS API.

Each check returns an explicit outcome with clear messaging:
- Explicit: every check reports pass/fail/info/skip with a detail line
- Honest: no auto-fixing, nothing is installed or created
- Actionable: failing checks carry a remediation hint (text only)
- Single pass: checks run once, in order, and the run always completes
"""

__version__ = "1.0.0"

from .checks import (
    ALL_CHECKS,
    CheckResult,
    CheckStatus,
    ReadinessCheck,
    Severity,
    # Individual checks
    check_os_architecture,
    check_host_runtime,
    check_cpu,
    check_memory,
    check_disk_space,
    check_python_runtime,
    check_venv_capability,
    check_network,
)

from .config import ReadinessConfig

from .readiness_report import (
    ReadinessReport,
    run_checks,
    format_check_line,
    format_verdict,
)

__all__ = [
    "__version__",
    # Check types
    "ALL_CHECKS",
    "CheckResult",
    "CheckStatus",
    "ReadinessCheck",
    "Severity",
    # Individual checks
    "check_os_architecture",
    "check_host_runtime",
    "check_cpu",
    "check_memory",
    "check_disk_space",
    "check_python_runtime",
    "check_venv_capability",
    "check_network",
    # Configuration
    "ReadinessConfig",
    # Report
    "ReadinessReport",
    "run_checks",
    "format_check_line",
    "format_verdict",
]
