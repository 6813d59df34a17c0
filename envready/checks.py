"""
Readiness Checks - Individual check implementations.

Each check follows the same pattern:
1. Query one fact from the host (or probe the network)
2. Compare it against a threshold or presence rule
3. Return CheckResult with:
   - id: unique identifier
   - status: pass | fail | info | skip | error
   - detail: measured value and threshold, or the reason for failure
   - hint: optional remediation text (not an action)

Checks may raise; the runner in readiness_report turns any exception into an
ERROR result so one broken data source never stops the run.
"""

import logging
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from . import host, runtime
from .config import ReadinessConfig
from .errors import VersionParseError
from .network import ReachabilityStrategy

logger = logging.getLogger(__name__)


class CheckStatus(str, Enum):
    """Check result status."""
    PASS = "pass"
    FAIL = "fail"
    INFO = "info"
    SKIP = "skip"
    ERROR = "error"


class Severity(str, Enum):
    """Whether a failed check flips the overall verdict."""
    BLOCKING = "blocking"
    INFORMATIONAL = "informational"


@dataclass
class CheckResult:
    """
    Result of a single readiness check.

    Attributes:
        id: Unique identifier for this check (e.g., "memory")
        label: Short display name (e.g., "Installed RAM")
        status: pass | fail | info | skip | error
        detail: Factual explanation of the result
        severity: blocking | informational
        hint: Optional remediation hint (text only)
    """
    id: str
    label: str
    status: CheckStatus
    detail: str
    severity: Severity = Severity.BLOCKING
    hint: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.status in (CheckStatus.PASS, CheckStatus.INFO)

    @property
    def blocks_readiness(self) -> bool:
        """Skipped checks never block."""
        return (
            self.severity == Severity.BLOCKING
            and self.status in (CheckStatus.FAIL, CheckStatus.ERROR)
        )


@dataclass(frozen=True)
class ReadinessCheck:
    """An ordered entry in the check list."""
    id: str
    label: str
    severity: Severity
    run: Callable[[ReadinessConfig], CheckResult]


def _result(check_id: str, label: str, ok: bool, detail: str, hint: Optional[str] = None) -> CheckResult:
    return CheckResult(
        id=check_id,
        label=label,
        status=CheckStatus.PASS if ok else CheckStatus.FAIL,
        detail=detail,
        hint=None if ok else hint,
    )


# =============================================================================
# OS Architecture Check
# =============================================================================

def check_os_architecture(config: ReadinessConfig) -> CheckResult:
    """
    Check that the operating system is 64-bit.

    The workload and its native dependencies ship 64-bit builds only.
    """
    info = host.get_os_info()
    return _result(
        "os_architecture",
        "OS 64-bit",
        info.is_64bit,
        info.describe(),
        hint="A 64-bit operating system is required",
    )


# =============================================================================
# Host Runtime Check
# =============================================================================

MINIMUM_HOST_VERSION = (3, 8)


def check_host_runtime(config: ReadinessConfig) -> CheckResult:
    """
    Check the interpreter running this checker.

    The minimum mirrors the package's own requires-python.
    """
    current = sys.version_info[:3]
    version_str = ".".join(str(part) for part in current)
    minimum_str = ".".join(str(part) for part in MINIMUM_HOST_VERSION)
    ok = current[:2] >= MINIMUM_HOST_VERSION
    return _result(
        "host_runtime",
        "Host runtime version",
        ok,
        f"Python {version_str} (minimum: {minimum_str})",
        hint=f"Run the checker with Python {minimum_str} or later",
    )


# =============================================================================
# CPU Check (informational)
# =============================================================================

def check_cpu(config: ReadinessConfig) -> CheckResult:
    """Report CPU model and logical core count. Informational, never fails."""
    info = host.get_cpu_info()
    cores = info.logical_cores if info.logical_cores is not None else "unknown"
    return CheckResult(
        id="cpu_info",
        label="CPU",
        status=CheckStatus.INFO,
        detail=f"{info.model} ({cores} logical cores)",
        severity=Severity.INFORMATIONAL,
    )


# =============================================================================
# Memory Check
# =============================================================================

def check_memory(config: ReadinessConfig) -> CheckResult:
    """Check installed RAM against required_ram_gb (equal passes)."""
    measured = host.bytes_to_gb(host.get_total_memory_bytes())
    required = config.required_ram_gb
    return _result(
        "memory",
        "Installed RAM",
        measured >= required,
        f"{measured:.2f} GB (required: {required} GB)",
        hint=f"Add memory or run on a machine with at least {required} GB of RAM",
    )


# =============================================================================
# Disk Space Check
# =============================================================================

def check_disk_space(config: ReadinessConfig) -> CheckResult:
    """
    Check free space on the system drive against required_free_disk_gb.

    Interpreters, virtual environments and package caches all land on the
    system drive by default.
    """
    drive = host.get_system_drive()
    measured = host.bytes_to_gb(host.get_free_disk_bytes(drive))
    required = config.required_free_disk_gb
    return _result(
        "disk_space",
        f"Free disk space ({drive})",
        measured >= required,
        f"{measured:.2f} GB free (required: {required} GB)",
        hint=f"Free up space on {drive} until at least {required} GB is available",
    )


# =============================================================================
# Python Runtime Check
# =============================================================================

MINIMUM_RUNTIME_MAJOR = 3
RUNTIME_INSTALL_HINT = "Install Python 3 from python.org and make sure it is on PATH"


def check_python_runtime(config: ReadinessConfig) -> CheckResult:
    """
    Check that a Python 3 interpreter is on PATH.

    Tries python, then python3, then the py launcher. Output that does not
    parse as `Python X.Y.Z` counts as not detected and is echoed back.
    """
    label = "Python runtime"
    interpreter = runtime.locate_interpreter()
    if interpreter is None:
        names = ", ".join((runtime.PRIMARY_EXECUTABLE,) + runtime.FALLBACK_EXECUTABLES)
        return _result(
            "python_runtime",
            label,
            False,
            f"No Python executable found on PATH (tried: {names})",
            hint=RUNTIME_INSTALL_HINT,
        )

    try:
        raw = runtime.read_version_output(interpreter)
    except (OSError, subprocess.SubprocessError) as e:
        return _result(
            "python_runtime",
            label,
            False,
            f"{interpreter.path} could not be run: {e}",
            hint=RUNTIME_INSTALL_HINT,
        )

    try:
        version = runtime.parse_version(raw)
    except VersionParseError as e:
        return _result(
            "python_runtime",
            label,
            False,
            f"Python not detected: {interpreter.path} reported {e.raw!r}",
            hint=RUNTIME_INSTALL_HINT,
        )

    return _result(
        "python_runtime",
        label,
        version.major >= MINIMUM_RUNTIME_MAJOR,
        f"Python {version} at {interpreter.path} (required: {MINIMUM_RUNTIME_MAJOR}.x)",
        hint=RUNTIME_INSTALL_HINT,
    )


# =============================================================================
# Virtual Environment Check
# =============================================================================

def check_venv_capability(config: ReadinessConfig) -> CheckResult:
    """
    Check that `-m venv` runs on the located interpreter.

    Some Linux distributions split venv into a separate package. Skipped
    when no interpreter is found.
    """
    label = "Virtual environment support"
    interpreter = runtime.locate_interpreter()
    if interpreter is None:
        return CheckResult(
            id="venv_capability",
            label=label,
            status=CheckStatus.SKIP,
            detail="Skipped: no Python executable found",
        )

    try:
        ok = runtime.venv_available(interpreter)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("venv probe raised: %s", e)
        ok = False
    return _result(
        "venv_capability",
        label,
        ok,
        f"{interpreter.name} -m venv is available" if ok else f"{interpreter.name} -m venv failed",
        hint="Install the venv module (e.g. apt install python3-venv)",
    )


# =============================================================================
# Network Reachability Check
# =============================================================================

def check_network(config: ReadinessConfig) -> CheckResult:
    """
    Check outbound HTTPS to the configured API host.

    TCP 443 first, then an HTTPS HEAD request. Skipped when no host is set.
    """
    label = "Outbound HTTPS"
    if not config.network_check_enabled:
        return CheckResult(
            id="network_reachability",
            label=label,
            status=CheckStatus.SKIP,
            detail="Skipped: no API host configured (use --test-api-host)",
        )

    strategy = ReachabilityStrategy.default(
        port=config.api_port,
        connect_timeout=config.connect_timeout_seconds,
        http_timeout=config.http_timeout_seconds,
    )
    outcome = strategy.probe(config.api_host)
    return _result(
        "network_reachability",
        f"{label} to {config.api_host}",
        outcome.reachable,
        outcome.describe(),
        hint="Check firewall, proxy and DNS settings for outbound port 443",
    )


# =============================================================================
# Check List
# =============================================================================

# Run order is output order
ALL_CHECKS: List[ReadinessCheck] = [
    ReadinessCheck("os_architecture", "OS 64-bit", Severity.BLOCKING, check_os_architecture),
    ReadinessCheck("host_runtime", "Host runtime version", Severity.BLOCKING, check_host_runtime),
    ReadinessCheck("cpu_info", "CPU", Severity.INFORMATIONAL, check_cpu),
    ReadinessCheck("memory", "Installed RAM", Severity.BLOCKING, check_memory),
    ReadinessCheck("disk_space", "Free disk space", Severity.BLOCKING, check_disk_space),
    ReadinessCheck("python_runtime", "Python runtime", Severity.BLOCKING, check_python_runtime),
    ReadinessCheck("venv_capability", "Virtual environment support", Severity.BLOCKING, check_venv_capability),
    ReadinessCheck("network_reachability", "Outbound HTTPS", Severity.BLOCKING, check_network),
]
