"""
Python Runtime Discovery - Locate, version and probe an interpreter on PATH.

Discovery order:
    python   (primary name)
    python3  (POSIX distributions that ship no bare `python`)
    py       (Windows launcher)

Version text is read from `<exe> --version`. Python 2 writes it to stderr,
Python 3 to stdout, so both streams are inspected.

No retries. A missing executable or unparseable output is reported, never
raised past the check layer.
"""

import logging
import re
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import VersionParseError

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================

PRIMARY_EXECUTABLE = "python"
FALLBACK_EXECUTABLES = ("python3", "py")

# Hard limit for any interpreter invocation
SUBPROCESS_TIMEOUT_SECONDS = 30

_VERSION_PATTERN = re.compile(r"Python\s+(\d+)\.(\d+)\.(\d+)")


# =============================================================================
# Version Parsing
# =============================================================================

@dataclass(frozen=True)
class RuntimeVersion:
    """Parsed `major.minor.patch` triple."""
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str) -> RuntimeVersion:
    """
    Extract the version triple following the `Python` token.

    Args:
        text: Raw output of `<exe> --version`

    Returns:
        RuntimeVersion

    Raises:
        VersionParseError: If the text contains no `Python X.Y.Z` token
    """
    match = _VERSION_PATTERN.search(text or "")
    if not match:
        raise VersionParseError((text or "").strip())
    major, minor, patch = (int(group) for group in match.groups())
    return RuntimeVersion(major=major, minor=minor, patch=patch)


# =============================================================================
# Discovery
# =============================================================================

@dataclass(frozen=True)
class Interpreter:
    """An interpreter found on PATH."""
    name: str
    path: str


def locate_interpreter(
    names: Optional[Sequence[str]] = None,
) -> Optional[Interpreter]:
    """
    Find the first interpreter on PATH.

    Args:
        names: Executable names to try in order (default: python, python3, py)

    Returns:
        Interpreter for the first name found, None if none are on PATH
    """
    candidates = names or (PRIMARY_EXECUTABLE,) + FALLBACK_EXECUTABLES
    for name in candidates:
        path = shutil.which(name)
        if path:
            logger.debug("Interpreter %r resolved to %s", name, path)
            return Interpreter(name=name, path=path)
        logger.debug("Interpreter %r not on PATH", name)
    return None


def _run(args: Sequence[str]) -> subprocess.CompletedProcess:
    logger.debug("Running: %s", " ".join(args))
    return subprocess.run(
        list(args),
        capture_output=True,
        text=True,
        timeout=SUBPROCESS_TIMEOUT_SECONDS,
    )


def read_version_output(interpreter: Interpreter) -> str:
    """Run `<exe> --version` and return its combined output."""
    result = _run([interpreter.path, "--version"])
    return "\n".join(part for part in (result.stdout, result.stderr) if part).strip()


def venv_available(interpreter: Interpreter) -> bool:
    """
    Check that `<exe> -m venv` is invocable.

    Runs the module in help mode, which creates nothing. A zero exit status
    means the module is importable and runnable.
    """
    result = _run([interpreter.path, "-m", "venv", "-h"])
    if result.returncode != 0:
        logger.debug("venv probe exited %s: %s", result.returncode, result.stderr.strip())
    return result.returncode == 0
