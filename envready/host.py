"""
Host Facts - Leaf queries against the operating system.

Each function performs one read of host state and returns a plain value.
Failures of the underlying source (psutil, platform, filesystem) are raised
as DataSourceError so the check layer can report them without guessing.

No caching: every call queries the host again.
"""

import logging
import os
import platform
from dataclasses import dataclass
from typing import Optional

import psutil

from .errors import DataSourceError

logger = logging.getLogger(__name__)

# =============================================================================
# Unit Conversion
# =============================================================================

BYTES_PER_GB = 1024 ** 3

# Machine strings reported by platform.machine() for 64-bit operating systems
_64BIT_MACHINES = {
    "x86_64",
    "amd64",
    "arm64",
    "aarch64",
    "ppc64",
    "ppc64le",
    "s390x",
    "riscv64",
    "loongarch64",
    "ia64",
    "sparc64",
    "mips64",
}


def bytes_to_gb(value: int) -> float:
    """Convert a byte count to GB (2^30 bytes), rounded to 2 decimals."""
    return round(value / BYTES_PER_GB, 2)


# =============================================================================
# OS
# =============================================================================

@dataclass(frozen=True)
class OsInfo:
    """Operating system name, release and machine architecture."""
    system: str
    release: str
    machine: str

    @property
    def is_64bit(self) -> bool:
        return self.machine.lower() in _64BIT_MACHINES

    def describe(self) -> str:
        return f"{self.system} {self.release} ({self.machine or 'unknown architecture'})".strip()


def get_os_info() -> OsInfo:
    """Query OS name, release and architecture."""
    try:
        return OsInfo(
            system=platform.system(),
            release=platform.release(),
            machine=platform.machine(),
        )
    except OSError as e:
        raise DataSourceError(f"Unable to query OS information: {e}") from e


# =============================================================================
# CPU
# =============================================================================

@dataclass(frozen=True)
class CpuInfo:
    """CPU model string and logical core count."""
    model: str
    logical_cores: Optional[int]


def get_cpu_info() -> CpuInfo:
    """
    Query the CPU model and logical core count.

    platform.processor() is empty on many Linux distributions; the machine
    architecture is used as the model in that case.
    """
    try:
        model = platform.processor() or platform.machine() or "unknown CPU"
        logical = psutil.cpu_count(logical=True)
    except (OSError, psutil.Error) as e:
        raise DataSourceError(f"Unable to query CPU information: {e}") from e
    return CpuInfo(model=model.strip(), logical_cores=logical)


# =============================================================================
# Memory
# =============================================================================

def get_total_memory_bytes() -> int:
    """Query total physical memory visible to the OS, in bytes."""
    try:
        return int(psutil.virtual_memory().total)
    except (OSError, psutil.Error) as e:
        raise DataSourceError(f"Unable to query installed memory: {e}") from e


# =============================================================================
# Disk
# =============================================================================

def get_system_drive() -> str:
    """
    Return the root of the system drive.

    Windows reads %SystemDrive% (defaulting to C:); every other platform
    uses the filesystem root.
    """
    if platform.system() == "Windows":
        drive = os.environ.get("SystemDrive", "C:")
        return drive.rstrip("\\/") + "\\"
    return "/"


def get_free_disk_bytes(path: Optional[str] = None) -> int:
    """Query free bytes on `path` (the system drive by default)."""
    target = path or get_system_drive()
    try:
        return int(psutil.disk_usage(target).free)
    except (OSError, psutil.Error) as e:
        raise DataSourceError(f"Unable to query free space on {target}: {e}") from e
