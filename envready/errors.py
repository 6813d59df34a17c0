"""
Readiness-specific errors.

None of these are fatal to a run. The check runner turns every one of them
into a reported check outcome and moves on to the next check.
"""


class ReadinessError(Exception):
    """
    Base exception for readiness check failures.

    All readiness errors inherit from this.
    """

    pass


class DataSourceError(ReadinessError):
    """
    A host query could not be answered.

    Raised when the OS, psutil or the filesystem fails to report:
    - CPU model or core count
    - Total memory
    - Free space on the system drive
    """

    pass


class VersionParseError(ReadinessError):
    """Raised when an interpreter's version text does not match `Name X.Y.Z`."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Unrecognised version output: {raw!r}")
