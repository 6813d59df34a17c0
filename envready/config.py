"""
Run configuration for the readiness checker.

ReadinessConfig is validated once at the CLI boundary and then passed,
read-only, to every check. Nothing here is persisted between runs.
"""

from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_REQUIRED_RAM_GB = 8
DEFAULT_REQUIRED_FREE_DISK_GB = 20
DEFAULT_API_PORT = 443
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0


class ReadinessConfig(BaseModel):
    """
    Thresholds and probe targets for a single readiness run.

    Attributes:
        api_host: Hostname to probe on port 443. Empty skips the network check.
        required_ram_gb: Minimum installed RAM in GB.
        required_free_disk_gb: Minimum free space on the system drive in GB.
        api_port: Port used by the TCP reachability probe.
        http_timeout_seconds: Timeout for the HTTPS HEAD fallback.
        connect_timeout_seconds: Timeout for the TCP probe (None = platform default).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_host: str = ""
    required_ram_gb: int = Field(default=DEFAULT_REQUIRED_RAM_GB, ge=0)
    required_free_disk_gb: int = Field(default=DEFAULT_REQUIRED_FREE_DISK_GB, ge=0)
    api_port: int = Field(default=DEFAULT_API_PORT, gt=0, le=65535)
    http_timeout_seconds: float = Field(default=DEFAULT_HTTP_TIMEOUT_SECONDS, gt=0)
    connect_timeout_seconds: Optional[float] = Field(default=None, gt=0)

    @field_validator("api_host", mode="before")
    @classmethod
    def _normalise_host(cls, value: Optional[str]) -> str:
        # A pasted URL is reduced to its hostname
        if value is None:
            return ""
        value = str(value).strip()
        if "://" in value:
            value = urlsplit(value).hostname or ""
        return value.split("/", 1)[0]

    @property
    def network_check_enabled(self) -> bool:
        return bool(self.api_host)
