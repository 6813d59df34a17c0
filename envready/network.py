"""
Outbound Reachability - Two-step probe strategy.

Probes, in order:
    1. TCP connect to host:443 (platform default connect timeout)
    2. HTTPS HEAD https://host/ (10 second timeout)

Each probe returns a ProbeOutcome instead of raising:
    REACHABLE    the target answered
    UNREACHABLE  the method worked but the target did not answer usefully
    UNAVAILABLE  the method itself could not be used on this host

The strategy moves to the next probe on anything other than REACHABLE and
keeps every attempt so a failure can name both mechanisms.
No retries.
"""

import logging
import socket
import ssl
from dataclasses import dataclass, field
from enum import Enum
from http.client import HTTPException
from typing import List, Optional, Sequence
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

logger = logging.getLogger(__name__)

# Any HTTP status in this range proves the host is up and talking HTTPS
REACHABLE_STATUS_MIN = 200
REACHABLE_STATUS_MAX = 500


class Reachability(str, Enum):
    """Typed result of a single probe."""
    REACHABLE = "reachable"
    UNREACHABLE = "unreachable"
    UNAVAILABLE = "unavailable"


@dataclass
class ProbeOutcome:
    """
    Result of one probe attempt.

    Attributes:
        method: Probe name (e.g., "tcp", "https-head")
        reachability: reachable | unreachable | unavailable
        message: Factual description of what happened
    """
    method: str
    reachability: Reachability
    message: str

    @property
    def reachable(self) -> bool:
        return self.reachability == Reachability.REACHABLE


# =============================================================================
# TCP Probe
# =============================================================================

class TcpConnectProbe:
    """Open and immediately close a TCP connection."""

    name = "tcp"

    def __init__(self, port: int = 443, timeout: Optional[float] = None):
        self.port = port
        self.timeout = timeout

    def probe(self, host: str) -> ProbeOutcome:
        logger.debug("TCP probe %s:%s", host, self.port)
        try:
            # timeout=None keeps the socket module's global default
            if self.timeout is None:
                conn = socket.create_connection((host, self.port))
            else:
                conn = socket.create_connection((host, self.port), timeout=self.timeout)
        except (socket.gaierror, socket.timeout, ConnectionError) as e:
            return ProbeOutcome(
                method=self.name,
                reachability=Reachability.UNREACHABLE,
                message=f"TCP connect to {host}:{self.port} failed: {e}",
            )
        except ValueError as e:
            # IDNA encoding rejects empty or overlong host labels
            return ProbeOutcome(
                method=self.name,
                reachability=Reachability.UNREACHABLE,
                message=f"TCP connect to {host}:{self.port} failed: invalid host name ({e})",
            )
        except OSError as e:
            return ProbeOutcome(
                method=self.name,
                reachability=Reachability.UNAVAILABLE,
                message=f"TCP probe unavailable: {e}",
            )
        conn.close()
        return ProbeOutcome(
            method=self.name,
            reachability=Reachability.REACHABLE,
            message=f"TCP {self.port} reachable on {host}",
        )


# =============================================================================
# HTTPS HEAD Probe
# =============================================================================

class HttpsHeadProbe:
    """Issue an HTTPS HEAD request and accept any status in [200, 500)."""

    name = "https-head"

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    def _classify(self, host: str, status: int) -> ProbeOutcome:
        if REACHABLE_STATUS_MIN <= status < REACHABLE_STATUS_MAX:
            return ProbeOutcome(
                method=self.name,
                reachability=Reachability.REACHABLE,
                message=f"HTTPS HEAD https://{host}/ returned {status}",
            )
        return ProbeOutcome(
            method=self.name,
            reachability=Reachability.UNREACHABLE,
            message=f"HTTPS HEAD https://{host}/ returned {status}",
        )

    def probe(self, host: str) -> ProbeOutcome:
        url = f"https://{host}/"
        logger.debug("HTTPS HEAD %s (timeout %ss)", url, self.timeout)
        try:
            request = Request(url, method="HEAD")
            with urlopen(request, timeout=self.timeout) as response:
                return self._classify(host, response.status)
        except HTTPError as e:
            # urllib raises for 4xx/5xx; 4xx still proves reachability
            return self._classify(host, e.code)
        except (URLError, HTTPException, socket.timeout, ssl.SSLError, ConnectionError) as e:
            reason = getattr(e, "reason", e)
            return ProbeOutcome(
                method=self.name,
                reachability=Reachability.UNREACHABLE,
                message=f"HTTPS HEAD {url} failed: {reason}",
            )
        except (OSError, ValueError) as e:
            return ProbeOutcome(
                method=self.name,
                reachability=Reachability.UNAVAILABLE,
                message=f"HTTPS probe unavailable: {e}",
            )


# =============================================================================
# Strategy
# =============================================================================

@dataclass
class ReachabilityResult:
    """Final outcome plus every attempt made to reach it."""
    host: str
    attempts: List[ProbeOutcome] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return any(attempt.reachable for attempt in self.attempts)

    @property
    def final(self) -> Optional[ProbeOutcome]:
        return self.attempts[-1] if self.attempts else None

    def describe(self) -> str:
        if self.reachable:
            return self.final.message
        return "; ".join(attempt.message for attempt in self.attempts) or "no probes ran"


class ReachabilityStrategy:
    """Run probes in order until one reports REACHABLE."""

    def __init__(self, probes: Sequence):
        self.probes = list(probes)

    @classmethod
    def default(
        cls,
        port: int = 443,
        connect_timeout: Optional[float] = None,
        http_timeout: float = 10.0,
    ) -> "ReachabilityStrategy":
        return cls([
            TcpConnectProbe(port=port, timeout=connect_timeout),
            HttpsHeadProbe(timeout=http_timeout),
        ])

    def probe(self, host: str) -> ReachabilityResult:
        result = ReachabilityResult(host=host)
        for probe in self.probes:
            outcome = probe.probe(host)
            result.attempts.append(outcome)
            if outcome.reachable:
                break
            logger.debug("%s probe %s: %s", outcome.method, outcome.reachability.value, outcome.message)
        return result
