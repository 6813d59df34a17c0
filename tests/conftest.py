"""
Pytest configuration for the readiness test suite.

No test here touches the real network or spawns a real interpreter; host
queries are patched at the envready.host / envready.runtime seams.
"""

from contextlib import ExitStack
from unittest.mock import patch

import pytest

from envready.config import ReadinessConfig
from envready.host import CpuInfo, OsInfo
from envready.runtime import Interpreter

GB = 1024 ** 3


@pytest.fixture
def config():
    return ReadinessConfig()


@pytest.fixture
def healthy_host():
    """
    Patch every host query so each check passes.

    Yields a dict of the active mocks keyed by query name, so a test can
    override one value (e.g. free disk) before running.
    """
    with ExitStack() as stack:
        mocks = {
            "os": stack.enter_context(patch(
                "envready.host.get_os_info",
                return_value=OsInfo(system="Linux", release="6.1.0", machine="x86_64"),
            )),
            "cpu": stack.enter_context(patch(
                "envready.host.get_cpu_info",
                return_value=CpuInfo(model="Test CPU", logical_cores=8),
            )),
            "memory": stack.enter_context(patch(
                "envready.host.get_total_memory_bytes",
                return_value=16 * GB,
            )),
            "drive": stack.enter_context(patch(
                "envready.host.get_system_drive",
                return_value="/",
            )),
            "disk": stack.enter_context(patch(
                "envready.host.get_free_disk_bytes",
                return_value=100 * GB,
            )),
            "locate": stack.enter_context(patch(
                "envready.runtime.locate_interpreter",
                return_value=Interpreter(name="python", path="/usr/bin/python"),
            )),
            "version": stack.enter_context(patch(
                "envready.runtime.read_version_output",
                return_value="Python 3.11.7",
            )),
            "venv": stack.enter_context(patch(
                "envready.runtime.venv_available",
                return_value=True,
            )),
        }
        yield mocks
