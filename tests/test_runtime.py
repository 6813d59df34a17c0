"""
Tests for Python interpreter discovery and version parsing.

Interpreter output is mocked; no real subprocess is started.
"""

import subprocess
from unittest.mock import patch

import pytest

from envready.checks import CheckStatus, check_python_runtime, check_venv_capability
from envready.errors import VersionParseError
from envready.runtime import (
    Interpreter,
    locate_interpreter,
    parse_version,
    read_version_output,
    venv_available,
)

PYTHON = Interpreter(name="python", path="/usr/bin/python")


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestParseVersion:
    """Test the `Python X.Y.Z` pattern."""

    def test_python3(self):
        version = parse_version("Python 3.11.7")

        assert (version.major, version.minor, version.patch) == (3, 11, 7)
        assert str(version) == "3.11.7"

    def test_python2(self):
        version = parse_version("Python 2.7.18")

        assert version.major == 2

    def test_surrounding_text_is_ignored(self):
        assert parse_version("\nPython 3.12.0\n").minor == 12

    def test_no_numbers(self):
        with pytest.raises(VersionParseError) as exc_info:
            parse_version("Python")

        assert exc_info.value.raw == "Python"

    def test_empty_output(self):
        with pytest.raises(VersionParseError):
            parse_version("")


class TestLocateInterpreter:
    """Test PATH discovery order."""

    def test_primary_name_wins(self):
        with patch("envready.runtime.shutil.which", side_effect=lambda name: f"/bin/{name}"):
            interpreter = locate_interpreter()

        assert interpreter == Interpreter(name="python", path="/bin/python")

    def test_falls_back_to_launcher(self):
        paths = {"py": "C:\\Windows\\py.exe"}
        with patch("envready.runtime.shutil.which", side_effect=paths.get):
            interpreter = locate_interpreter()

        assert interpreter.name == "py"
        assert interpreter.path == "C:\\Windows\\py.exe"

    def test_nothing_on_path(self):
        with patch("envready.runtime.shutil.which", return_value=None):
            assert locate_interpreter() is None


class TestInterpreterInvocation:
    """Test the subprocess wrappers."""

    def test_version_read_from_stderr(self):
        # Python 2 prints its version to stderr
        with patch("envready.runtime.subprocess.run", return_value=_completed(stderr="Python 2.7.18\n")) as mock_run:
            output = read_version_output(PYTHON)

        assert output == "Python 2.7.18"
        assert mock_run.call_args[0][0] == ["/usr/bin/python", "--version"]

    def test_venv_help_exit_zero(self):
        with patch("envready.runtime.subprocess.run", return_value=_completed(stdout="usage: venv")) as mock_run:
            assert venv_available(PYTHON) is True

        assert mock_run.call_args[0][0] == ["/usr/bin/python", "-m", "venv", "-h"]

    def test_venv_missing_module(self):
        result = _completed(returncode=1, stderr="No module named venv")
        with patch("envready.runtime.subprocess.run", return_value=result):
            assert venv_available(PYTHON) is False


class TestPythonRuntimeCheck:
    """Test check_python_runtime() outcomes."""

    def test_python3_passes(self, config):
        with patch("envready.runtime.locate_interpreter", return_value=PYTHON), \
                patch("envready.runtime.read_version_output", return_value="Python 3.11.7"):
            result = check_python_runtime(config)

        assert result.status == CheckStatus.PASS
        assert "3.11.7" in result.detail

    def test_python2_fails(self, config):
        with patch("envready.runtime.locate_interpreter", return_value=PYTHON), \
                patch("envready.runtime.read_version_output", return_value="Python 2.7.18"):
            result = check_python_runtime(config)

        assert result.status == CheckStatus.FAIL
        assert "2.7.18" in result.detail
        assert result.hint

    def test_unparseable_output_echoed(self, config):
        with patch("envready.runtime.locate_interpreter", return_value=PYTHON), \
                patch("envready.runtime.read_version_output", return_value="Python"):
            result = check_python_runtime(config)

        assert result.status == CheckStatus.FAIL
        assert "'Python'" in result.detail

    def test_not_found_has_hint(self, config):
        with patch("envready.runtime.locate_interpreter", return_value=None):
            result = check_python_runtime(config)

        assert result.status == CheckStatus.FAIL
        assert "python.org" in result.hint

    def test_interpreter_crash_is_failure(self, config):
        with patch("envready.runtime.locate_interpreter", return_value=PYTHON), \
                patch("envready.runtime.read_version_output",
                      side_effect=subprocess.TimeoutExpired(cmd="python", timeout=30)):
            result = check_python_runtime(config)

        assert result.status == CheckStatus.FAIL


class TestVenvCheck:
    """Test check_venv_capability() outcomes."""

    def test_skipped_without_interpreter(self, config):
        with patch("envready.runtime.locate_interpreter", return_value=None), \
                patch("envready.runtime.venv_available") as mock_venv:
            result = check_venv_capability(config)

        assert result.status == CheckStatus.SKIP
        assert not result.blocks_readiness
        mock_venv.assert_not_called()

    def test_passes_when_module_runs(self, config):
        with patch("envready.runtime.locate_interpreter", return_value=PYTHON), \
                patch("envready.runtime.venv_available", return_value=True):
            result = check_venv_capability(config)

        assert result.status == CheckStatus.PASS

    def test_fails_when_module_missing(self, config):
        with patch("envready.runtime.locate_interpreter", return_value=PYTHON), \
                patch("envready.runtime.venv_available", return_value=False):
            result = check_venv_capability(config)

        assert result.status == CheckStatus.FAIL
        assert result.blocks_readiness
