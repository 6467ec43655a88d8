import logging
import subprocess
from pathlib import Path
from typing import Callable, List, Optional
from unittest.mock import MagicMock

import pytest

from bootstrap.config_models import AppSettings
from bootstrap.context import BootstrapContext


class CommandRecorder:
    """
    Stands in for ``run_command`` in step modules.

    Records every command with the working directory it ran from, creates
    the environment directory for ``-m venv`` and reports Python 3.11 for
    version queries.
    """

    def __init__(self):
        self.calls: List[List[str]] = []
        self.cwds: List[Path] = []
        self.fail_on: Optional[Callable[[List[str]], bool]] = None
        self.python_version = "3.11"

    def __call__(
        self,
        command,
        app_settings,
        check=True,
        capture_output=False,
        cmd_input=None,
        current_logger=None,
        cwd=None,
        env=None,
    ):
        command = [str(part) for part in command]
        self.calls.append(command)
        self.cwds.append(Path.cwd())
        if self.fail_on and self.fail_on(command):
            raise subprocess.CalledProcessError(2, command)
        if command[1:3] == ["-m", "venv"]:
            Path(command[3]).mkdir(parents=True)
        stdout = f"{self.python_version}\n" if "-c" in command else ""
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr="")

    def matching(self, *fragment: str) -> List[List[str]]:
        """Commands containing ``fragment`` as a contiguous run of arguments."""
        size = len(fragment)
        return [
            call
            for call in self.calls
            if any(
                tuple(call[i : i + size]) == fragment
                for i in range(len(call) - size + 1)
            )
        ]

    def handoffs(self) -> List[List[str]]:
        return [call[3:] for call in self.matching("-m", "autogpt")]


STEP_MODULES = [
    "bootstrap.bs_interpreter",
    "bootstrap.bs_venv",
    "bootstrap.bs_dependencies",
    "bootstrap.bs_submodules",
    "bootstrap.bs_tooling",
    "bootstrap.bs_handoff",
]


@pytest.fixture
def recorder(mocker):
    """Patch run_command and PATH lookups in every step module."""
    commands = CommandRecorder()
    for module in STEP_MODULES:
        mocker.patch(f"{module}.run_command", side_effect=commands)
    mocker.patch(
        "bootstrap.bs_interpreter.resolve_executable",
        return_value="/usr/bin/python3",
    )
    mocker.patch("bootstrap.bs_submodules.command_exists", return_value=True)
    mocker.patch("bootstrap.bs_tooling.command_exists", return_value=True)
    return commands


@pytest.fixture
def app_settings():
    return AppSettings()


@pytest.fixture
def mock_logger():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def project(tmp_path):
    """A checkout with a manifest, a config template and the app directory."""
    (tmp_path / "requirements.txt").write_text("pydantic\n", encoding="utf-8")
    (tmp_path / ".env.template").write_bytes(
        b"OPENAI_API_KEY=your-openai-api-key\n# comment\r\nTZ=UTC\n"
    )
    (tmp_path / "classic" / "original_autogpt").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def context(project, app_settings, mock_logger):
    return BootstrapContext(
        settings=app_settings,
        project_root=project,
        logger=mock_logger,
    )
