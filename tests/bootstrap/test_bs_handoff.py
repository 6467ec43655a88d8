import subprocess
from pathlib import Path

import pytest

from bootstrap.bs_handoff import build_handoff_command, hand_off
from bootstrap.config_models import AppSettings, HandoffSettings
from bootstrap.errors import BootstrapError, ErrorKind
from common.orchestrator import StepStatus


def test_forwards_arguments_verbatim(context, recorder):
    context.args = ["foo", "--bar"]

    assert hand_off(context) is StepStatus.COMPLETED
    assert recorder.handoffs() == [["foo", "--bar"]]


def test_substitutes_setup_when_no_arguments(context, recorder):
    hand_off(context)

    assert recorder.handoffs() == [["setup"]]


def test_runs_inside_app_directory_and_restores_cwd(context, recorder):
    before = Path.cwd()

    hand_off(context)

    app_dir = context.project_root / "classic" / "original_autogpt"
    assert recorder.cwds == [app_dir.resolve()]
    assert Path.cwd() == before


def test_restores_cwd_when_downstream_fails(context, recorder):
    before = Path.cwd()
    recorder.fail_on = lambda command: "autogpt" in command

    with pytest.raises(subprocess.CalledProcessError):
        hand_off(context)

    assert Path.cwd() == before


def test_missing_app_directory_is_fatal(context, recorder):
    context.settings = AppSettings(
        handoff=HandoffSettings(app_dir="does/not/exist")
    )

    with pytest.raises(BootstrapError) as excinfo:
        hand_off(context)

    assert excinfo.value.kind is ErrorKind.MISSING_PREREQUISITE
    assert recorder.calls == []


def test_entrypoint_placeholder_uses_active_interpreter(context):
    context.venv_dir.mkdir()
    context.activate(context.venv_dir)
    context.args = ["run"]
    context.settings = AppSettings(
        handoff=HandoffSettings(entrypoint=["{python}", "-m", "poetry", "run", "autogpt"])
    )

    assert build_handoff_command(context) == [
        str(context.venv_python),
        "-m",
        "poetry",
        "run",
        "autogpt",
        "run",
    ]
