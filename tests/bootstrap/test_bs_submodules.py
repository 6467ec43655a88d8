import pytest

from bootstrap.bs_submodules import sync_submodules
from bootstrap.errors import BootstrapError, ErrorKind
from common.orchestrator import StepStatus


def test_initializes_when_marker_is_absent(context, recorder):
    assert sync_submodules(context) is StepStatus.COMPLETED
    assert recorder.calls == [
        ["git", "submodule", "update", "--init", "--recursive"]
    ]


def test_updates_when_marker_is_present(context, recorder):
    marker = context.project_root / context.settings.submodule_marker
    marker.mkdir(parents=True)

    assert sync_submodules(context) is StepStatus.COMPLETED
    assert recorder.calls == [["git", "submodule", "update", "--recursive"]]


def test_missing_git_is_fatal(context, recorder, mocker):
    mocker.patch("bootstrap.bs_submodules.command_exists", return_value=False)

    with pytest.raises(BootstrapError) as excinfo:
        sync_submodules(context)

    assert excinfo.value.kind is ErrorKind.MISSING_PREREQUISITE
    assert recorder.calls == []
