# bootstrap/bs_venv.py
# -*- coding: utf-8 -*-
"""
Creates the isolated environment on first run and activates it.
"""

from bootstrap.context import BootstrapContext
from bootstrap.errors import BootstrapError, ErrorKind
from common.command_utils import log_bootstrap, run_command
from common.file_utils import ArtifactState, artifact_state
from common.orchestrator import StepStatus


def provision_environment(context: BootstrapContext) -> StepStatus:
    """
    Create ``venv_dir`` if it is absent, then activate it.

    An existing directory is never recreated.
    """
    symbols = context.symbols
    venv_dir = context.venv_dir

    if artifact_state(venv_dir) is ArtifactState.PRESENT:
        log_bootstrap(
            f"{symbols.get('info', 'ℹ️')} Virtual environment already exists at {venv_dir}.",
            "info",
            context.logger,
            context.settings,
        )
        context.activate(venv_dir)
        return StepStatus.SKIPPED

    log_bootstrap(
        f"{symbols.get('package', '📦')} Creating Python virtual environment in {venv_dir}...",
        "info",
        context.logger,
        context.settings,
    )
    run_command(
        [context.python, "-m", "venv", str(venv_dir)],
        context.settings,
        current_logger=context.logger,
        cwd=context.project_root,
        env=context.env,
    )
    context.activate(venv_dir)
    return StepStatus.COMPLETED


def activate_environment(context: BootstrapContext) -> StepStatus:
    """
    Activate an environment created by an earlier run.

    Raises:
        BootstrapError: ``venv_dir`` does not exist.
    """
    venv_dir = context.venv_dir
    if artifact_state(venv_dir) is ArtifactState.ABSENT:
        raise BootstrapError(
            ErrorKind.MISSING_PREREQUISITE,
            f"Virtual environment {venv_dir} does not exist. Run with 'setup' first.",
        )
    context.activate(venv_dir)
    log_bootstrap(
        f"{context.symbols.get('info', 'ℹ️')} Activated virtual environment {venv_dir}.",
        "debug",
        context.logger,
        context.settings,
    )
    return StepStatus.COMPLETED
