# bootstrap/bs_dependencies.py
# -*- coding: utf-8 -*-
"""
Installs Python dependencies into the active environment.
"""

from typing import List

from bootstrap.context import BootstrapContext
from bootstrap.errors import BootstrapError, ErrorKind
from common.command_utils import log_bootstrap, run_command
from common.file_utils import ArtifactState, artifact_state
from common.orchestrator import StepStatus


def _pip(context: BootstrapContext, *arguments: str) -> List[str]:
    command = [context.python, "-m", "pip", "install"]
    if context.settings.pip_no_cache:
        command.append("--no-cache-dir")
    command.extend(arguments)
    return command


def _run_pip(context: BootstrapContext, *arguments: str) -> None:
    run_command(
        _pip(context, *arguments),
        context.settings,
        current_logger=context.logger,
        cwd=context.project_root,
        env=context.env,
    )


def install_dependencies(context: BootstrapContext) -> StepStatus:
    """
    Upgrade pip, then install the dependency manifest.

    Raises:
        BootstrapError: The manifest does not exist.
        subprocess.CalledProcessError: pip exited non-zero.
    """
    settings = context.settings
    symbols = context.symbols
    manifest = context.path(settings.requirements_file)

    if artifact_state(manifest) is ArtifactState.ABSENT:
        raise BootstrapError(
            ErrorKind.MISSING_PREREQUISITE,
            f"Dependency manifest {manifest} not found.",
        )

    log_bootstrap(
        f"{symbols.get('package', '📦')} Installing Python dependencies from {manifest.name}...",
        "info",
        context.logger,
        settings,
    )
    if settings.upgrade_pip:
        _run_pip(context, "--upgrade", "pip")
    _run_pip(context, "-r", str(manifest))
    return StepStatus.COMPLETED


def install_dev_dependencies(context: BootstrapContext) -> StepStatus:
    """Install the dev manifest if present."""
    settings = context.settings
    manifest = context.path(settings.dev_requirements_file)

    if (
        not settings.install_dev_requirements
        or artifact_state(manifest) is ArtifactState.ABSENT
    ):
        return StepStatus.SKIPPED

    log_bootstrap(
        f"{context.symbols.get('package', '📦')} Installing development dependencies from {manifest.name}...",
        "info",
        context.logger,
        settings,
    )
    _run_pip(context, "-r", str(manifest))
    return StepStatus.COMPLETED


def install_editable_project(context: BootstrapContext) -> StepStatus:
    """Install the project itself in development mode when it ships a setup.py."""
    settings = context.settings
    if (
        not settings.install_editable
        or artifact_state(context.path(settings.setup_py))
        is ArtifactState.ABSENT
    ):
        return StepStatus.SKIPPED

    log_bootstrap(
        f"{context.symbols.get('gear', '⚙️')} Running {settings.setup_py} in development mode...",
        "info",
        context.logger,
        settings,
    )
    run_command(
        [context.python, "-m", "pip", "install", "-e", "."],
        settings,
        current_logger=context.logger,
        cwd=context.project_root,
        env=context.env,
    )
    return StepStatus.COMPLETED
