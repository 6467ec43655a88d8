# bootstrap/bs_tooling.py
# -*- coding: utf-8 -*-
"""
Optional developer tooling: Node.js dependencies and pre-commit hooks.

Each step is skipped silently when its config file is absent.
"""

from bootstrap.context import BootstrapContext
from bootstrap.errors import BootstrapError, ErrorKind
from common.command_utils import command_exists, log_bootstrap, run_command
from common.file_utils import ArtifactState, artifact_state
from common.orchestrator import StepStatus


def install_node_dependencies(context: BootstrapContext) -> StepStatus:
    """Run ``npm ci`` when the project has a package.json."""
    settings = context.settings
    if (
        not settings.install_node_dependencies
        or artifact_state(context.path(settings.node_manifest))
        is ArtifactState.ABSENT
    ):
        return StepStatus.SKIPPED

    if not command_exists("npm"):
        raise BootstrapError(
            ErrorKind.MISSING_PREREQUISITE,
            f"{settings.node_manifest} is present but npm was not found on PATH.",
        )

    log_bootstrap(
        f"{context.symbols.get('package', '📦')} Installing Node.js dependencies...",
        "info",
        context.logger,
        settings,
    )
    run_command(
        ["npm", "ci"],
        settings,
        current_logger=context.logger,
        cwd=context.project_root,
        env=context.env,
    )
    return StepStatus.COMPLETED


def setup_precommit(context: BootstrapContext) -> StepStatus:
    """Install pre-commit into the environment and register its git hooks."""
    settings = context.settings
    if (
        not settings.setup_precommit
        or artifact_state(context.path(settings.precommit_config))
        is ArtifactState.ABSENT
    ):
        return StepStatus.SKIPPED

    log_bootstrap(
        f"{context.symbols.get('gear', '⚙️')} Setting up pre-commit hooks...",
        "info",
        context.logger,
        settings,
    )
    run_command(
        [context.python, "-m", "pip", "install", "pre-commit"],
        settings,
        current_logger=context.logger,
        cwd=context.project_root,
        env=context.env,
    )
    run_command(
        [context.python, "-m", "pre_commit", "install"],
        settings,
        current_logger=context.logger,
        cwd=context.project_root,
        env=context.env,
    )
    return StepStatus.COMPLETED
