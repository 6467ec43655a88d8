# bootstrap/bs_submodules.py
# -*- coding: utf-8 -*-
"""
Initializes git submodules on first run and updates them afterwards.
"""

from bootstrap.context import BootstrapContext
from bootstrap.errors import BootstrapError, ErrorKind
from common.command_utils import command_exists, log_bootstrap, run_command
from common.file_utils import ArtifactState, artifact_state
from common.orchestrator import StepStatus


def sync_submodules(context: BootstrapContext) -> StepStatus:
    """
    Run ``git submodule update --recursive``, adding ``--init`` while the
    submodule marker is absent.
    """
    settings = context.settings
    symbols = context.symbols

    if not command_exists("git"):
        raise BootstrapError(
            ErrorKind.MISSING_PREREQUISITE,
            "git is required to sync submodules but was not found on PATH.",
        )

    marker = context.path(settings.submodule_marker)
    if artifact_state(marker) is ArtifactState.ABSENT:
        log_bootstrap(
            f"{symbols.get('info', 'ℹ️')} Initializing Git submodules...",
            "info",
            context.logger,
            settings,
        )
        command = ["git", "submodule", "update", "--init", "--recursive"]
    else:
        log_bootstrap(
            f"{symbols.get('info', 'ℹ️')} Git submodules already initialized. Updating...",
            "info",
            context.logger,
            settings,
        )
        command = ["git", "submodule", "update", "--recursive"]

    run_command(
        command,
        settings,
        current_logger=context.logger,
        cwd=context.project_root,
        env=context.env,
    )
    return StepStatus.COMPLETED
