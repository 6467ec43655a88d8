# bootstrap/orchestrator.py
# -*- coding: utf-8 -*-
"""
The bootstrap sequencer.

A working directory is either Fresh (no isolated environment yet) or Ready.
A Fresh directory is provisioned (interpreter check, environment, dependencies,
optional submodule sync, config file, optional tooling) and then handed off to
the downstream application. A Ready directory goes straight to the handoff,
unless the first argument is ``setup``: then provisioning runs again and the
process exits without handing off.

Every step probes its artifact before creating it, so repeated runs never
recreate the environment or overwrite the config file.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from bootstrap.bs_dependencies import (
    install_dependencies,
    install_dev_dependencies,
    install_editable_project,
)
from bootstrap.bs_env_file import materialize_env_file
from bootstrap.bs_handoff import hand_off
from bootstrap.bs_interpreter import ensure_interpreter
from bootstrap.bs_submodules import sync_submodules
from bootstrap.bs_tooling import install_node_dependencies, setup_precommit
from bootstrap.bs_venv import activate_environment, provision_environment
from bootstrap.config_models import SETUP_ARGUMENT, AppSettings
from bootstrap.context import BootstrapContext
from common.command_utils import log_bootstrap
from common.file_utils import ArtifactState, artifact_state
from common.orchestrator import Orchestrator, RunReport

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

module_logger = logging.getLogger(__name__)


def build_provisioning_orchestrator(
    context: BootstrapContext,
) -> Orchestrator:
    """Queue the provisioning steps in their fixed order."""
    settings = context.settings
    orchestrator = Orchestrator(context, context.logger, context.symbols)

    orchestrator.add_task("Interpreter check", ensure_interpreter)
    orchestrator.add_task("Environment provisioning", provision_environment)
    orchestrator.add_task("Dependency installation", install_dependencies)
    orchestrator.add_task(
        "Development dependency installation", install_dev_dependencies
    )
    if settings.sync_submodules:
        orchestrator.add_task("Version-control sync", sync_submodules)
    orchestrator.add_task(
        "Configuration materialization", materialize_env_file
    )
    orchestrator.add_task(
        "Node.js dependency installation", install_node_dependencies
    )
    orchestrator.add_task("Pre-commit setup", setup_precommit)
    orchestrator.add_task("Editable project install", install_editable_project)
    return orchestrator


def build_handoff_orchestrator(context: BootstrapContext) -> Orchestrator:
    orchestrator = Orchestrator(context, context.logger, context.symbols)
    if not context.activated:
        orchestrator.add_task("Environment activation", activate_environment)
    orchestrator.add_task("Handoff", hand_off)
    return orchestrator


def is_setup_request(args: Sequence[str]) -> bool:
    return bool(args) and args[0] == SETUP_ARGUMENT


def _log_closing_hints(context: BootstrapContext) -> None:
    symbols = context.symbols
    for message in (
        f"{symbols.get('sparkles', '✨')} Repository setup completed successfully!",
        f"{symbols.get('info', 'ℹ️')} To get started, check the README.md file",
        f"{symbols.get('info', 'ℹ️')} For issues, please visit {context.settings.issues_url}",
    ):
        log_bootstrap(message, "info", context.logger, context.settings)


def run_bootstrap(
    args: Sequence[str],
    app_settings: Optional[AppSettings] = None,
    project_root: Optional[Path] = None,
    logger: Optional[logging.Logger] = None,
) -> int:
    """
    Bring the project directory to a runnable state and hand off to the
    downstream application.

    Args:
        args: Arguments forwarded verbatim to the downstream application.
            ``["setup", ...]`` provisions only.
        app_settings: Resolved settings. Defaults to model defaults plus
            environment variables.
        project_root: Directory to bootstrap. Defaults to the settings'
            ``project_root`` or the current working directory.
        logger: Logger for the whole run.

    Returns:
        0 on success, 1 on the first fatal error.
    """
    settings = app_settings or AppSettings()
    root = Path(project_root or settings.project_root or Path.cwd()).resolve()
    context = BootstrapContext(
        settings=settings,
        project_root=root,
        args=list(args),
        logger=logger or module_logger,
    )
    symbols = context.symbols

    setup_requested = is_setup_request(context.args)
    fresh = artifact_state(context.venv_dir) is ArtifactState.ABSENT

    if fresh or setup_requested:
        log_bootstrap(
            f"{symbols.get('info', 'ℹ️')} Starting repository initialization in {root}...",
            "info",
            context.logger,
            settings,
        )
        report = build_provisioning_orchestrator(context).run()
        if not report.succeeded:
            return _failure(report, context)
        _log_closing_hints(context)

        if setup_requested:
            return EXIT_SUCCESS

    if not settings.handoff.enabled:
        log_bootstrap(
            f"{symbols.get('info', 'ℹ️')} Handoff disabled; nothing left to do.",
            "info",
            context.logger,
            settings,
        )
        return EXIT_SUCCESS

    report = build_handoff_orchestrator(context).run()
    if not report.succeeded:
        return _failure(report, context)
    return EXIT_SUCCESS


def _failure(report: RunReport, context: BootstrapContext) -> int:
    error = report.error
    log_bootstrap(
        f"{context.symbols.get('critical', '🔥')} Bootstrap aborted: {error}",
        "critical",
        context.logger,
        context.settings,
    )
    return EXIT_FAILURE
