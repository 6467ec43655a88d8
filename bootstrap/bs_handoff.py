# bootstrap/bs_handoff.py
# -*- coding: utf-8 -*-
"""
Hands control to the downstream application with the forwarded arguments.
"""

from typing import List

from bootstrap.context import BootstrapContext
from bootstrap.errors import BootstrapError, ErrorKind
from common.command_utils import log_bootstrap, run_command
from common.file_utils import working_directory
from common.orchestrator import StepStatus


def forwarded_arguments(context: BootstrapContext) -> List[str]:
    """The caller's arguments verbatim, or the default arguments when there are none."""
    if context.args:
        return list(context.args)
    return list(context.settings.handoff.default_arguments)


def build_handoff_command(context: BootstrapContext) -> List[str]:
    entrypoint = [
        part.replace("{python}", context.python)
        for part in context.settings.handoff.entrypoint
    ]
    return entrypoint + forwarded_arguments(context)


def hand_off(context: BootstrapContext) -> StepStatus:
    """
    Run the downstream entry point from inside its own directory.

    The previous working directory is restored afterwards, whether or not
    the downstream program succeeded.

    Raises:
        BootstrapError: The application directory does not exist.
        subprocess.CalledProcessError: The downstream program exited non-zero.
    """
    settings = context.settings
    app_dir = context.path(settings.handoff.app_dir)
    if not app_dir.is_dir():
        raise BootstrapError(
            ErrorKind.MISSING_PREREQUISITE,
            f"Application directory {app_dir} does not exist.",
        )

    command = build_handoff_command(context)
    log_bootstrap(
        f"{context.symbols.get('rocket', '🚀')} Starting {settings.handoff.app_dir} with arguments: {forwarded_arguments(context)}",
        "info",
        context.logger,
        settings,
    )
    with working_directory(app_dir):
        run_command(
            command,
            settings,
            current_logger=context.logger,
            env=context.env,
        )
    return StepStatus.COMPLETED
