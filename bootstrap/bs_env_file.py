# bootstrap/bs_env_file.py
# -*- coding: utf-8 -*-
"""
Materializes the runtime configuration file from its checked-in template.
"""

from bootstrap.context import BootstrapContext
from bootstrap.errors import BootstrapError, ErrorKind
from common.command_utils import log_bootstrap
from common.file_utils import ArtifactState, artifact_state, copy_if_absent
from common.orchestrator import StepStatus


def materialize_env_file(context: BootstrapContext) -> StepStatus:
    """
    Copy the template to the config file once; never overwrite it.

    A missing template is a warning unless ``missing_template_fatal`` is set.
    """
    settings = context.settings
    symbols = context.symbols
    target = context.path(settings.env_file)
    template = context.path(settings.env_template)

    if artifact_state(target) is ArtifactState.PRESENT:
        log_bootstrap(
            f"{symbols.get('info', 'ℹ️')} {target.name} already exists, leaving it untouched.",
            "info",
            context.logger,
            settings,
        )
        return StepStatus.SKIPPED

    if artifact_state(template) is ArtifactState.ABSENT:
        message = (
            f"Neither {target.name} nor {template.name} exists in "
            f"{context.project_root}. Create {target.name} manually."
        )
        if settings.missing_template_fatal:
            raise BootstrapError(ErrorKind.MISSING_PREREQUISITE, message)
        log_bootstrap(
            f"{symbols.get('warning', '⚠️')} {message}",
            "warning",
            context.logger,
            settings,
        )
        return StepStatus.WARNED

    log_bootstrap(
        f"{symbols.get('info', 'ℹ️')} Creating {target.name} file from template...",
        "info",
        context.logger,
        settings,
    )
    copy_if_absent(template, target, settings, context.logger)
    log_bootstrap(
        f"{symbols.get('warning', '⚠️')} Please edit the {target.name} file and add your API keys before running AutoGPT",
        "warning",
        context.logger,
        settings,
    )
    return StepStatus.COMPLETED
