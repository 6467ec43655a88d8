# bootstrap/bs_interpreter.py
# -*- coding: utf-8 -*-
"""
Ensures a Python interpreter is available on PATH and warns when it is
older than the recommended version.
"""

from typing import Optional, Tuple

from bootstrap.context import BootstrapContext
from bootstrap.errors import BootstrapError, ErrorKind
from common.command_utils import log_bootstrap, resolve_executable, run_command
from common.orchestrator import StepStatus

VERSION_QUERY = "import sys; print('%d.%d' % sys.version_info[:2])"


def parse_version(version: str) -> Tuple[int, int]:
    """Parse ``major.minor`` (extra components are ignored)."""
    parts = version.strip().split(".")
    try:
        return int(parts[0]), int(parts[1]) if len(parts) > 1 else 0
    except ValueError:
        raise ValueError(f"Not a major.minor version: '{version}'") from None


def find_interpreter(context: BootstrapContext) -> Optional[str]:
    search_path = context.env.get("PATH")
    for candidate in context.settings.python_candidates:
        resolved = resolve_executable(candidate, path=search_path)
        if resolved:
            return resolved
    return None


def query_interpreter_version(
    interpreter: str, context: BootstrapContext
) -> Tuple[int, int]:
    result = run_command(
        [interpreter, "-c", VERSION_QUERY],
        context.settings,
        capture_output=True,
        current_logger=context.logger,
        env=context.env,
    )
    try:
        return parse_version(result.stdout)
    except ValueError as e:
        raise BootstrapError(
            ErrorKind.PROCESS_FAILURE,
            f"Could not determine the version of {interpreter}: {e}",
        ) from e


def ensure_interpreter(context: BootstrapContext) -> StepStatus:
    """
    Resolve the interpreter used to create the isolated environment.

    Raises:
        BootstrapError: No candidate interpreter is on PATH.
    """
    symbols = context.symbols
    settings = context.settings

    interpreter = find_interpreter(context)
    if interpreter is None:
        raise BootstrapError(
            ErrorKind.MISSING_PREREQUISITE,
            "No Python interpreter found on PATH (looked for: "
            f"{', '.join(settings.python_candidates)}). Please install Python "
            f"{settings.min_python_version} or newer.",
        )
    context.interpreter = interpreter

    found = query_interpreter_version(interpreter, context)
    wanted = parse_version(settings.min_python_version)
    if found < wanted:
        log_bootstrap(
            f"{symbols.get('warning', '⚠️')} {interpreter} is Python {found[0]}.{found[1]}; "
            f"{settings.min_python_version} or newer is recommended.",
            "warning",
            context.logger,
            settings,
        )
        return StepStatus.WARNED

    log_bootstrap(
        f"{symbols.get('info', 'ℹ️')} Using {interpreter} (Python {found[0]}.{found[1]}).",
        "info",
        context.logger,
        settings,
    )
    return StepStatus.COMPLETED
