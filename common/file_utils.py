# common/file_utils.py
# -*- coding: utf-8 -*-
"""
File system helpers: artifact probes, guarded copies and scoped
working-directory changes.
"""

import logging
import os
import shutil
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Union

from bootstrap.config_models import AppSettings

from .command_utils import get_symbols, log_bootstrap

module_logger = logging.getLogger(__name__)


class ArtifactState(str, Enum):
    """Whether a filesystem artifact exists."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


def artifact_state(path: Path) -> ArtifactState:
    """Probe a file, directory or marker path."""
    return ArtifactState.PRESENT if path.exists() else ArtifactState.ABSENT


def copy_if_absent(
    source: Path,
    target: Path,
    app_settings: Optional[AppSettings] = None,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Copy ``source`` to ``target`` byte for byte unless ``target`` exists.

    Args:
        source: The file to copy. Must exist.
        target: Destination path. Never overwritten.
        app_settings: Settings providing logging symbols.
        current_logger: Logger to use instead of the module logger.

    Returns:
        True if the file was copied, False if ``target`` was already present.

    Raises:
        FileNotFoundError: ``source`` does not exist.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    if artifact_state(target) is ArtifactState.PRESENT:
        log_bootstrap(
            f"{symbols.get('info', 'ℹ️')} {target} already exists, not overwriting.",
            "debug",
            logger_to_use,
            app_settings,
        )
        return False

    shutil.copyfile(source, target)
    log_bootstrap(
        f"{symbols.get('success', '✅')} Copied {source} to {target}",
        "success",
        logger_to_use,
        app_settings,
    )
    return True


@contextmanager
def working_directory(path: Union[str, Path]) -> Iterator[Path]:
    """
    Change the process working directory for the duration of the block.

    The previous directory is restored on exit, including when the block raises.
    """
    previous = Path.cwd()
    os.chdir(path)
    try:
        yield Path(path)
    finally:
        os.chdir(previous)
