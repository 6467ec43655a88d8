# bootstrap/context.py
# -*- coding: utf-8 -*-
"""
Explicit state threaded through every bootstrap step.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from bootstrap.config_models import AppSettings


def venv_bin_dir(venv_dir: Path) -> Path:
    return venv_dir / ("Scripts" if os.name == "nt" else "bin")


def venv_python_path(venv_dir: Path) -> Path:
    return venv_bin_dir(venv_dir) / (
        "python.exe" if os.name == "nt" else "python"
    )


@dataclass
class BootstrapContext:
    """
    Run state for one sequencer invocation.

    Environment activation is recorded here instead of in the process
    environment: ``env`` is what child processes receive.
    """

    settings: AppSettings
    project_root: Path
    args: List[str] = field(default_factory=list)
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("bootstrap")
    )
    interpreter: Optional[str] = None
    venv_python: Optional[Path] = None
    env: Dict[str, str] = field(default_factory=lambda: dict(os.environ))

    @property
    def symbols(self) -> Dict[str, str]:
        return self.settings.symbols

    @property
    def venv_dir(self) -> Path:
        return self.project_root / self.settings.venv_dir

    @property
    def activated(self) -> bool:
        return self.venv_python is not None

    @property
    def python(self) -> str:
        """Interpreter used for pip, pre-commit and the handoff."""
        if self.venv_python is not None:
            return str(self.venv_python)
        if self.interpreter:
            return self.interpreter
        return sys.executable

    def path(self, relative: str) -> Path:
        return self.project_root / relative

    def activate(self, venv_dir: Path) -> None:
        """Mark ``venv_dir`` as the active environment for the rest of the run."""
        bin_dir = venv_bin_dir(venv_dir)
        self.venv_python = venv_python_path(venv_dir)
        self.env["VIRTUAL_ENV"] = str(venv_dir)
        existing_path = self.env.get("PATH", "")
        self.env["PATH"] = (
            f"{bin_dir}{os.pathsep}{existing_path}"
            if existing_path
            else str(bin_dir)
        )
        self.env.pop("PYTHONHOME", None)
