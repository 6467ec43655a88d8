# bootstrap/config_models.py
# -*- coding: utf-8 -*-
"""
Pydantic models for the bootstrap configuration.

This module defines the structured settings for the sequencer, including
defaults, type annotations, and descriptions. Values can be overridden
through environment variables (prefix ``BOOTSTRAP_``) or a YAML file, see
``bootstrap.config_loader``.
"""

from pathlib import Path
from typing import Dict, List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Default Static Values (can be overridden by config file/env) ---
VENV_DIR_DEFAULT: str = ".venv"
PYTHON_CANDIDATES_DEFAULT: List[str] = ["python3", "python"]
MIN_PYTHON_VERSION_DEFAULT: str = "3.10"

REQUIREMENTS_FILE_DEFAULT: str = "requirements.txt"
DEV_REQUIREMENTS_FILE_DEFAULT: str = "requirements-dev.txt"

SUBMODULE_MARKER_DEFAULT: str = "classic/forge/tests/vcr_cassettes/.git"
NODE_MANIFEST_DEFAULT: str = "package.json"
PRECOMMIT_CONFIG_DEFAULT: str = ".pre-commit-config.yaml"
SETUP_PY_DEFAULT: str = "setup.py"

ENV_TEMPLATE_DEFAULT: str = ".env.template"
ENV_FILE_DEFAULT: str = ".env"

HANDOFF_APP_DIR_DEFAULT: str = "classic/original_autogpt"
HANDOFF_ENTRYPOINT_DEFAULT: List[str] = ["{python}", "-m", "autogpt"]

# Reserved first argument: provision only, never hand off.
SETUP_ARGUMENT: str = "setup"

LOG_PREFIX_DEFAULT: str = ""
ISSUES_URL_DEFAULT: str = (
    "https://github.com/Significant-Gravitas/AutoGPT/issues"
)

SYMBOLS_DEFAULT: Dict[str, str] = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
    "step": "➡️",
    "gear": "⚙️",
    "package": "📦",
    "rocket": "🚀",
    "sparkles": "✨",
    "critical": "🔥",
    "debug": "🐛",
}


class HandoffSettings(BaseSettings):
    """Settings for handing control over to the downstream application."""

    model_config = SettingsConfigDict(
        env_prefix="BOOTSTRAP_HANDOFF_", extra="ignore"
    )

    enabled: bool = Field(
        default=True,
        description="Run the downstream application after provisioning. "
        "Devcontainer-style initialization turns this off.",
    )
    app_dir: str = Field(
        default=HANDOFF_APP_DIR_DEFAULT,
        description="Directory of the downstream application, relative to the project root.",
    )
    entrypoint: List[str] = Field(
        default_factory=lambda: list(HANDOFF_ENTRYPOINT_DEFAULT),
        description="Command that starts the downstream application. "
        "'{python}' is replaced by the active interpreter.",
    )
    default_arguments: List[str] = Field(
        default_factory=lambda: [SETUP_ARGUMENT],
        description="Arguments forwarded when the sequencer is invoked without any.",
    )


class AppSettings(BaseSettings):
    """Main bootstrap settings."""

    model_config = SettingsConfigDict(env_prefix="BOOTSTRAP_", extra="ignore")

    project_root: Optional[Path] = Field(
        default=None,
        description="Directory to bootstrap. Defaults to the current working directory.",
    )
    venv_dir: str = Field(
        default=VENV_DIR_DEFAULT,
        description="Isolated environment directory, relative to the project root.",
    )
    python_candidates: List[str] = Field(
        default_factory=lambda: list(PYTHON_CANDIDATES_DEFAULT),
        description="Interpreter names looked up on PATH, in order.",
    )
    min_python_version: str = Field(
        default=MIN_PYTHON_VERSION_DEFAULT,
        pattern=r"^\d+\.\d+$",
        description="Recommended minimum interpreter version (major.minor).",
    )

    requirements_file: str = Field(default=REQUIREMENTS_FILE_DEFAULT)
    dev_requirements_file: str = Field(default=DEV_REQUIREMENTS_FILE_DEFAULT)
    install_dev_requirements: bool = Field(
        default=True,
        description="Install the dev manifest when it exists.",
    )
    upgrade_pip: bool = Field(default=True)
    pip_no_cache: bool = Field(
        default=True,
        description="Pass --no-cache-dir to pip to avoid filling up the disk.",
    )

    sync_submodules: bool = Field(
        default=False,
        description="Initialize or update git submodules during provisioning.",
    )
    submodule_marker: str = Field(
        default=SUBMODULE_MARKER_DEFAULT,
        description="Path whose presence means the submodules were already initialized.",
    )

    env_template: str = Field(default=ENV_TEMPLATE_DEFAULT)
    env_file: str = Field(default=ENV_FILE_DEFAULT)
    missing_template_fatal: bool = Field(
        default=False,
        description="Abort when neither the config file nor its template exists.",
    )

    install_node_dependencies: bool = Field(default=True)
    node_manifest: str = Field(default=NODE_MANIFEST_DEFAULT)
    setup_precommit: bool = Field(default=True)
    precommit_config: str = Field(default=PRECOMMIT_CONFIG_DEFAULT)
    install_editable: bool = Field(default=True)
    setup_py: str = Field(default=SETUP_PY_DEFAULT)

    log_level: str = Field(default="INFO")
    log_format: Literal["color", "plain", "json"] = Field(default="color")
    log_file: Optional[str] = Field(default=None)
    log_prefix: str = Field(default=LOG_PREFIX_DEFAULT)
    issues_url: str = Field(default=ISSUES_URL_DEFAULT)

    handoff: HandoffSettings = Field(default_factory=HandoffSettings)

    symbols: Dict[str, str] = Field(
        default_factory=lambda: dict(SYMBOLS_DEFAULT)
    )
