# -*- coding: utf-8 -*-
"""
Tests for the config_loader module.
"""

import pytest

from bootstrap.config_loader import _deep_update, load_app_settings
from bootstrap.config_models import (
    HANDOFF_ENTRYPOINT_DEFAULT,
    AppSettings,
)
from bootstrap.errors import BootstrapError, ErrorKind


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        "BOOTSTRAP_CONFIG_FILE",
        "BOOTSTRAP_PROJECT_ROOT",
        "BOOTSTRAP_SYNC_SUBMODULES",
        "BOOTSTRAP_VENV_DIR",
        "BOOTSTRAP_HANDOFF_APP_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_config_file(tmp_path, mock_logger):
    settings = load_app_settings(
        project_root=tmp_path, current_logger=mock_logger
    )

    assert settings.venv_dir == ".venv"
    assert settings.requirements_file == "requirements.txt"
    assert settings.sync_submodules is False
    assert settings.missing_template_fatal is False
    assert settings.handoff.enabled is True
    assert settings.handoff.entrypoint == HANDOFF_ENTRYPOINT_DEFAULT
    assert settings.handoff.default_arguments == ["setup"]


def test_environment_variables_override_defaults(
    tmp_path, monkeypatch, mock_logger
):
    monkeypatch.setenv("BOOTSTRAP_SYNC_SUBMODULES", "true")
    monkeypatch.setenv("BOOTSTRAP_HANDOFF_APP_DIR", "autogpts/autogpt")

    settings = load_app_settings(
        project_root=tmp_path, current_logger=mock_logger
    )

    assert settings.sync_submodules is True
    assert settings.handoff.app_dir == "autogpts/autogpt"


def test_yaml_file_overrides_environment(tmp_path, monkeypatch, mock_logger):
    monkeypatch.setenv("BOOTSTRAP_VENV_DIR", "env-from-environment")
    (tmp_path / "bootstrap.yaml").write_text(
        "venv_dir: env-from-yaml\n"
        "missing_template_fatal: true\n"
        "handoff:\n"
        "  enabled: false\n",
        encoding="utf-8",
    )

    settings = load_app_settings(
        project_root=tmp_path, current_logger=mock_logger
    )

    assert settings.venv_dir == "env-from-yaml"
    assert settings.missing_template_fatal is True
    assert settings.handoff.enabled is False
    # Untouched nested keys keep their defaults.
    assert settings.handoff.default_arguments == ["setup"]
    mock_logger.info.assert_called_once_with(
        f"Loaded configuration from {tmp_path / 'bootstrap.yaml'}"
    )


def test_config_file_from_environment_variable(
    tmp_path, monkeypatch, mock_logger
):
    config = tmp_path / "devcontainer.yaml"
    config.write_text("sync_submodules: true\n", encoding="utf-8")
    monkeypatch.setenv("BOOTSTRAP_CONFIG_FILE", str(config))

    settings = load_app_settings(current_logger=mock_logger)

    assert settings.sync_submodules is True


def test_non_mapping_yaml_is_ignored(tmp_path, mock_logger):
    (tmp_path / "bootstrap.yaml").write_text("- a\n- b\n", encoding="utf-8")

    settings = load_app_settings(
        project_root=tmp_path, current_logger=mock_logger
    )

    assert settings == AppSettings()
    mock_logger.warning.assert_called_once()


def test_invalid_yaml_raises_configuration_error(tmp_path, mock_logger):
    (tmp_path / "bootstrap.yaml").write_text("venv_dir: [unclosed\n")

    with pytest.raises(BootstrapError) as excinfo:
        load_app_settings(project_root=tmp_path, current_logger=mock_logger)

    assert excinfo.value.kind is ErrorKind.CONFIGURATION


def test_invalid_values_raise_configuration_error(tmp_path, mock_logger):
    (tmp_path / "bootstrap.yaml").write_text(
        "min_python_version: three\n", encoding="utf-8"
    )

    with pytest.raises(BootstrapError) as excinfo:
        load_app_settings(project_root=tmp_path, current_logger=mock_logger)

    assert excinfo.value.kind is ErrorKind.CONFIGURATION
    assert "min_python_version" in excinfo.value.message


def test_deep_update_merges_nested_dicts():
    source = {"handoff": {"enabled": True, "app_dir": "a"}, "venv_dir": ".venv"}

    result = _deep_update(
        source, {"handoff": {"app_dir": "b"}, "venv_dir": None, "new": None}
    )

    assert result == {
        "handoff": {"enabled": True, "app_dir": "b"},
        "venv_dir": ".venv",
        "new": None,
    }
