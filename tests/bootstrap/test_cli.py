from pytest_mock import MockerFixture

from bootstrap import cli
from bootstrap.config_models import AppSettings
from bootstrap.errors import BootstrapError, ErrorKind


def test_main_forwards_arguments(mocker: MockerFixture):
    settings = AppSettings(log_level="DEBUG", log_format="json")
    mocker.patch.object(cli, "load_app_settings", return_value=settings)
    mock_setup_logging = mocker.patch.object(cli, "setup_logging")
    mock_run = mocker.patch.object(cli, "run_bootstrap", return_value=0)

    assert cli.main(["foo", "--bar"]) == 0

    mock_setup_logging.assert_called_once_with(
        log_level="DEBUG",
        log_file=None,
        log_format="json",
        log_prefix=settings.log_prefix,
        symbols=settings.symbols,
    )
    mock_run.assert_called_once_with(
        ["foo", "--bar"], app_settings=settings, logger=cli.logger
    )


def test_main_reads_sys_argv(mocker: MockerFixture):
    mocker.patch.object(cli, "load_app_settings", return_value=AppSettings())
    mocker.patch.object(cli, "setup_logging")
    mock_run = mocker.patch.object(cli, "run_bootstrap", return_value=1)
    mocker.patch.object(cli.sys, "argv", ["run.py", "setup"])

    assert cli.main() == 1
    assert mock_run.call_args.args[0] == ["setup"]


def test_main_configuration_error_exits_non_zero(mocker: MockerFixture):
    mocker.patch.object(
        cli,
        "load_app_settings",
        side_effect=BootstrapError(ErrorKind.CONFIGURATION, "bad yaml"),
    )
    mocker.patch.object(cli, "setup_logging")
    mock_run = mocker.patch.object(cli, "run_bootstrap")
    mock_error = mocker.patch.object(cli.logger, "error")

    assert cli.main([]) == 1
    mock_run.assert_not_called()
    assert "CONFIGURATION" in mock_error.call_args.args[0]
