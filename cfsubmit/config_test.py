import json
import pathlib

from typer.testing import CliRunner

from cfsubmit import config
from cfsubmit.submitors import SubmitorSettings

runner = CliRunner()


def test_default_config_is_created(app_path: pathlib.Path):
    cfg = config.get_config()

    assert cfg.showToastMessages
    assert cfg.automation.enabled
    assert cfg.automation.startupDelay == 2.5
    assert (app_path / 'config.json').is_file()


def test_config_is_read_from_file(app_path: pathlib.Path):
    (app_path).mkdir(parents=True)
    (app_path / 'config.json').write_text(
        json.dumps(
            {
                'showToastMessages': False,
                'automation': {'strategy': 'none', 'startupDelay': 4},
            }
        )
    )

    cfg = config.get_config()

    assert not cfg.showToastMessages
    assert cfg.automation.strategy == 'none'
    assert cfg.automation.startupDelay == 4
    assert cfg.automation.focusAdvances == 2


def test_save_config_clears_cache(app_path: pathlib.Path):
    cfg = config.get_config().model_copy(deep=True)
    cfg.showToastMessages = False
    config.save_config(cfg)

    assert not config.get_config().showToastMessages


def test_settings_from_config(app_path: pathlib.Path):
    cfg = config.Config(
        showToastMessages=False,
        automation=config.AutomationConfig(
            strategy='xdotool', startupDelay=1.5, focusAdvances=3
        ),
    )

    settings = SubmitorSettings.from_config(cfg, automation_enabled=False)

    assert not settings.show_toasts
    assert not settings.automation_enabled
    assert settings.forced_strategy == 'xdotool'
    assert settings.automation.startup_delay == 1.5
    assert settings.automation.focus_advances == 3


def test_toasts_command(app_path: pathlib.Path):
    result = runner.invoke(config.app, ['toasts', 'false'])

    assert result.exit_code == 0
    assert not config.get_config().showToastMessages

    result = runner.invoke(config.app, ['toasts', 'true'])

    assert result.exit_code == 0
    assert config.get_config().showToastMessages


def test_path_command(app_path: pathlib.Path):
    result = runner.invoke(config.app, ['path'])

    assert result.exit_code == 0
    assert 'config.json' in result.output
