import functools
import importlib
import importlib.resources
import os
import pathlib
import subprocess
from typing import Optional

import typer
from pydantic import BaseModel

from cfsubmit import utils
from cfsubmit.console import console

app = typer.Typer(no_args_is_help=True)

_CONFIG_FILE_NAME = 'default_config.json'


class AutomationConfig(BaseModel):
    enabled: bool = True
    # Forces a strategy by key instead of detecting one.
    strategy: Optional[str] = None
    # Seconds to wait for the submission page to load before typing.
    startupDelay: float = 2.5
    # How many times focus is advanced from the editor to the submit button.
    focusAdvances: int = 2


class Config(BaseModel):
    showToastMessages: bool = True
    editor: Optional[str] = None
    automation: AutomationConfig = AutomationConfig()


def get_app_path() -> pathlib.Path:
    return utils.get_app_path()


def get_default_config_path() -> pathlib.Path:
    with importlib.resources.as_file(
        importlib.resources.files('cfsubmit') / 'resources' / _CONFIG_FILE_NAME
    ) as file:
        return file


def get_default_config() -> Config:
    return Config.model_validate_json(get_default_config_path().read_text())


def get_config_path() -> pathlib.Path:
    return get_app_path() / 'config.json'


def get_editor():
    return get_config().editor or os.environ.get('EDITOR', None)


def open_editor(path: pathlib.Path, *args):
    editor = get_editor()
    if editor is None:
        raise Exception('No editor found. Please set the EDITOR environment variable.')
    subprocess.run([editor, str(path), *[str(arg) for arg in args]])


@functools.cache
def get_config() -> Config:
    config_path = get_config_path()
    if not config_path.is_file():
        utils.create_and_write(config_path, utils.model_json(get_default_config()))
    return Config.model_validate_json(config_path.read_text())


def save_config(cfg: Config):
    cfg_path = get_config_path()
    utils.create_and_write(cfg_path, utils.model_json(cfg))
    get_config.cache_clear()


@app.command()
def path():
    """
    Show the absolute path of the config file.
    """
    get_config()  # Ensure config is created.
    console.print(get_config_path())


@app.command('list, ls')
def list():
    """
    Pretty print the config file.
    """
    console.print_json(utils.model_json(get_config()))


@app.command()
def reset():
    """
    Reset the config file to the default one.
    """
    if not typer.confirm('Do you really want to reset your config to the default one?'):
        return
    cfg_path = get_config_path()
    cfg_path.unlink(missing_ok=True)
    get_config()  # Reset the config.


@app.command('edit, e')
def edit():
    """
    Open the config in an editor.
    """
    get_config()  # Ensure config is created.
    open_editor(get_config_path())


@app.command('toasts')
def toasts(
    enabled: bool = typer.Argument(..., help='Whether toast messages are shown.'),
):
    """
    Enable or disable toast messages after a submission.
    """
    cfg = get_config().model_copy(deep=True)
    cfg.showToastMessages = enabled
    save_config(cfg)
    state = '[success]enabled[/success]' if enabled else '[warning]disabled[/warning]'
    console.print(f'Toast messages are now {state}.')
