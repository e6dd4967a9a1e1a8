import os
import pathlib
import tempfile
from collections.abc import Iterator

import pytest

from cfsubmit import config, testing_utils, utils


@pytest.fixture
def cleandir() -> Iterator[pathlib.Path]:
    with tempfile.TemporaryDirectory() as newpath:
        abspath = pathlib.Path(newpath).absolute()
        old_cwd = pathlib.Path.cwd()
        os.chdir(newpath)
        try:
            yield abspath
        finally:
            os.chdir(str(old_cwd))


@pytest.fixture
def app_path(cleandir: pathlib.Path, monkeypatch) -> Iterator[pathlib.Path]:
    path = cleandir / 'app'
    monkeypatch.setattr(utils, 'get_app_path', lambda: path)
    monkeypatch.setattr(config, 'get_app_path', lambda: path)
    yield path


@pytest.fixture(autouse=True)
def clear_cache():
    testing_utils.clear_all_functools_cache()
    yield
    testing_utils.clear_all_functools_cache()
