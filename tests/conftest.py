import logging
import pathlib
import site

import pytest

HERE = pathlib.Path(pathlib.Path(__file__).resolve()).parent
site.addsitedir(HERE)


@pytest.fixture(autouse=True)
def debug_logging(caplog):
    """Capture facade debug output so logging paths run in every test."""
    caplog.set_level(logging.DEBUG, logger='dbfacade')
    yield


pytest_plugins = [
    'tests.fixtures.adapters',
    'tests.fixtures.values',
    'tests.fixtures.sqlite',
]
