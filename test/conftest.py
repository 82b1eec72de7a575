import pytest

from tonalkit import tuning
from tonalkit.config import config


@pytest.fixture(autouse=True)
def standardTuning():
    """Run every test with the default A4 and a fresh global converter"""
    saved = config['A4']
    config['A4'] = config.default['A4']
    tuning._converter._used = False
    yield
    config['A4'] = saved
    tuning._converter._used = False
