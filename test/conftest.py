import logging
import os
from unittest import mock

import pytest

import rpncalc.conf


@pytest.fixture(autouse=True)
def rpncalc_home(tmp_path):
    with mock.patch.dict(os.environ, RPNCALC_HOME=str(tmp_path)):
        os.environ.pop("RPNCALC_CONFIG", None)
        yield tmp_path


@pytest.fixture(autouse=True)
def reset_settings():
    yield
    vars(rpncalc.conf).pop("settings", None)


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("rpncalc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
