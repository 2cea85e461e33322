import logging

import pytest

from subnetcalc import config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep the user's environment and .env files out of the tests."""
    for key in ("SUBNETCALC_MAX_SUBNETS", "SUBNETCALC_FORMAT", "SUBNETCALC_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "ENV_LOCATIONS", [])
    config.set_config(None)
    yield
    config.set_config(None)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers the CLI installs so caplog keeps seeing records."""
    yield
    logger = logging.getLogger("subnetcalc")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
