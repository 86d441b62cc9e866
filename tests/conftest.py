"""Shared pytest fixtures"""

import logging
import os

import pytest

from bank_sim import config as config_module


@pytest.fixture(autouse=True)
def reset_bank_sim_logger():
    """Undo setup_logging() so caplog sees bank_sim records in every test"""
    yield
    logger = logging.getLogger("bank_sim")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without BANKSIM_ variables; the global config is restored afterwards"""
    for key in list(os.environ):
        if key.upper().startswith("BANKSIM_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(config_module, "config", None)
    return monkeypatch
