"""
Tests for logger naming and setup.
"""

import logging

from rich.logging import RichHandler

from request_explorer.logging_config import ROOT_LOGGER_NAME, get_logger, setup_logging


def test_loggers_live_under_the_package_namespace():
    assert get_logger("request_explorer.history").name == "request_explorer.history"
    assert get_logger("plugin").name == "request_explorer.plugin"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


def test_setup_logging_installs_one_handler():
    setup_logging("DEBUG")
    root = setup_logging("info")

    assert root.level == logging.INFO
    assert sum(isinstance(h, RichHandler) for h in root.handlers) == 1


def test_unknown_level_falls_back_to_warning():
    assert setup_logging("CHATTY").level == logging.WARNING
