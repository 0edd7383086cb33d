"""Shared fixtures for the toy robot tests."""

import logging
import os
import sys

import pytest

# Make the root-level main module importable without installation
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from toyrobot.application import Application
from toyrobot.processor import CommandProcessor
from toyrobot.robot import Robot
from toyrobot.types import Table


@pytest.fixture(autouse=True)
def clean_robot_env(monkeypatch):
    """Keep ROBOT_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("ROBOT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_toyrobot_logger():
    """main.main installs a stderr handler; drop it after each test."""
    logger = logging.getLogger("toyrobot")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def table():
    return Table(5, 5)


@pytest.fixture
def robot(table):
    return Robot(table)


@pytest.fixture
def processor():
    return CommandProcessor()


@pytest.fixture
def collect_app():
    """Application whose reports are collected into app.reports."""
    def make(table=None, **kwargs):
        reports = []
        app = Application(table=table, output=reports.append, **kwargs)
        app.reports = reports
        return app
    return make
