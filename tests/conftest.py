"""Shared fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep DEVTASK_* settings from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.upper().startswith("DEVTASK_"):
            monkeypatch.delenv(name, raising=False)
