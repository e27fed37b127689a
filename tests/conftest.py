"""Shared fixtures: temporary vaults on the local filesystem."""

import os
import shutil
import tempfile

import pytest

from autoarchiver import AutoArchiver
from archiver import RuleConfig
from storage import LocalDriver
from workflows import Vault


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    dir_path = tempfile.mkdtemp(prefix="autoarchiver_test_")
    yield dir_path
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def vault(temp_dir):
    """A Vault on an empty temporary directory."""
    return Vault(LocalDriver(temp_dir))


@pytest.fixture
def write_doc(temp_dir):
    """Return a helper that writes a file into the temp vault."""
    def _write(rel_path: str, text: str = "") -> str:
        full_path = os.path.join(temp_dir, *rel_path.split("/"))
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(text)
        return full_path
    return _write


@pytest.fixture(autouse=True)
def reset_state():
    """Restore global AutoArchiver state after each test."""
    yield
    AutoArchiver.update_rules(RuleConfig())
    AutoArchiver.vault = None
    AutoArchiver.set_app(None)
