import sys
from pathlib import Path

import pytest

# Make the in-tree package importable without installing it
PROJECT_ROOT = Path(__file__).resolve().parent
SRC_DIR = PROJECT_ROOT / 'src'
if SRC_DIR.exists() and str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture(autouse=True)
def _private_app_dirs(tmp_path, monkeypatch):
    """Point the settings location at a per-test directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("NODEEDIT_APP_NAME", "nodeedit-tests")
