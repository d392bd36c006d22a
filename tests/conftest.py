from __future__ import annotations

import sys
from pathlib import Path

import pytest

_START = Path(__file__).resolve().parent
_repo_root = _START
while _repo_root != _repo_root.parent and not (_repo_root / "gg_toolkit" / "__init__.py").exists():
    _repo_root = _repo_root.parent

sys.path.insert(0, str(_repo_root))


@pytest.fixture(autouse=True)
def _isolated_display_state():
    """Each test starts with a fresh configuration and default context."""
    from gg_toolkit import config, display_context

    config.reset_config()
    display_context.reset_default_context()
    yield
    config.reset_config()
    display_context.reset_default_context()
