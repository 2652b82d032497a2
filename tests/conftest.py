from pathlib import Path

import pytest

from hookstrap.core.artifacts import _hook_templates_dir


@pytest.fixture
def hook_templates_dir() -> Path:
    return _hook_templates_dir()
