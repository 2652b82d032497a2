import importlib.util
from collections.abc import Callable
from pathlib import Path
from types import ModuleType

import pytest


@pytest.fixture
def load_hook(hook_templates_dir: Path) -> Callable[[str], ModuleType]:
    """Import a shipped helper hook by file name (they are scripts, not package modules)."""

    def _load(name: str) -> ModuleType:
        path = hook_templates_dir / name
        spec = importlib.util.spec_from_file_location(f"_hook_{path.stem}", path)
        assert spec is not None and spec.loader is not None
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load
