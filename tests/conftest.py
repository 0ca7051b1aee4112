"""Shared test fixtures for the dotparams test suite."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any

import pytest
import yaml


def write_yaml(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Returns the absolute path to the tests/fixtures/ directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def settings_file(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copies the sample settings.yaml to a temp directory for test isolation."""
    dest = tmp_path / "settings.yaml"
    shutil.copy(fixtures_dir / "settings.yaml", dest)
    return dest


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """The deserialized form of tests/fixtures/settings.yaml."""
    return {
        "user": {
            "name": "John",
            "is_real": False,
            "age": 39,
            "height": 1.78,
            "children": ["Huey", "Dewey", "Louie"],
        }
    }


@pytest.fixture
def params_tree(tmp_path: Path) -> Path:
    """A directory tree of parameter files with a nested subdirectory."""
    root = tmp_path / "params"
    write_yaml(root / "app.yaml", {"app": {"name": "demo", "debug": True}})
    write_yaml(root / "db" / "main.yaml", {"db": {"host": "localhost", "port": 5432}})
    write_yaml(root / "db" / "replicas" / "r1.yml", {"db": {"replicas": ["r1.local", "r2.local"]}})
    return root
