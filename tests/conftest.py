# tests/conftest.py
import json
import shutil
from pathlib import Path

import pytest
import yaml


def write_config(path: Path, data) -> Path:
    """Write *data* to *path*; strings verbatim, dicts as YAML or JSON by extension."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        path.write_text(data, encoding="utf-8")
    elif path.suffix == ".json":
        path.write_text(json.dumps(data), encoding="utf-8")
    else:
        with path.open("w", encoding="utf-8") as fh:
            yaml.safe_dump(data, fh)
    return path


@pytest.fixture
def write_file():
    """Expose ``write_config`` to tests as a fixture."""
    return write_config


@pytest.fixture
def app_dir(tmp_path: Path) -> Path:
    """An application directory with a settings file and a secrets file."""
    root = tmp_path / "app"
    write_config(root / "settings.toml", '[db]\nport = 5432\nhost = "localhost"\n')
    write_config(root / ".secrets.toml", '[db]\npassword = "x"\n')
    return root


@pytest.fixture(autouse=True)
def isolate_fs(tmp_path: Path, monkeypatch):
    """Prevent tests from accidentally touching real project files."""
    monkeypatch.chdir(tmp_path)
    yield
    # cleanup
    shutil.rmtree(tmp_path, ignore_errors=True)
