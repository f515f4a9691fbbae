"""
Pytest configuration and fixtures for the Character Catalog.
Only external I/O (HTTP) is mocked; files are real temporary files.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from character_catalog.core.config import Config, Environment

SAMPLE_DATABASE = """\
# Character database export
Version: 3
Character "Wolf": Damage: 10, Defense: 5, Energy Rate: 3, Move Speed: 7, Beast: True
Character "Wolf": Damage: 20, Defense: 15, Energy Rate: 13, Move Speed: 17, Beast: True
garbage line
Character "Cat": Damage: 8, Defense: 8, Energy Rate: 8, Move Speed: 8, Beast: False
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_database_text() -> str:
    return SAMPLE_DATABASE


@pytest.fixture
def database_file(temp_dir: Path) -> Path:
    path = temp_dir / "database.txt"
    path.write_text(SAMPLE_DATABASE, encoding="utf-8")
    return path


@pytest.fixture
def test_config(temp_dir: Path, database_file: Path) -> Config:
    cfg = Config(environment=Environment.TESTING)
    cfg.source.local_path = database_file
    cfg.export.exports_dir = temp_dir / "exports"
    return cfg


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CHARDB_* variables from the developer's shell out of the tests."""
    import os

    for name in list(os.environ):
        if name.startswith("CHARDB_"):
            monkeypatch.delenv(name, raising=False)
