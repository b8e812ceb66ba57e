"""Pytest configuration and fixtures for bridge analyzer tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Dict, Generator

import pytest

from bridge_analyzer.snapshot import load_snapshot


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_repo_path() -> Path:
    """Get path to the sample multi-language repository."""
    return Path(__file__).parent / "fixtures" / "sample_repo"


@pytest.fixture
def sample_snapshot(sample_repo_path: Path) -> Dict[str, str]:
    """Snapshot of the sample repository."""
    return load_snapshot(sample_repo_path)


@pytest.fixture
def diamond_snapshot() -> Dict[str, str]:
    """Two files importing a shared module, plus an unrelated file."""
    return {
        "src/a.ts": "import { b } from './b'\n",
        "src/b.ts": "export const b = 1\n",
        "src/c.ts": "import { b } from './b'\nimport React from 'react'\n",
        "src/d.ts": "export const d = 4\n",
    }
