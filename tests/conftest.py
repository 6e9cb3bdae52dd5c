from collections.abc import Callable
from pathlib import Path

import pytest

from fileinject.models import SourceFile, TargetDocument

SourceFactory = Callable[..., list[SourceFile]]


@pytest.fixture
def project_root() -> Path:
    """A fixed, non-existent project root; path logic never touches disk."""
    return Path('/project')


@pytest.fixture
def make_sources(project_root: Path) -> SourceFactory:
    """Build source files from paths relative to the project root."""

    def _make(*names: str) -> list[SourceFile]:
        return [SourceFile(path=project_root / name, cwd=project_root) for name in names]

    return _make


@pytest.fixture
def make_target(project_root: Path) -> Callable[..., TargetDocument]:
    """Build an in-memory target document under the project root."""

    def _make(content: str | bytes, name: str = 'index.html') -> TargetDocument:
        return TargetDocument(path=project_root / name, contents=content, cwd=project_root)

    return _make


def script_tag(path: str, *_: object) -> str:
    return f'<script src="{path}"></script>'
