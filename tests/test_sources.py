from pathlib import Path

import pytest

from fileinject.exceptions import SourceCollectionError
from fileinject.models import SourceFile
from fileinject.sources import SourceCollection, collect_sources


def test_materialized_iterable() -> None:
    files = [SourceFile(path='a.js'), SourceFile(path='b.js')]
    collection = SourceCollection(iter(files))

    assert collection.files() == tuple(files)
    # a consumed iterator must not come back empty the second time
    assert collection.files() == tuple(files)
    assert len(collection) == 2


def test_provider_called_once() -> None:
    calls = []

    def provider() -> list[SourceFile]:
        calls.append(1)
        return [SourceFile(path='a.js')]

    collection = SourceCollection(provider)
    collection.files()
    collection.files()

    assert len(calls) == 1


def test_failed_acquisition_fails_every_caller_with_same_error() -> None:
    calls = []
    original = OSError('disk went away')

    def provider() -> list[SourceFile]:
        calls.append(1)
        raise original

    collection = SourceCollection(provider)
    for _ in range(2):
        with pytest.raises(SourceCollectionError, match='disk went away') as exc_info:
            collection.files()
        assert exc_info.value.__cause__ is original

    assert len(calls) == 1


def test_collect_sources_order_and_exclusions(tmp_path: Path) -> None:
    for name in ('js/b.js', 'js/a.js', 'js/skip.js', 'css/site.css', 'vendor/lib.js'):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text('', encoding='utf-8')

    files = collect_sources(['vendor/*.js', 'js/*.js', '!js/skip.js', 'css/*.css', 'vendor/*.js'], tmp_path)

    assert [f.path.relative_to(tmp_path).as_posix() for f in files] == [
        'vendor/lib.js',
        'js/a.js',
        'js/b.js',
        'css/site.css',
    ]
    assert all(f.cwd == tmp_path for f in files)
