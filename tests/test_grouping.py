import pytest

from fileinject.grouping import extname, group_files
from fileinject.tags import TagPair, TagRules

from .conftest import SourceFactory


@pytest.mark.parametrize(
    ('path', 'expected'),
    [
        ('app.js', 'js'),
        ('/lib/vendor.min.js', 'js'),
        ('styles/site.css?v=3', 'css'),
        ('C:\\assets\\logo.PNG', 'PNG'),
        ('Makefile', ''),
        ('.gitignore', ''),
    ],
)
def test_extname(path: str, expected: str) -> None:
    assert extname(path) == expected


def test_groups_by_pair_in_arrival_order(make_sources: SourceFactory) -> None:
    files = make_sources('a.js', 'a.css', 'b.js', 'c.js', 'b.css')

    groups = group_files(files, 'html', TagRules())

    js = TagPair('<!-- inject:js -->', '<!-- endinject -->')
    css = TagPair('<!-- inject:css -->', '<!-- endinject -->')
    assert list(groups) == [js, css]
    assert [f.path.name for f in groups[js]] == ['a.js', 'b.js', 'c.js']
    assert [f.path.name for f in groups[css]] == ['a.css', 'b.css']


def test_every_file_in_exactly_one_group(make_sources: SourceFactory) -> None:
    files = make_sources('a.js', 'b.css', 'c.png', 'd', 'e.js')

    groups = group_files(files, 'html', TagRules())

    grouped = [f for group in groups.values() for f in group]
    assert sorted(grouped, key=str) == sorted(files, key=str)
    assert len(grouped) == len(files)


def test_overrides_collapse_into_one_group(make_sources: SourceFactory) -> None:
    files = make_sources('a.js', 'b.css')

    groups = group_files(files, 'html', TagRules(), '<!-- assets -->', '<!-- endassets -->')

    assert list(groups) == [TagPair('<!-- assets -->', '<!-- endassets -->')]
    assert groups[TagPair('<!-- assets -->', '<!-- endassets -->')] == files


def test_no_files_no_groups() -> None:
    assert group_files([], 'html', TagRules()) == {}
