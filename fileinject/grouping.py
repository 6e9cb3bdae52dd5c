"""Partition source files by the tag pair they resolve to."""

from collections.abc import Iterable
from pathlib import PurePosixPath
from typing import Protocol

from fileinject.tags import TagOverride, TagPair, TagRules


class HasPath(Protocol):
    path: object


def extname(path: object) -> str:
    """Return the extension of ``path`` without the dot, ignoring any query string."""
    name = str(path).replace('\\', '/').split('?')[0]
    return PurePosixPath(name).suffix[1:]


def group_files(
    files: Iterable[HasPath],
    target_ext: str,
    rules: TagRules,
    starttag: TagOverride = None,
    endtag: TagOverride = None,
) -> dict[TagPair, list[HasPath]]:
    """Group ``files`` by resolved tag pair, keeping collection order.

    Dict insertion order is the order in which each distinct pair was first
    seen, so callers iterating the result replace regions in that order.
    """
    groups: dict[TagPair, list[HasPath]] = {}
    for file in files:
        pair = rules.resolve(target_ext, extname(file.path), starttag, endtag)
        groups.setdefault(pair, []).append(file)
    return groups
