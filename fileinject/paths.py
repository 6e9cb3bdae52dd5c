"""Compute the path a source file is referenced by inside a target document."""

import os
from collections.abc import Iterable
from pathlib import Path

from fileinject.models import InjectOptions, SourceFile, TargetDocument


def unixify(path: str | Path) -> str:
    return str(path).replace('\\', '/')


def add_root_slash(path: str) -> str:
    return '/' + path.lstrip('/')


def remove_root_slash(path: str) -> str:
    return path.lstrip('/')


def remove_base_path(bases: Iterable[str], path: str) -> str:
    """Strip each base prefix in turn, tolerating a missing leading slash on either side."""
    for raw in bases:
        base = unixify(raw)
        if not base:
            continue
        if path.startswith('/') and not base.startswith('/'):
            base = '/' + base
        if not path.startswith('/') and base.startswith('/'):
            path = '/' + path
        if path.startswith(base):
            path = path[len(base) :]
    return path


def _absolute(path: Path, cwd: Path) -> Path:
    return path if path.is_absolute() else cwd / path


def get_filepath(source: SourceFile, target: TargetDocument, options: InjectOptions) -> str:
    """Return the reference to ``source`` to inject into ``target``."""
    source_path = _absolute(source.path, source.cwd)
    if options.relative:
        target_dir = _absolute(target.path, target.cwd).parent
        filepath = unixify(os.path.relpath(source_path, target_dir))
    else:
        filepath = remove_base_path([unixify(source.cwd)], unixify(source_path))

    if options.ignore_path:
        filepath = remove_base_path(options.ignore_path, filepath)

    if options.add_prefix:
        filepath = options.add_prefix + add_root_slash(filepath)

    if options.add_root_slash:
        filepath = add_root_slash(filepath)
    elif not options.add_prefix:
        filepath = remove_root_slash(filepath)

    if options.add_suffix:
        filepath += options.add_suffix
    return filepath
