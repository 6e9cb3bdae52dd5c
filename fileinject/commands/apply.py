import difflib
from pathlib import Path

from hotlog import get_logger

from fileinject.config import ResolvedInjection, load_config
from fileinject.display import rich_print_diffs
from fileinject.injector import Injector
from fileinject.models import TargetDocument
from fileinject.sources import collect_sources
from fileinject.version import __version__

logger = get_logger(__name__)


def unified_diff(before: TargetDocument, after: TargetDocument) -> str:
    """Return a unified diff between two versions of a document."""
    return ''.join(
        difflib.unified_diff(
            before.text().splitlines(keepends=True),
            after.text().splitlines(keepends=True),
            fromfile=f'a/{before.relative}',
            tofile=f'b/{after.relative}',
        ),
    )


def run_injection(
    injection: ResolvedInjection,
    base_dir: Path,
    documents: dict[Path, TargetDocument],
) -> int:
    """Inject one configured source set, updating ``documents`` in place.

    Returns the number of targets that failed.
    """
    injector = Injector(
        lambda: collect_sources(injection.sources, base_dir),
        injection.options,
    )
    targets = [documents.get(path) or TargetDocument.from_path(path, cwd=base_dir) for path in injection.targets]
    failures = 0
    for result in injector.inject_many(targets):
        if result.document is None:
            failures += 1
            continue
        documents[result.target.path] = result.document
    return failures


def command(config_path: Path, *, check_only: bool) -> int:
    """Run every configured injection and write (or check) the targets."""
    logger.info('running_fileinject', version=__version__)

    config = load_config(config_path)

    # each target is read once, passed through every injection naming it,
    # and written back once
    documents: dict[Path, TargetDocument] = {}
    failures = sum(run_injection(injection, config.base_dir, documents) for injection in config.injections)
    if failures:
        logger.error('injection_failed', failed_targets=failures)
        return 1

    diffs: list[tuple[str, str]] = []
    for path, document in documents.items():
        original = TargetDocument.from_path(path, cwd=config.base_dir)
        if original.contents == document.contents:
            continue
        if check_only:
            diffs.append((document.relative, unified_diff(original, document)))
            continue
        path.write_bytes(document.contents)
        logger.info('target_written', target=document.relative)

    if check_only:
        if diffs:
            logger.error(
                'check_results',
                suggestion='run `fileinject apply` to apply changes',
            )
            rich_print_diffs(diffs)
        return 2 if diffs else 0
    return 0
