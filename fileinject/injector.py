"""Inject source file references into the tagged regions of target documents.

One injection pass over a target document:

1. group the source files by the tag pair each resolves to;
2. for every group, replace each matching region's inner content with the
   rendered lines for the group's files, joined by the region's indent;
3. optionally sweep the regions no file resolved to (``empty`` option).

Only the matched regions change; the rest of the document is returned
byte-for-byte.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from hotlog import get_logger

from fileinject.exceptions import (
    FileInjectError,
    InvalidOptionError,
    MissingSourcesError,
    RenderError,
    log_exception,
)
from fileinject.grouping import group_files
from fileinject.models import InjectOptions, Renderer, SourceFile, TargetDocument
from fileinject.paths import get_filepath
from fileinject.patterns import Region, TagPattern, compile_pattern
from fileinject.sources import SourceCollection, SourceProvider
from fileinject.tags import ANY, TagOverride, TagPair, TagRules
from fileinject.transforms import DefaultTransform

logger = get_logger(__name__)

LineRenderer = Callable[[Sequence[SourceFile]], list[str]]


def render_lines(
    files: Sequence[SourceFile],
    target: TargetDocument,
    options: InjectOptions,
    transform: Renderer,
) -> list[str]:
    """Render one line per file, skipping files the renderer returns no text for.

    Indexes passed to the renderer are positions in ``files``, so a skipped
    file does not shift the index of the files after it.

    Raises:
        RenderError: the renderer raised for one of the files.
    """
    lines: list[str] = []
    for index, file in enumerate(files):
        filepath = get_filepath(file, target, options)
        try:
            line = transform(filepath, file, index, len(files), target)
        except FileInjectError:
            raise
        except Exception as err:
            msg = f'Rendering {file.path.name} for {target.relative} failed: {err}'
            raise RenderError(msg) from err
        if isinstance(line, str):
            lines.append(line)
    return lines


def replace_regions(
    document: str,
    groups: Mapping[TagPair, Sequence[SourceFile]],
    render: LineRenderer,
    *,
    remove_tags: bool = False,
) -> tuple[str, set[str]]:
    """Replace every region of every group with freshly rendered lines.

    Returns the new document and the start tags (as written in the document)
    of all regions that were replaced.
    """
    matched: set[str] = set()
    for pair, files in groups.items():
        pattern = compile_pattern(pair.start, pair.end)

        def injector(
            region: Region,
            files: Sequence[SourceFile] = files,
            pattern: TagPattern = pattern,
        ) -> str:
            matched.add(region.start_tag)
            if pattern.contains_start(region.content):
                logger.warning(
                    'nested_region_flattened',
                    start_tag=region.start_tag,
                    position=region.position,
                )
            parts = [] if remove_tags else [region.start_tag]
            parts.extend(render(files))
            if not remove_tags:
                parts.append(region.end_tag)
            logger.debug(
                'region_replaced',
                start_tag=region.start_tag,
                position=region.position,
                files=len(files),
            )
            return region.indent.join(parts)

        document = pattern.sub(injector, document)
    return document, matched


def sweep_empty(
    document: str,
    target_ext: str,
    matched: set[str],
    *,
    rules: TagRules,
    starttag: TagOverride = None,
    endtag: TagOverride = None,
    remove_tags: bool = False,
) -> str:
    """Clear the regions of ``target_ext`` that no source file resolved to.

    Regions whose start tag is in ``matched`` are left as they are. Others
    lose their content, or disappear entirely when ``remove_tags`` is set.
    """
    pair = rules.resolve(target_ext, ANY, starttag, endtag)
    pattern = compile_pattern(pair.start, pair.end)

    def clear(region: Region) -> str:
        if region.start_tag in matched:
            return region.full_match
        logger.debug(
            'empty_region_cleared',
            start_tag=region.start_tag,
            position=region.position,
            removed=remove_tags,
        )
        if remove_tags:
            return ''
        return region.indent.join([region.start_tag, region.end_tag])

    return pattern.sub(clear, document)


@dataclass(frozen=True)
class InjectionResult:
    """Outcome of injecting into one target of a batch."""

    target: TargetDocument
    document: TargetDocument | None = None
    error: FileInjectError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def changed(self) -> bool:
        return self.document is not None and self.document.contents != self.target.contents


class Injector:
    """Inject one source collection into any number of target documents.

    Options are validated when the injector is built, so configuration
    mistakes surface before any document is touched.
    """

    def __init__(
        self,
        sources: SourceCollection | SourceProvider | None,
        options: InjectOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        if sources is None:
            msg = 'Missing sources collection!'
            raise MissingSourcesError(msg)
        if isinstance(options, InjectOptions):
            if kwargs:
                msg = 'Pass either an InjectOptions instance or keyword options, not both'
                raise InvalidOptionError(msg)
            self.options = options
        else:
            self.options = InjectOptions.model_validate({**(options or {}), **kwargs})
        self.sources = sources if isinstance(sources, SourceCollection) else SourceCollection(sources)
        self.rules = self.options.tag_resolver()
        self.transform: Renderer = self.options.transform or DefaultTransform(
            self_closing_tag=self.options.self_closing_tag,
        )

    def inject(self, target: TargetDocument) -> TargetDocument:
        """Return a copy of ``target`` with every tagged region injected.

        Raises:
            DocumentError: the target has no usable text content, the
                source collection could not be acquired or the renderer
                failed.
        """
        text = target.text()
        files = self.sources.files()
        return target.with_text(self.render(target, text, files))

    def render(self, target: TargetDocument, text: str, files: Sequence[SourceFile]) -> str:
        """Return ``text`` with ``files`` injected for ``target``."""
        options = self.options
        if not options.quiet:
            if files:
                logger.info('injecting_files', count=len(files), target=target.relative)
            else:
                logger.info('nothing_to_inject', target=target.relative)

        target_ext = target.extension
        groups = group_files(files, target_ext, self.rules, options.starttag, options.endtag)
        logger.debug(
            'tag_groups_resolved',
            target=target.relative,
            groups={pair.start: len(group) for pair, group in groups.items()},
        )

        content, matched = replace_regions(
            text,
            groups,
            lambda group: render_lines(group, target, options, self.transform),
            remove_tags=options.remove_tags,
        )
        if options.empty:
            content = sweep_empty(
                content,
                target_ext,
                matched,
                rules=self.rules,
                starttag=options.starttag,
                endtag=options.endtag,
                remove_tags=options.remove_tags,
            )
        return content

    def inject_many(
        self,
        targets: Iterable[TargetDocument],
        max_workers: int | None = None,
    ) -> Iterator[InjectionResult]:
        """Inject into several targets, yielding one result per target in order.

        Targets are processed independently; a failing target is reported
        in its result and does not stop the others.
        """
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            yield from pool.map(self._inject_one, targets)

    def _inject_one(self, target: TargetDocument) -> InjectionResult:
        try:
            document = self.inject(target)
        except FileInjectError as err:
            log_exception(logger, err)
            return InjectionResult(target=target, error=err)
        return InjectionResult(target=target, document=document)


def inject(
    target: TargetDocument,
    sources: SourceProvider,
    **options: Any,
) -> TargetDocument:
    """Inject ``sources`` into a single ``target`` with keyword options."""
    return Injector(sources, **options).inject(target)
