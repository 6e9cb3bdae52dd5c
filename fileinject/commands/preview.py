from pathlib import Path
from typing import Any

import yaml
from hotlog import get_logger
from pydantic import BaseModel, Field
from rich.console import Console

from fileinject.grouping import group_files
from fileinject.injector import Injector
from fileinject.models import SourceFile, TargetDocument
from fileinject.transforms import TemplateTransform

logger = get_logger(__name__)


class PreviewConfig(BaseModel):
    """Configuration for the preview tool."""

    template: str = Field(
        ...,
        description='The target document content to inject into',
    )
    target: str = Field(
        default='index.html',
        description='Path of the target document (its extension selects the tags)',
    )
    sources: list[str] = Field(
        default_factory=list,
        description='Source file paths to inject (they need not exist)',
    )
    options: dict[str, Any] = Field(
        default_factory=dict,
        description='Injection options',
    )
    transform: str | None = Field(
        default=None,
        description='Optional jinja template rendering each source line',
    )


def command(debug_file: Path, *, show_groups: bool) -> int:
    """Preview an injection described by a YAML file without touching disk."""
    console = Console()

    with Path(debug_file).open(encoding='utf-8') as f:
        data = yaml.safe_load(f)
    preview = PreviewConfig.model_validate(data)

    options = dict(preview.options)
    if preview.transform is not None:
        options['transform'] = TemplateTransform(preview.transform)

    cwd = Path.cwd()
    sources = [SourceFile(path=cwd / p, cwd=cwd) for p in preview.sources]
    target = TargetDocument(path=cwd / preview.target, contents=preview.template, cwd=cwd)
    injector = Injector(sources, options)

    console.rule('[bold]Preview Injection')
    logger.info(
        'preview_started',
        target=preview.target,
        sources=preview.sources,
        template_length=len(preview.template),
    )
    console.print()

    if show_groups:
        groups = group_files(
            sources,
            target.extension,
            injector.rules,
            injector.options.starttag,
            injector.options.endtag,
        )
        console.rule('[bold]Tag Groups')
        for pair, files in groups.items():
            console.print(f'{pair.start} ... {pair.end}', markup=False)
            for file in files:
                console.print(f'  {file.path.relative_to(cwd).as_posix()}', markup=False)
        console.print()

    result = injector.inject(target)
    console.rule('[bold]Result')
    console.print(result.text(), markup=False)
    return 0
