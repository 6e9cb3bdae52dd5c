"""Renderers turning one source file reference into one injected line.

A renderer is any callable ``(path, file, index, length, target)`` returning
the line to inject, or anything that is not a string to skip the file.
"""

from collections.abc import Callable
from typing import Any

from hotlog import get_logger
from jinja2 import Environment, StrictUndefined, Template, TemplateSyntaxError

from fileinject.exceptions import InvalidOptionError
from fileinject.grouping import extname
from fileinject.models import SourceFile, TargetDocument

logger = get_logger(__name__)

IMAGE_EXTENSIONS = frozenset({'png', 'gif', 'jpg', 'jpeg', 'svg', 'webp', 'ico'})

LineFactory = Callable[[str, int, int, str], str]


def source_type(ext: str) -> str:
    """Map a file extension to the type key of the renderer tables."""
    ext = ext.lower()
    if ext in IMAGE_EXTENSIONS:
        return 'image'
    return ext


def _json_line(path: str, index: int, length: int, _close: str) -> str:
    return f'"{path}"' + (',' if index + 1 < length else '')


def _import_line(path: str, *_: Any) -> str:
    return f'@import "{path}";'


def _sass_import_line(path: str, *_: Any) -> str:
    return f'@import "{path}"'


def _html_table() -> dict[str, LineFactory]:
    return {
        'css': lambda p, _i, _n, close: f'<link rel="stylesheet" href="{p}"{close}',
        'js': lambda p, *_: f'<script src="{p}"></script>',
        'html': lambda p, _i, _n, close: f'<link rel="import" href="{p}"{close}',
        'coffee': lambda p, *_: f'<script type="text/coffeescript" src="{p}"></script>',
        'image': lambda p, _i, _n, close: f'<img src="{p}"{close}',
    }


def _jade_table() -> dict[str, LineFactory]:
    return {
        'css': lambda p, *_: f'link(rel="stylesheet", href="{p}")',
        'js': lambda p, *_: f'script(src="{p}")',
        'html': lambda p, *_: f'link(rel="import", href="{p}")',
        'coffee': lambda p, *_: f'script(type="text/coffeescript", src="{p}")',
        'image': lambda p, *_: f'img(src="{p}")',
    }


def _slim_table() -> dict[str, LineFactory]:
    return {
        'css': lambda p, *_: f'link rel="stylesheet" href="{p}"',
        'js': lambda p, *_: f'script src="{p}"',
        'html': lambda p, *_: f'link rel="import" href="{p}"',
        'coffee': lambda p, *_: f'script type="text/coffeescript" src="{p}"',
        'image': lambda p, *_: f'img src="{p}"',
    }


def _haml_table() -> dict[str, LineFactory]:
    return {
        'css': lambda p, *_: f'%link{{rel:"stylesheet", href:"{p}"}}',
        'js': lambda p, *_: f'%script{{src:"{p}"}}',
        'html': lambda p, *_: f'%link{{rel:"import", href:"{p}"}}',
        'coffee': lambda p, *_: f'%script{{type:"text/coffeescript", src:"{p}"}}',
        'image': lambda p, *_: f'%img{{src:"{p}"}}',
    }


# target extension -> source type -> line factory
TRANSFORMS: dict[str, dict[str, LineFactory]] = {
    'html': _html_table(),
    'jsx': _html_table(),
    'jade': _jade_table(),
    'pug': _jade_table(),
    'slm': _slim_table(),
    'slim': _slim_table(),
    'haml': _haml_table(),
    'less': {'less': _import_line, 'css': _import_line},
    'scss': {'scss': _import_line, 'sass': _import_line, 'css': _import_line},
    'sass': {'scss': _sass_import_line, 'sass': _sass_import_line, 'css': _sass_import_line},
    'json': {'*': _json_line},
}


class DefaultTransform:
    """Render a source file according to the target and source extensions.

    Unknown target extensions fall back to the html table. Files of an
    unknown type render to ``None`` and are skipped.
    """

    def __init__(self, *, self_closing_tag: bool = False) -> None:
        self.self_closing_tag = self_closing_tag

    def __call__(
        self,
        filepath: str,
        file: SourceFile | None = None,
        index: int = 0,
        length: int = 1,
        target: TargetDocument | None = None,
    ) -> str | None:
        target_ext = target.extension if target is not None else ''
        kind = source_type(extname(filepath))
        table = TRANSFORMS.get(target_ext, TRANSFORMS['html'])
        factory = table.get(kind) or table.get('*')
        if factory is None:
            logger.debug('no_transform_for_file', path=filepath, target_ext=target_ext)
            return None
        # jsx requires void elements to be closed
        close = ' />' if self.self_closing_tag or target_ext == 'jsx' else '>'
        return factory(filepath, index, length, close)


class TemplateTransform:
    """Render each source file through a jinja2 template string.

    The template sees ``path``, ``file``, ``index``, ``length``, ``target``
    and ``ext`` (the source extension).
    """

    def __init__(self, template: str) -> None:
        env = Environment(undefined=StrictUndefined, autoescape=False, keep_trailing_newline=False)  # noqa: S701
        try:
            self.template: Template = env.from_string(template)
        except TemplateSyntaxError as err:
            msg = f'Invalid transform template: {err}'
            raise InvalidOptionError(msg) from err
        self.source = template

    def __call__(
        self,
        filepath: str,
        file: SourceFile,
        index: int,
        length: int,
        target: TargetDocument,
    ) -> str:
        return self.template.render(
            path=filepath,
            file=file,
            index=index,
            length=length,
            target=target,
            ext=extname(filepath),
        )
