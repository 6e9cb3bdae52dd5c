import io
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import IO, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fileinject.exceptions import (
    DeprecatedOptionError,
    DocumentContentError,
    InvalidOptionError,
    StreamNotSupportedError,
)
from fileinject.grouping import extname
from fileinject.tags import DEFAULT_NAME, TagOverride, TagRules

Renderer = Callable[[str, 'SourceFile', int, int, 'TargetDocument'], str | None]

# option name -> hint shown when someone still passes it
DEPRECATED_OPTIONS = {
    'sort': 'sort option is deprecated! Sort the source collection before injecting instead!',
    'template_string': '`template_string` option is deprecated! Create a TargetDocument instead!',
    'templateString': '`templateString` option is deprecated! Create a TargetDocument instead!',
    'read': 'There is no `read` option. Did you mean to provide it when collecting the sources?',
}


@dataclass(frozen=True)
class SourceFile:
    """A file whose reference gets injected into target documents."""

    path: Path
    cwd: Path = field(default_factory=Path.cwd)
    base: Path | None = None
    contents: bytes | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'path', Path(self.path))
        object.__setattr__(self, 'cwd', Path(self.cwd))
        if self.base is not None:
            object.__setattr__(self, 'base', Path(self.base))

    @property
    def extension(self) -> str:
        return extname(self.path)


@dataclass
class TargetDocument:
    """A document holding tagged regions to inject into.

    ``contents`` is text or UTF-8 bytes. Injection never mutates the
    instance: it returns a copy with the new contents in the same type.
    """

    path: Path
    contents: str | bytes | IO | None = None
    cwd: Path = field(default_factory=Path.cwd)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.cwd = Path(self.cwd)

    @classmethod
    def from_path(cls, path: Path, cwd: Path | None = None) -> 'TargetDocument':
        """Read a document from disk as bytes."""
        return cls(path=path, contents=Path(path).read_bytes(), cwd=cwd or Path.cwd())

    @property
    def extension(self) -> str:
        return extname(self.path)

    @property
    def relative(self) -> str:
        try:
            return self.path.relative_to(self.cwd).as_posix()
        except ValueError:
            return self.path.as_posix()

    @property
    def is_stream(self) -> bool:
        return isinstance(self.contents, io.IOBase) or hasattr(self.contents, 'read')

    def text(self) -> str:
        """Return the document content as text."""
        if self.is_stream:
            msg = 'Streams not supported for target templates!'
            raise StreamNotSupportedError(msg)
        if self.contents is None:
            msg = f'No content available for target {self.relative}'
            raise DocumentContentError(msg)
        if isinstance(self.contents, bytes):
            try:
                return self.contents.decode('utf-8')
            except UnicodeDecodeError as err:
                msg = f'Target {self.relative} is not UTF-8 text: {err}'
                raise DocumentContentError(msg) from err
        return str(self.contents)

    def with_text(self, text: str) -> 'TargetDocument':
        contents: str | bytes = text.encode('utf-8') if isinstance(self.contents, bytes) else text
        return replace(self, contents=contents)


class TagRule(BaseModel):
    """User supplied start/end templates for one rule table key."""

    start: str | None = None
    end: str | None = None


class InjectOptions(BaseModel):
    """Options for one injection pass.

    Every field can also be given by its camelCase alias so option sets
    written for the original plugin keep working.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra='forbid',
    )

    quiet: bool = Field(default=False, description='Suppress progress logging')
    relative: bool = Field(
        default=False,
        description='Inject paths relative to the target document',
    )
    add_root_slash: bool = Field(
        default=True,
        alias='addRootSlash',
        description='Prefix injected paths with "/" (defaults to not relative)',
    )
    remove_tags: bool = Field(
        default=False,
        alias='removeTags',
        description='Strip the start/end tags from the output',
    )
    empty: bool = Field(
        default=False,
        description='Clear tagged regions no source file resolved to',
    )
    starttag: TagOverride = Field(default=None, description='Start tag override')
    endtag: TagOverride = Field(default=None, description='End tag override')
    transform: Callable[..., Any] | None = Field(
        default=None,
        description='Renderer called once per file: (path, file, index, length, target)',
    )
    name: str = Field(
        default=DEFAULT_NAME,
        description='Tag name substituted for {{name}} in tag templates',
    )
    self_closing_tag: bool = Field(
        default=False,
        alias='selfClosingTag',
        description='Make the default renderer emit self-closing tags',
    )
    ignore_path: list[str] = Field(
        default_factory=list,
        alias='ignorePath',
        description='Path prefixes stripped from injected paths',
    )
    add_prefix: str | None = Field(default=None, alias='addPrefix')
    add_suffix: str | None = Field(default=None, alias='addSuffix')
    tag_rules: dict[str, TagRule] = Field(
        default_factory=dict,
        description='Start/end tag templates keyed by "target" or "target:source" extension',
    )

    @model_validator(mode='before')
    @classmethod
    def reject_deprecated_options(cls, data: Any) -> Any:
        """Fail loudly on legacy options and derive add_root_slash from relative."""
        if not isinstance(data, dict):
            return data
        for option, message in DEPRECATED_OPTIONS.items():
            if option in data:
                raise DeprecatedOptionError(message)
        if 'add_root_slash' not in data and 'addRootSlash' not in data:
            data = {**data, 'add_root_slash': not data.get('relative', False)}
        return data

    @field_validator('transform', mode='before')
    @classmethod
    def validate_transform(cls, value: Any) -> Any:
        if value is not None and not callable(value):
            msg = 'transform option must be a function'
            raise InvalidOptionError(msg)
        return value

    @field_validator('ignore_path', mode='before')
    @classmethod
    def normalize_ignore_path(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    def tag_resolver(self) -> TagRules:
        """Build the tag rule resolver these options describe."""
        return TagRules(
            name=self.name,
            starts={key: rule.start for key, rule in self.tag_rules.items() if rule.start},
            ends={key: rule.end for key, rule in self.tag_rules.items() if rule.end},
        )
