"""Compile literal tag pairs into region matching rules.

The compiled rule matches, in order: the start tag, the whitespace run that
immediately follows it (the region's indent), the shortest run of any
characters up to the first end tag, then the end tag. Whitespace inside the
tag literals is optional in the document, matching is case-insensitive, and
any ``{{ANY}}`` placeholder in a literal matches one or more characters on
the same line (the whole word when it ends the tag).
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

from fileinject.tags import ANY, TagPair

_WHITESPACE = re.compile(r'\s+')


@dataclass(frozen=True)
class Region:
    """One tagged region located in a document."""

    full_match: str
    start_tag: str
    indent: str
    content: str
    end_tag: str
    position: int
    wildcards: tuple[str, ...] = ()

    @classmethod
    def from_match(cls, match: re.Match) -> 'Region':
        groups = match.re.groupindex
        wildcards = tuple(match.group(name) for name in sorted(groups, key=groups.get) if name.startswith('any'))
        return cls(
            full_match=match.group(0),
            start_tag=match.group('start'),
            indent=match.group('indent'),
            content=match.group('content'),
            end_tag=match.group('end'),
            position=match.start(),
            wildcards=wildcards,
        )


def _make_whitespace_optional(literal: str) -> str:
    return r'\s*'.join(re.escape(part) for part in _WHITESPACE.split(literal))


def tag_expression(literal: str, prefix: str = 'any') -> str:
    """Translate a tag literal into a regular expression fragment.

    Each ``{{ANY}}`` placeholder becomes a named group ``<prefix><n>``. A
    placeholder followed by more tag text matches lazily up to that text; a
    trailing one (``//- inject:{{ANY}}``) has nothing to stop at and takes
    the whole run of non-whitespace characters instead.
    """
    parts = literal.split(ANY)
    expression = _make_whitespace_optional(parts[0])
    for index, part in enumerate(parts[1:]):
        wildcard = r'.+?' if part.strip() else r'\S+'
        expression += rf'(?P<{prefix}{index}>{wildcard})' + _make_whitespace_optional(part)
    return expression


@dataclass(frozen=True)
class TagPattern:
    """Matching rule for every region delimited by one tag pair."""

    pair: TagPair
    regex: re.Pattern

    def find(self, document: str) -> list[Region]:
        """Return every non-overlapping region in document order."""
        return [Region.from_match(m) for m in self.regex.finditer(document)]

    def sub(self, replacement: Callable[[Region], str], document: str) -> str:
        """Replace every region with the text ``replacement`` builds for it."""
        return self.regex.sub(lambda m: replacement(Region.from_match(m)), document)

    def contains_start(self, text: str) -> bool:
        """Whether ``text`` holds another start tag of this pattern."""
        return _start_regex(self.pair.start).search(text) is not None


@lru_cache(maxsize=256)
def _start_regex(start: str) -> re.Pattern:
    return re.compile(tag_expression(start), re.IGNORECASE)


@lru_cache(maxsize=256)
def compile_pattern(start: str, end: str) -> TagPattern:
    """Build (and cache) the matching rule for a start/end tag pair."""
    expression = (
        f'(?P<start>{tag_expression(start, "any")})'
        r'(?P<indent>\s*)'
        r'(?P<content>[\s\S]*?)'
        f'(?P<end>{tag_expression(end, "endany")})'
    )
    return TagPattern(pair=TagPair(start, end), regex=re.compile(expression, re.IGNORECASE))
