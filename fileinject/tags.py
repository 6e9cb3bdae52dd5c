"""Tag rule resolution.

A tag rule is a template such as ``<!-- {{name}}:{{ext}} -->``. Resolving it
for a (target extension, source extension) pairing substitutes ``{{ext}}``
with the source extension and ``{{name}}`` with the configured tag name,
producing the literal start and end tags an injection region is delimited by.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

ANY = '{{ANY}}'
DEFAULT_NAME = 'inject'
DEFAULT_TARGET = 'html'

TagOverride = str | Callable[[str, str], str] | None

DEFAULT_STARTS: dict[str, str] = {
    'html': '<!-- {{name}}:{{ext}} -->',
    'jsx': '{/* {{name}}:{{ext}} */}',
    'jade': '//- {{name}}:{{ext}}',
    'pug': '//- {{name}}:{{ext}}',
    'slm': '/ {{name}}:{{ext}}',
    'slim': '/ {{name}}:{{ext}}',
    'haml': '-# {{name}}:{{ext}}',
    'less': '/* {{name}}:{{ext}} */',
    'sass': '/* {{name}}:{{ext}} */',
    'scss': '/* {{name}}:{{ext}} */',
    'json': '"{{name}}:{{ext}}"',
}

DEFAULT_ENDS: dict[str, str] = {
    'html': '<!-- endinject -->',
    'jsx': '{/* endinject */}',
    'jade': '//- endinject',
    'pug': '//- endinject',
    'slm': '/ endinject',
    'slim': '/ endinject',
    'haml': '-# endinject',
    'less': '/* endinject */',
    'sass': '/* endinject */',
    'scss': '/* endinject */',
    'json': '"endinject"',
}


@dataclass(frozen=True)
class TagPair:
    """A literal (start, end) tag pair delimiting one injection region."""

    start: str
    end: str

    @property
    def key(self) -> str:
        return self.start + self.end


def _lookup(
    rules: Mapping[str, str],
    defaults: Mapping[str, str],
    target_ext: str,
    source_ext: str,
) -> str:
    """Pick the most specific rule template for the extension pairing."""
    for key in (f'{target_ext}:{source_ext}', f'{target_ext}:{ANY}', target_ext):
        if key in rules:
            return rules[key]
    if target_ext in defaults:
        return defaults[target_ext]
    return rules.get(DEFAULT_TARGET, defaults[DEFAULT_TARGET])


@dataclass(frozen=True)
class TagRules:
    """Resolve start/end tag literals from extensions and configured rules.

    ``starts`` and ``ends`` hold user rules keyed by ``"target"`` (any source
    extension) or ``"target:source"``. They take precedence over the
    built-in table, which itself falls back to the ``html`` rules.
    """

    name: str = DEFAULT_NAME
    starts: Mapping[str, str] = field(default_factory=dict)
    ends: Mapping[str, str] = field(default_factory=dict)

    def start(self, target_ext: str, source_ext: str, override: TagOverride = None) -> str:
        tag = self._template(override, target_ext, source_ext) or _lookup(
            self.starts,
            DEFAULT_STARTS,
            target_ext,
            source_ext,
        )
        return self._fill(tag, source_ext)

    def end(self, target_ext: str, source_ext: str, override: TagOverride = None) -> str:
        tag = self._template(override, target_ext, source_ext) or _lookup(
            self.ends,
            DEFAULT_ENDS,
            target_ext,
            source_ext,
        )
        return self._fill(tag, source_ext)

    def resolve(
        self,
        target_ext: str,
        source_ext: str,
        starttag: TagOverride = None,
        endtag: TagOverride = None,
    ) -> TagPair:
        """Return the tag pair a source file with ``source_ext`` targets.

        Explicit ``starttag``/``endtag`` overrides win regardless of the
        extensions. Overrides may be literal templates or callables taking
        ``(target_ext, source_ext)``.
        """
        return TagPair(
            start=self.start(target_ext, source_ext, starttag),
            end=self.end(target_ext, source_ext, endtag),
        )

    @staticmethod
    def _template(override: TagOverride, target_ext: str, source_ext: str) -> str | None:
        if callable(override):
            return override(target_ext, source_ext)
        return override

    def _fill(self, tag: str, source_ext: str) -> str:
        return tag.replace('{{ext}}', source_ext).replace('{{name}}', self.name)
