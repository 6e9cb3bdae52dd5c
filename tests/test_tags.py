from dataclasses import dataclass, field

import pytest

from fileinject.tags import ANY, TagPair, TagRules


@dataclass
class ResolveCase:
    id: str
    target_ext: str
    source_ext: str
    expected: TagPair
    rules: TagRules = field(default_factory=TagRules)
    starttag: object = None
    endtag: object = None


@pytest.mark.parametrize(
    'case',
    [
        ResolveCase(
            id='html_defaults',
            target_ext='html',
            source_ext='js',
            expected=TagPair('<!-- inject:js -->', '<!-- endinject -->'),
        ),
        ResolveCase(
            id='unknown_target_falls_back_to_html',
            target_ext='php',
            source_ext='css',
            expected=TagPair('<!-- inject:css -->', '<!-- endinject -->'),
        ),
        ResolveCase(
            id='jade_comment_style',
            target_ext='jade',
            source_ext='css',
            expected=TagPair('//- inject:css', '//- endinject'),
        ),
        ResolveCase(
            id='jsx_braced_comments',
            target_ext='jsx',
            source_ext='js',
            expected=TagPair('{/* inject:js */}', '{/* endinject */}'),
        ),
        ResolveCase(
            id='custom_name',
            target_ext='html',
            source_ext='js',
            rules=TagRules(name='head'),
            expected=TagPair('<!-- head:js -->', '<!-- endinject -->'),
        ),
        ResolveCase(
            id='explicit_overrides_win',
            target_ext='html',
            source_ext='js',
            rules=TagRules(starts={'html:js': '<!-- never -->'}),
            starttag='<!-- {{name}}:vendor:{{ext}} -->',
            endtag='<!-- endvendor -->',
            expected=TagPair('<!-- inject:vendor:js -->', '<!-- endvendor -->'),
        ),
        ResolveCase(
            id='callable_overrides',
            target_ext='html',
            source_ext='css',
            starttag=lambda target, source: f'<!-- {target}-{source} -->',
            endtag=lambda target, source: f'<!-- /{target} -->',
            expected=TagPair('<!-- html-css -->', '<!-- /html -->'),
        ),
        ResolveCase(
            id='source_specific_rule',
            target_ext='html',
            source_ext='css',
            rules=TagRules(starts={'html:css': '<!-- styles -->'}, ends={'html:css': '<!-- endstyles -->'}),
            expected=TagPair('<!-- styles -->', '<!-- endstyles -->'),
        ),
        ResolveCase(
            id='source_specific_rule_leaves_other_sources',
            target_ext='html',
            source_ext='js',
            rules=TagRules(starts={'html:css': '<!-- styles -->'}),
            expected=TagPair('<!-- inject:js -->', '<!-- endinject -->'),
        ),
        ResolveCase(
            id='wildcard_source_rule',
            target_ext='md',
            source_ext='py',
            rules=TagRules(starts={f'md:{ANY}': '<!-- files:{{ext}} -->'}, ends={'md': '<!-- endfiles -->'}),
            expected=TagPair('<!-- files:py -->', '<!-- endfiles -->'),
        ),
        ResolveCase(
            id='any_placeholder_survives',
            target_ext='html',
            source_ext=ANY,
            expected=TagPair('<!-- inject:{{ANY}} -->', '<!-- endinject -->'),
        ),
    ],
    ids=lambda case: case.id,
)
def test_resolve(case: ResolveCase) -> None:
    assert case.rules.resolve(case.target_ext, case.source_ext, case.starttag, case.endtag) == case.expected


def test_resolve_is_deterministic() -> None:
    rules = TagRules(starts={'html:css': '<!-- styles -->'})
    assert rules.resolve('html', 'css') == rules.resolve('html', 'css')


def test_pair_key_is_concatenation() -> None:
    assert TagPair('<a>', '</a>').key == '<a></a>'
