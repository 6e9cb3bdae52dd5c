from pathlib import Path
from textwrap import dedent

import pytest

from fileinject.commands.preview import command


def test_preview_prints_result(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(tmp_path)
    preview_file = tmp_path / 'preview.yaml'
    preview_file.write_text(
        dedent("""\
            template: |
              <!-- inject:js -->
              <!-- endinject -->
            target: index.html
            sources: [vendor/jquery.js, app.js]
            options:
              addRootSlash: false
            """),
        encoding='utf-8',
    )

    assert command(preview_file, show_groups=True) == 0

    out = capsys.readouterr().out
    assert '<!-- inject:js --> ... <!-- endinject -->' in out
    assert '  vendor/jquery.js' in out
    assert '<script src="vendor/jquery.js"></script>\n<script src="app.js"></script>' in out


def test_preview_with_template_transform(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(tmp_path)
    preview_file = tmp_path / 'preview.yaml'
    preview_file.write_text(
        dedent("""\
            template: "/* inject:scss */\\n/* endinject */"
            target: main.scss
            sources: [a.scss]
            transform: '@use "{{ path }}";'
            """),
        encoding='utf-8',
    )

    assert command(preview_file, show_groups=False) == 0

    assert '/* inject:scss */\n@use "/a.scss";\n/* endinject */' in capsys.readouterr().out
