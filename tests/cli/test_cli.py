import textwrap
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from fileinject.cli.main import app
from fileinject.version import __version__


def run_app(mocker: MockerFixture, *argv: str) -> int:
    mocker.patch('sys.argv', ['fileinject', *argv])
    with pytest.raises(SystemExit) as exc_info:
        app()
    return exc_info.value.code


def test_version(mocker: MockerFixture, capsys: pytest.CaptureFixture[str]) -> None:
    assert run_app(mocker, '--version') == 0
    assert __version__ in capsys.readouterr().out


def test_apply_command(tmp_path: Path, mocker: MockerFixture) -> None:
    (tmp_path / 'index.html').write_text('<!-- inject:js --><!-- endinject -->', encoding='utf-8')
    (tmp_path / 'app.js').write_text('', encoding='utf-8')
    config_file = tmp_path / 'fileinject.yaml'
    config_file.write_text(
        textwrap.dedent("""\
            injections:
              - targets: index.html
                sources: '*.js'
            """),
        encoding='utf-8',
    )

    assert run_app(mocker, 'apply', '--config', str(config_file)) == 0
    assert (tmp_path / 'index.html').read_text(encoding='utf-8') == (
        '<!-- inject:js --><script src="/app.js"></script><!-- endinject -->'
    )


def test_invalid_config_exits_with_error(tmp_path: Path, mocker: MockerFixture) -> None:
    config_file = tmp_path / 'fileinject.yaml'
    config_file.write_text('options:\n  templateString: x\ninjections: []\n', encoding='utf-8')

    assert run_app(mocker, 'apply', '--config', str(config_file)) == 1
