"""Tests for the command registry and the material-colors CLI."""

import json
from pathlib import Path

import pytest
from material_colors import registry
from material_colors.__main__ import build_context, main
from material_colors.core.config import CONFIG_ENV_VAR
from material_colors.core.types import Command, Report
from PIL import Image


@pytest.fixture(autouse=True)
def no_user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the real ~/.materialcolorsapp.json out of the tests."""
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / 'no-config.json'))


def _run(capsys, *argv) -> str:
    main(list(argv))
    return capsys.readouterr().out


def _run_json(capsys, *argv) -> dict:
    return json.loads(_run(capsys, *argv, '--json'))


class TestRegistry:
    def test_discovers_commands(self):
        assert set(registry.all_commands()) == {'copy', 'format', 'hue', 'hues', 'search', 'swatch'}

    def test_helpers_are_not_commands(self):
        assert '_tiles' not in registry.all_commands()

    def test_unknown_command(self):
        with pytest.raises(KeyError, match='Unknown command'):
            registry.get('nope')

    def test_command_without_run(self):
        with pytest.raises(RuntimeError):
            Command('empty').execute(None, Report(), None)


class TestBuildContext:
    def test_extra_colors_merged_first(self, tmp_path: Path) -> None:
        path = tmp_path / 'c.json'
        path.write_text(json.dumps({'extraColors': {'brand': {'500': {'hex': '#1a73e8'}}}}))
        ctx = build_context(str(path))
        assert list(ctx.catalog)[:2] == ['brand', 'red']
        assert ctx.catalog['red'].start_group
        assert ctx.index.find_by_hex('#1a73e8')[0].hue_name == 'brand'


class TestSearchCommand:
    def test_exact_match_text(self, capsys):
        out = _run(capsys, 'search', '#f44336')
        assert '#F44336' in out
        assert 'Red 500' in out
        assert 'Matches' in out

    def test_similar_json(self, capsys):
        data = _run_json(capsys, 'search', '#f44337')
        names = [s['name'] for s in data['sections']]
        assert names == ['Matches', 'Similar colors']
        assert data['sections'][1]['entries'][0]['hue'] == 'red'
        assert data['sections'][1]['entries'][0]['distance'] == 1.0

    def test_unknown_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['search', 'not-a-colour'])
        assert exc.value.code == 1
        assert 'Unknown color' in capsys.readouterr().out

    def test_empty_shows_help(self, capsys):
        assert 'Search by material color name' in _run(capsys, 'search')


class TestHueCommands:
    def test_hues(self, capsys):
        data = _run_json(capsys, 'hues')
        entries = data['sections'][0]['entries']
        assert entries[0]['name'] == 'red'
        assert entries[0]['selector'] == '#f44336'
        assert entries[-1]['label'] == 'Black And White'

    def test_hues_dark(self, capsys):
        data = _run_json(capsys, 'hues', '--dark')
        assert data['sections'][0]['entries'][0]['selector'] == '#e57373'

    def test_hue_groups(self, capsys):
        data = _run_json(capsys, 'hue', 'black-and-white')
        assert [s['name'] for s in data['sections']] == ['group-1', 'group-2']
        assert [s['heading'] for s in data['sections']] == ['', 'text-on-light']

    def test_hue_groups_text_skips_untitled_heading(self, capsys):
        out = _run(capsys, 'hue', 'black-and-white')
        assert '── text-on-light' in out
        assert 'Group 1' not in out
        assert '── \n' not in out

    def test_hue_group_titles_never_merge(self, capsys, tmp_path: Path) -> None:
        path = tmp_path / 'catalog.json'
        path.write_text(json.dumps({
            'x': {
                '1': {'hex': '#111111'},
                '_groups': [
                    {'title': 'Values', 'colors': [{'name': 'a', 'hex': '#222222'}]},
                    {'title': 'Values', 'colors': [{'name': 'b', 'hex': '#333333'}]},
                ],
            },
        }))
        data = _run_json(capsys, '--catalog', str(path), 'hue', 'x')
        assert [s['heading'] for s in data['sections']] == ['Values', 'Values', 'Values']
        assert [len(s['entries']) for s in data['sections']] == [1, 1, 1]

    def test_hue_values(self, capsys):
        data = _run_json(capsys, 'hue', 'brown')
        assert [s['name'] for s in data['sections']] == ['values']
        assert data['sections'][0]['heading'] == 'Values'
        assert len(data['sections'][0]['entries']) == 10

    def test_unknown_hue(self):
        with pytest.raises(SystemExit):
            main(['hue', 'chartreuse'])


class TestCopyAndFormat:
    def test_copy_default(self, capsys):
        data = _run_json(capsys, 'copy', '#03a9f4')
        texts = [e['text'] for e in data['sections'][0]['entries']]
        assert texts == ['#03a9f4', '03a9f4', 'rgb(3, 169, 244)', 'Light Blue 500']

    def test_copy_uses_config(self, capsys, tmp_path: Path) -> None:
        path = tmp_path / 'c.json'
        path.write_text(json.dumps({'copyFormats': [{'format': '$HUE_$VALUE', 'transform': '_X'}]}))
        data = _run_json(capsys, '--config', str(path), 'copy', '#03a9f4')
        assert data['sections'][0]['entries'][-1]['text'] == 'LIGHT_BLUE_500'

    def test_format(self, capsys):
        data = _run_json(capsys, 'format', 'rgba(3, 169, 244, .5)', '--pattern', '$HUE-$VALUE/$ALPHA', '--transform', 'dX')
        assert data['sections'][0]['entries'][0]['text'] == 'LIGHTBLUE-500/50'

    def test_format_invalid_transform_noted(self, capsys):
        data = _run_json(capsys, 'format', '#03a9f4', '--pattern', '$HUE', '--transform', 'zz')
        assert data['sections'][0]['entries'][0]['text'] == 'light-blue'
        assert any('invalid transform' in n for n in data['notes'])


class TestSwatchCommand:
    def test_writes_png(self, capsys, tmp_path: Path) -> None:
        out = tmp_path / 'out' / 'indigo.png'
        _run(capsys, 'swatch', 'indigo', str(out), '--tile', '10', '--width', '100')
        img = Image.open(out)
        assert img.size == (100, 140)
        assert img.getpixel((1, 55)) == (63, 81, 181)  # indigo 500, sixth tile


class TestHelp:
    def test_help_lists_commands(self, capsys):
        out = _run(capsys, 'help')
        assert 'search' in out and 'swatch' in out

    def test_help_for_command(self, capsys):
        assert 'nearest catalog colours' in _run(capsys, 'help', 'search')

    def test_help_unknown(self):
        with pytest.raises(SystemExit):
            main(['help', 'nope'])
