"""Tests for material_colors.core.search: outcomes, tiles, copy options, clipboard."""

from material_colors.core.search import (
    ClipboardMonitor,
    ColorHit,
    SearchStatus,
    build_tile,
    click_copy_text,
    copy_options,
    search,
)
from material_colors.core.types import FormatTemplate


class TestSearch:
    def test_empty(self, index):
        assert search(index, '').status is SearchStatus.EMPTY
        assert search(index, '   ').status is SearchStatus.EMPTY
        assert search(index, None).status is SearchStatus.EMPTY

    def test_unknown(self, index):
        result = search(index, 'definitely not a colour')
        assert result.status is SearchStatus.UNKNOWN
        assert result.matches == []

    def test_exact_match(self, index):
        result = search(index, '#F44336')
        assert result.status is SearchStatus.MATCH
        assert [(h.record.hue_name, h.record.value_name) for h in result.matches] == [('red', '500')]
        assert result.similar == []

    def test_exact_match_via_rgb(self, index):
        result = search(index, 'rgb(33, 150, 243)')
        assert result.matches[0].record.hue_name == 'blue'

    def test_match_carries_alpha(self, index):
        result = search(index, 'rgba(244, 67, 54, 0.5)')
        assert result.status is SearchStatus.MATCH
        assert result.matches[0].alpha == 0.5

    def test_multiple_matches(self, index):
        result = search(index, '#212121')
        assert [h.record.hue_name for h in result.matches] == ['grey', 'black-and-white']

    def test_similar(self, index):
        result = search(index, '#f44337')
        assert result.status is SearchStatus.SIMILAR
        assert len(result.matches) == 1
        assert result.matches[0].record is None
        assert result.matches[0].hex == '#f44337'
        assert len(result.similar) == 3
        assert result.similar[0].record.value_name == '500'
        assert result.similar[0].distance == 1.0


class TestBuildTile:
    def test_catalog_tile(self, index):
        hit = search(index, '#f44336').matches[0]
        tile = build_tile(hit, large=True)
        assert tile.hex_label == '#F44336'
        assert tile.value_label == '500'
        assert tile.hue_label == 'Red'
        assert tile.alpha_label is None
        assert tile.light_text

    def test_small_tile_has_no_hue_label(self, index):
        hit = search(index, '#f44336').matches[0]
        assert build_tile(hit).hue_label is None

    def test_hide_hash(self, index):
        hit = search(index, '#f44336').matches[0]
        assert build_tile(hit, hide_hash=True).hex_label == 'F44336'

    def test_accent_value_upper_cased(self, index):
        hit = search(index, '#ff8a80').matches[0]
        assert build_tile(hit).value_label == 'A100'

    def test_group_tile(self, index):
        hit = search(index, '#212121').matches[1]
        tile = build_tile(hit, large=True)
        assert tile.value_label == 'primary'
        assert tile.hue_label == 'Black And White – text-on-light'

    def test_alpha_label(self, index):
        hit = search(index, 'rgba(244, 67, 54, 0.5)').matches[0]
        assert build_tile(hit, large=True).alpha_label == 'Alpha 50%'
        assert build_tile(hit, large=False).alpha_label is None

    def test_very_translucent_uses_dark_text(self):
        tile = build_tile(ColorHit(hex='#000000', alpha=0.3))
        assert not tile.light_text

    def test_light_colour_uses_dark_text(self):
        assert not build_tile(ColorHit(hex='#ffeb3b')).light_text

    def test_raw_colour_tile(self):
        tile = build_tile(ColorHit(hex='#123456'), large=True)
        assert tile.value_label is None
        assert tile.hue_label is None


class TestCopyOptions:
    def test_default_value_format(self, index):
        hit = search(index, '#03a9f4').matches[0]
        options = copy_options(hit)
        assert options.hex_formats == ['#03a9f4', '03a9f4', 'rgb(3, 169, 244)']
        assert options.value_formats == ['Light Blue 500']
        assert options.all == options.hex_formats + options.value_formats

    def test_translucent_adds_rgba(self, index):
        hit = search(index, 'rgba(3, 169, 244, 0.3)').matches[0]
        assert copy_options(hit).hex_formats[-1] == 'rgba(3, 169, 244, .30)'

    def test_configured_formats_in_order(self, index):
        hit = search(index, '#ff80ab').matches[0]
        formats = [FormatTemplate('$HUE_$VALUE', '_x'), FormatTemplate('$HUE $VALUE', 'X')]
        assert copy_options(hit, formats).value_formats == ['pink_a100', 'PINK A100']

    def test_click_copy_uses_first_format(self, index):
        hit = search(index, '#ff80ab').matches[0]
        formats = [FormatTemplate('$HUE_$VALUE', '_x'), FormatTemplate('$HUE $VALUE', 'X')]
        assert click_copy_text(hit, formats) == 'pink_a100'
        assert click_copy_text(hit) == 'Pink A100'

    def test_grouped_click_copy(self, index):
        hit = search(index, '#757575').matches[1]
        assert click_copy_text(hit) == 'Black And White Text On Light-Secondary'


class TestClipboardMonitor:
    def test_new_colour_triggers_search(self):
        monitor = ClipboardMonitor()
        assert monitor.check('#f44336').hex == '#f44336'

    def test_same_text_only_once(self):
        monitor = ClipboardMonitor()
        monitor.check('#f44336')
        assert monitor.check('#f44336') is None

    def test_own_copy_is_ignored(self):
        monitor = ClipboardMonitor()
        monitor.on_copied('Red 500')
        assert monitor.check('Red 500') is None
        monitor.on_copied('#f44336')
        assert monitor.check('#f44336') is None

    def test_non_colour_is_remembered(self):
        monitor = ClipboardMonitor()
        assert monitor.check('hello') is None
        assert monitor.last_seen == 'hello'

    def test_none(self):
        assert ClipboardMonitor().check(None) is None
