"""
Tests for ColorSelectionViewModel.

Verifies:
- hex_value always matches the selected color (recompute on every write)
- update_from_hex success and the three invalid input policies
- Opacity clamping and independence from the hex text
- Palette shape and contents
- Change signals fire once per real change
"""
import logging

import pytest
from mindflow.models.color import Color
from mindflow.models.errors import InvalidHexColorError
from mindflow.utils.logger import InvalidInputPolicy
from mindflow.viewmodels.color_selection import ColorSelectionViewModel


# ══════════════════════════════════════════════════════════════════════════
# Selection and derived hex
# ══════════════════════════════════════════════════════════════════════════

class TestSelectColor:

    def test_defaults(self, color_vm):
        assert color_vm.selected_color == Color(0, 0, 0)
        assert color_vm.hex_value == "000000"
        assert color_vm.opacity == 1.0

    def test_initial_color_sets_hex(self):
        vm = ColorSelectionViewModel(Color(18, 52, 86), opacity=0.5)
        assert vm.hex_value == "123456"
        assert vm.opacity == 0.5

    @pytest.mark.parametrize("rgb,expected", [
        ((255, 0, 0), "FF0000"),
        ((0, 128, 255), "0080FF"),
        ((1, 2, 3), "010203"),
        ((255, 255, 255), "FFFFFF"),
    ])
    def test_select_updates_hex(self, color_vm, rgb, expected):
        color_vm.select_color(Color(*rgb))
        assert color_vm.hex_value == expected
        assert color_vm.selected_color.to_rgb255() == list(rgb)

    def test_hex_excludes_alpha(self, color_vm):
        color_vm.select_color(Color(128, 128, 128, alpha=0.2))
        assert color_vm.hex_value == "808080"

    def test_selected_color_is_a_copy(self, color_vm):
        color_vm.select_color(Color(10, 20, 30))
        leaked = color_vm.selected_color
        leaked.set_rgb255(99, 99, 99)
        assert color_vm.selected_color == Color(10, 20, 30)
        assert color_vm.hex_value == "0A141E"

    def test_caller_color_mutation_does_not_leak_in(self, color_vm):
        mine = Color(10, 20, 30)
        color_vm.select_color(mine)
        mine.set_rgb255(99, 99, 99)
        assert color_vm.hex_value == "0A141E"

    def test_rejects_non_color(self, color_vm):
        with pytest.raises(TypeError):
            color_vm.select_color("#FF0000")


# ══════════════════════════════════════════════════════════════════════════
# Hex text input
# ══════════════════════════════════════════════════════════════════════════

class TestUpdateFromHex:

    def test_pure_red(self, color_vm):
        assert color_vm.update_from_hex("#FF0000") is True
        c = color_vm.selected_color
        assert (c.r, c.g, c.b) == (255, 0, 0)

    def test_hex_value_follows(self, color_vm):
        color_vm.update_from_hex("#abcdef")
        assert color_vm.hex_value == "ABCDEF"

    def test_invalid_leaves_state_unchanged(self, color_vm):
        color_vm.select_color(Color(0, 255, 0))
        assert color_vm.update_from_hex("zzzzzz") is False
        assert color_vm.selected_color == Color(0, 255, 0)
        assert color_vm.hex_value == "00FF00"

    @pytest.mark.parametrize("text", ["FFF", "#FFF", "FF00", "FF00GG", "FF00001"])
    def test_short_and_partial_hex_rejected(self, color_vm, text):
        color_vm.select_color(Color(0, 0, 255))
        assert color_vm.update_from_hex(text) is False
        assert color_vm.selected_color == Color(0, 0, 255)
        assert color_vm.hex_value == "0000FF"

    def test_ignore_policy_is_silent(self, color_vm, caplog):
        with caplog.at_level(logging.DEBUG, logger='ColorSelection'):
            color_vm.update_from_hex("zzzzzz")
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_warn_policy_logs(self, caplog):
        vm = ColorSelectionViewModel(invalid_input_policy=InvalidInputPolicy.WARN)
        with caplog.at_level(logging.WARNING, logger='ColorSelection'):
            assert vm.update_from_hex("zzzzzz") is False
        assert any("zzzzzz" in r.getMessage() for r in caplog.records)
        assert vm.hex_value == "000000"

    def test_raise_policy(self):
        vm = ColorSelectionViewModel(invalid_input_policy='raise')
        with pytest.raises(InvalidHexColorError) as excinfo:
            vm.update_from_hex("zzzzzz")
        assert excinfo.value.text == "zzzzzz"
        assert vm.hex_value == "000000"

    def test_raise_error_is_value_error(self):
        vm = ColorSelectionViewModel(invalid_input_policy=InvalidInputPolicy.RAISE)
        with pytest.raises(ValueError):
            vm.update_from_hex("#12345")


# ══════════════════════════════════════════════════════════════════════════
# Opacity
# ══════════════════════════════════════════════════════════════════════════

class TestOpacity:

    @pytest.mark.parametrize("value,expected", [(0.3, 0.3), (-1.0, 0.0), (2.0, 1.0)])
    def test_clamped(self, color_vm, value, expected):
        color_vm.set_opacity(value)
        assert color_vm.opacity == pytest.approx(expected)

    def test_does_not_touch_hex(self, color_vm):
        color_vm.update_from_hex("112233")
        color_vm.set_opacity(0.1)
        assert color_vm.hex_value == "112233"


# ══════════════════════════════════════════════════════════════════════════
# Palette
# ══════════════════════════════════════════════════════════════════════════

class TestPalette:

    def test_rows(self):
        palette = ColorSelectionViewModel.PALETTE
        assert len(palette) == 5
        assert [len(row) for row in palette] == [7, 9, 9, 9, 9]

    def test_neutral_row(self):
        row = ColorSelectionViewModel.PALETTE[0]
        assert row[0] == Color(255, 255, 255)
        assert row[-1] == Color(0, 0, 0)
        assert [c.alpha for c in row[1:5]] == pytest.approx([0.2, 0.4, 0.6, 0.8])

    def test_all_entries_are_colors(self):
        for row in ColorSelectionViewModel.PALETTE:
            for color in row:
                assert isinstance(color, Color)

    def test_palette_is_read_only(self):
        with pytest.raises(TypeError):
            ColorSelectionViewModel.PALETTE[0][0] = Color(1, 1, 1)


# ══════════════════════════════════════════════════════════════════════════
# Signals
# ══════════════════════════════════════════════════════════════════════════

class TestColorSignals:

    def test_select_emits(self, qtbot, color_vm):
        with qtbot.waitSignals([color_vm.colorChanged, color_vm.hexValueChanged]):
            color_vm.select_color(Color(255, 0, 0))

    def test_hex_signal_payload(self, color_vm):
        seen = []
        color_vm.hexValueChanged.connect(seen.append)
        color_vm.update_from_hex("#00FF00")
        assert seen == ["00FF00"]

    def test_same_color_does_not_emit(self, color_vm):
        seen = []
        color_vm.colorChanged.connect(seen.append)
        color_vm.select_color(Color(0, 0, 0))
        assert seen == []

    def test_alpha_only_change_keeps_hex_signal_quiet(self, color_vm):
        colors, hexes = [], []
        color_vm.colorChanged.connect(colors.append)
        color_vm.hexValueChanged.connect(hexes.append)
        color_vm.select_color(Color(0, 0, 0, alpha=0.5))
        assert len(colors) == 1
        assert hexes == []

    def test_invalid_hex_emits_nothing(self, color_vm):
        seen = []
        color_vm.colorChanged.connect(seen.append)
        color_vm.hexValueChanged.connect(seen.append)
        color_vm.update_from_hex("zzzzzz")
        assert seen == []

    def test_opacity_signal(self, color_vm):
        seen = []
        color_vm.opacityChanged.connect(seen.append)
        color_vm.set_opacity(0.25)
        color_vm.set_opacity(0.25)
        assert seen == [pytest.approx(0.25)]
