"""
Tests for ShapeKind catalog and ShapeSelectionViewModel.

Verifies:
- Catalog has all 18 shapes in grid order
- select_shape stores the shape and closes the popover
- Closed enumeration (unknown shapes rejected)
- Popover toggling and change signals
"""
import pytest
from mindflow.models.shape import ShapeKind, SHAPE_CATALOG, shape_label
from mindflow.viewmodels.shape_selection import ShapeSelectionViewModel


EXPECTED_ORDER = [
    (ShapeKind.RECTANGLE, "Rectangle"),
    (ShapeKind.ROUNDED_RECTANGLE, "Rounded Rectangle"),
    (ShapeKind.CIRCLE, "Circle"),
    (ShapeKind.ROUNDED_SQUARE, "Rounded Square"),
    (ShapeKind.LINE, "Line"),
    (ShapeKind.DIAMOND, "Diamond"),
    (ShapeKind.HEXAGON, "Hexagon"),
    (ShapeKind.OCTAGON, "Octagon"),
    (ShapeKind.PARALLELOGRAM, "Parallelogram"),
    (ShapeKind.CLOUD, "Cloud"),
    (ShapeKind.HEART, "Heart"),
    (ShapeKind.SHIELD, "Shield"),
    (ShapeKind.STAR, "Star"),
    (ShapeKind.DOCUMENT, "Document"),
    (ShapeKind.DOUBLE_RECTANGLE, "Double Rectangle"),
    (ShapeKind.FLAG, "Flag"),
    (ShapeKind.LEFT_ARROW, "Left Arrow"),
    (ShapeKind.RIGHT_ARROW, "Right Arrow"),
]


# ══════════════════════════════════════════════════════════════════════════
# Catalog
# ══════════════════════════════════════════════════════════════════════════

class TestShapeCatalog:

    def test_eighteen_entries(self):
        assert len(SHAPE_CATALOG) == 18
        assert len(ShapeSelectionViewModel.SHAPES) == 18

    def test_order(self):
        assert list(ShapeSelectionViewModel.SHAPES) == EXPECTED_ORDER

    def test_covers_enumeration(self):
        assert [shape for shape, _ in SHAPE_CATALOG] == list(ShapeKind)

    def test_labels(self):
        assert shape_label(ShapeKind.DOUBLE_RECTANGLE) == "Double Rectangle"
        assert shape_label("left_arrow") == "Left Arrow"

    def test_catalog_rows(self, shape_vm):
        rows = shape_vm.catalog_rows()
        assert len(rows) == 6
        assert all(len(row) == 3 for row in rows)
        assert rows[0][2] == (ShapeKind.CIRCLE, "Circle")
        assert [entry for row in rows for entry in row] == EXPECTED_ORDER


# ══════════════════════════════════════════════════════════════════════════
# Selection
# ══════════════════════════════════════════════════════════════════════════

class TestSelectShape:

    def test_default(self, shape_vm):
        assert shape_vm.selected_shape is ShapeKind.RECTANGLE
        assert shape_vm.is_showing_popover is False

    def test_initial_shape(self):
        vm = ShapeSelectionViewModel(ShapeKind.STAR)
        assert vm.selected_shape is ShapeKind.STAR
        assert vm.selected_label == "Star"

    @pytest.mark.parametrize("shape", list(ShapeKind))
    def test_select_and_read(self, shape_vm, shape):
        shape_vm.show_popover()
        shape_vm.select_shape(shape)
        assert shape_vm.selected_shape is shape
        assert shape_vm.is_showing_popover is False

    def test_select_by_value(self, shape_vm):
        shape_vm.select_shape("cloud")
        assert shape_vm.selected_shape is ShapeKind.CLOUD

    @pytest.mark.parametrize("bad", ["triangle", 3, None])
    def test_unknown_shape_rejected(self, shape_vm, bad):
        with pytest.raises(ValueError):
            shape_vm.select_shape(bad)
        assert shape_vm.selected_shape is ShapeKind.RECTANGLE

    def test_same_shape_still_closes_popover(self, shape_vm):
        shape_vm.show_popover()
        shape_vm.select_shape(ShapeKind.RECTANGLE)
        assert shape_vm.is_showing_popover is False


# ══════════════════════════════════════════════════════════════════════════
# Popover and signals
# ══════════════════════════════════════════════════════════════════════════

class TestPopover:

    def test_toggle(self, shape_vm):
        shape_vm.toggle_popover()
        assert shape_vm.is_showing_popover
        shape_vm.toggle_popover()
        assert not shape_vm.is_showing_popover

    def test_show_hide(self, shape_vm):
        shape_vm.show_popover()
        shape_vm.show_popover()
        assert shape_vm.is_showing_popover
        shape_vm.hide_popover()
        assert not shape_vm.is_showing_popover

    def test_popover_signal(self, shape_vm):
        seen = []
        shape_vm.popoverChanged.connect(seen.append)
        shape_vm.show_popover()
        shape_vm.show_popover()
        shape_vm.select_shape(ShapeKind.HEART)
        assert seen == [True, False]

    def test_shape_signal(self, qtbot, shape_vm):
        with qtbot.waitSignal(shape_vm.shapeChanged) as blocker:
            shape_vm.select_shape(ShapeKind.FLAG)
        assert blocker.args == [ShapeKind.FLAG]

    def test_reselect_does_not_emit_shape(self, shape_vm):
        seen = []
        shape_vm.shapeChanged.connect(seen.append)
        shape_vm.select_shape(ShapeKind.RECTANGLE)
        assert seen == []
