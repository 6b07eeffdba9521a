"""Unit tests for bounds checks, overlap detection and strict validation."""

from typing import Any

import pytest

from gridboard.errors import (
    BoundsViolation,
    DashboardValidationError,
    OverlapViolation,
    RangeViolation,
    SchemaError,
    ShapeError,
)
from gridboard.models.dashboard import DashboardData, GridBounds, GridLayout, GridPosition, GridSize
from gridboard.services.geometry import (
    check_dashboard,
    do_overlap,
    find_duplicate_ids,
    find_overlaps,
    get_widget_bounds,
    is_area_occupied,
    is_valid_position,
    is_valid_widget_placement,
    validate_dashboard,
)
from tests.fixtures.test_data import DashboardFactory, wire_dashboard


class TestBounds:
    """Position and footprint bounds checks."""

    def test_is_valid_position(self, layout_4x4: GridLayout) -> None:
        """Only cells inside the grid are valid."""
        assert is_valid_position(GridPosition(column=0, row=0), layout_4x4)
        assert is_valid_position(GridPosition(column=3, row=3), layout_4x4)
        assert not is_valid_position(GridPosition(column=4, row=0), layout_4x4)
        assert not is_valid_position(GridPosition(column=0, row=4), layout_4x4)

    def test_widget_placement_checks_far_edge(self, layout_4x4: GridLayout) -> None:
        """A widget fits only if its far edges stay inside the grid."""
        assert is_valid_widget_placement(DashboardFactory.widget(width=4, height=4), layout_4x4)
        assert is_valid_widget_placement(
            DashboardFactory.widget(column=2, row=3, width=2, height=1), layout_4x4
        )
        assert not is_valid_widget_placement(
            DashboardFactory.widget(column=3, row=0, width=2, height=1), layout_4x4
        )
        assert not is_valid_widget_placement(
            DashboardFactory.widget(column=0, row=3, width=1, height=2), layout_4x4
        )

    def test_widget_bounds_are_inclusive(self) -> None:
        """Bounds report the last covered cell, not the edge."""
        widget = DashboardFactory.widget(column=1, row=2, width=3, height=2)
        assert get_widget_bounds(widget) == GridBounds(
            min_column=1, max_column=3, min_row=2, max_row=3
        )


class TestOverlap:
    """Pairwise rectangle intersection."""

    def test_adjacent_and_overlapping(self) -> None:
        """A 2x1 widget at A1 overlaps B1 but not C1."""
        wide = DashboardFactory.widget("wide", column=0, row=0, width=2, height=1)
        at_b1 = DashboardFactory.widget("b1", column=1, row=0)
        at_c1 = DashboardFactory.widget("c1", column=2, row=0)

        assert do_overlap(wide, at_b1)
        assert not do_overlap(wide, at_c1)

    def test_symmetric(self) -> None:
        """Overlap does not depend on argument order."""
        widgets = [
            DashboardFactory.widget("a", column=0, row=0, width=2, height=2),
            DashboardFactory.widget("b", column=1, row=1, width=2, height=2),
            DashboardFactory.widget("c", column=3, row=0, width=1, height=3),
            DashboardFactory.widget("d", column=0, row=2, width=3, height=1),
        ]
        for first in widgets:
            for second in widgets:
                assert do_overlap(first, second) == do_overlap(second, first)

    def test_same_id_never_overlaps(self) -> None:
        """A widget does not overlap itself, nor a widget sharing its id."""
        widget = DashboardFactory.widget("same", width=2, height=2)
        twin = DashboardFactory.widget("same", column=1, row=1)
        assert not do_overlap(widget, widget)
        assert not do_overlap(widget, twin)

    def test_corner_touching_is_not_overlap(self) -> None:
        """Footprints are half-open, so touching corners do not intersect."""
        first = DashboardFactory.widget("a", column=0, row=0, width=2, height=2)
        second = DashboardFactory.widget("b", column=2, row=2, width=2, height=2)
        assert not do_overlap(first, second)

    def test_find_overlaps_reports_all_pairs(self) -> None:
        """Every overlapping pair is listed in list order."""
        widgets = [
            DashboardFactory.widget("a", width=2, height=2),
            DashboardFactory.widget("b", column=1, row=1),
            DashboardFactory.widget("c", column=3, row=3),
            DashboardFactory.widget("d", column=1, row=0),
        ]
        assert find_overlaps(widgets) == [("a", "b"), ("a", "d")]

    def test_is_area_occupied(self) -> None:
        """Free areas are detected; the excluded widget is ignored."""
        widgets = [DashboardFactory.widget("a", width=2, height=1)]
        size = GridSize(width=1, height=1)

        assert is_area_occupied(GridPosition(column=1, row=0), size, widgets)
        assert not is_area_occupied(GridPosition(column=2, row=0), size, widgets)
        assert not is_area_occupied(GridPosition(column=1, row=0), size, widgets, exclude_id="a")

    def test_find_duplicate_ids(self) -> None:
        """Repeated ids are reported once each."""
        widgets = [
            DashboardFactory.widget("a"),
            DashboardFactory.widget("b", column=1),
            DashboardFactory.widget("a", column=2),
            DashboardFactory.widget("a", column=3),
        ]
        assert find_duplicate_ids(widgets) == ["a"]
        assert find_duplicate_ids(widgets[:2]) == []


class TestValidateDashboard:
    """Strict fail-fast validation."""

    def test_valid_typed_dashboard(self, two_widget_dashboard: DashboardData) -> None:
        """A legal document validates and is returned unchanged."""
        assert validate_dashboard(two_widget_dashboard) is two_widget_dashboard

    def test_valid_wire_dashboard(self) -> None:
        """A legal wire document validates into a typed dashboard."""
        dashboard = validate_dashboard(wire_dashboard())
        assert isinstance(dashboard, DashboardData)
        assert [widget.id for widget in dashboard.widgets] == ["banner", "users"]

    def test_identical_positions_overlap(self) -> None:
        """Two widgets at the same position fail naming both ids."""
        dashboard = DashboardFactory.dashboard(
            widgets=[
                DashboardFactory.widget("first", column=1, row=1),
                DashboardFactory.widget("second", column=1, row=1),
            ]
        )
        with pytest.raises(OverlapViolation) as exc_info:
            validate_dashboard(dashboard)

        assert exc_info.value.widget_ids == ("first", "second")
        assert "first" in str(exc_info.value)
        assert "second" in str(exc_info.value)

    def test_first_overlap_pair_reported(self) -> None:
        """The first pair in list order is the one reported."""
        dashboard = DashboardFactory.dashboard(
            widgets=[
                DashboardFactory.widget("a", column=0, row=0),
                DashboardFactory.widget("b", column=2, row=2, width=2, height=2),
                DashboardFactory.widget("c", column=3, row=3),
                DashboardFactory.widget("d", column=0, row=0),
            ]
        )
        with pytest.raises(OverlapViolation) as exc_info:
            validate_dashboard(dashboard)
        assert exc_info.value.widget_ids == ("a", "d")

    def test_bounds_checked_before_overlap(self) -> None:
        """An out-of-bounds widget is reported even when others overlap."""
        dashboard = DashboardFactory.dashboard(
            widgets=[
                DashboardFactory.widget("a"),
                DashboardFactory.widget("b"),
                DashboardFactory.widget("wide", column=3, row=0, width=3),
            ]
        )
        with pytest.raises(BoundsViolation) as exc_info:
            validate_dashboard(dashboard)
        assert exc_info.value.widget_ids == ("wide",)
        assert "outside grid bounds" in str(exc_info.value)

    def test_shared_ids_are_overlap_exempt(self) -> None:
        """Widgets sharing an id do not trigger an overlap failure."""
        dashboard = DashboardFactory.dashboard(
            widgets=[DashboardFactory.widget("dup"), DashboardFactory.widget("dup")]
        )
        assert validate_dashboard(dashboard) is dashboard

    @pytest.mark.parametrize(
        ("overrides", "path"),
        [
            ({"version": 1}, "version"),
            ({"version": ""}, "version"),
            ({"layout": []}, "layout"),
            ({"widgets": {}}, "widgets"),
            ({"metadata": None}, "metadata"),
        ],
    )
    def test_document_shape(self, overrides: dict[str, Any], path: str) -> None:
        """Top-level fields must be present with the right type."""
        with pytest.raises(SchemaError) as exc_info:
            validate_dashboard(wire_dashboard(**overrides))
        assert exc_info.value.path == path

    def test_non_object_rejected(self) -> None:
        """A non-object document is a shape error."""
        with pytest.raises(ShapeError):
            validate_dashboard(["not", "a", "dashboard"])

    @pytest.mark.parametrize(
        ("layout", "path"),
        [
            ({"columns": 13, "rows": 4, "cellSize": {"width": 200, "height": 150}}, "layout.columns"),
            ({"columns": 4, "rows": 0, "cellSize": {"width": 200, "height": 150}}, "layout.rows"),
            ({"columns": 4, "rows": 4, "cellSize": {"width": 99, "height": 150}}, "layout.cellSize.width"),
            ({"columns": 4, "rows": 4, "cellSize": {"width": 200, "height": 501}}, "layout.cellSize.height"),
        ],
    )
    def test_layout_ranges(self, layout: dict[str, Any], path: str) -> None:
        """Out-of-range layout values are rejected, not clamped."""
        with pytest.raises(RangeViolation) as exc_info:
            validate_dashboard(wire_dashboard(layout=layout))
        assert exc_info.value.path == path

    def test_widget_missing_id(self) -> None:
        """Each widget needs a string id."""
        document = wire_dashboard()
        del document["widgets"][1]["id"]
        with pytest.raises(SchemaError) as exc_info:
            validate_dashboard(document)
        assert exc_info.value.path == "widgets[1].id"

    def test_widget_size_range(self) -> None:
        """Spans above six are rejected with the widget id."""
        document = wire_dashboard()
        document["widgets"][0]["size"] = {"width": 7, "height": 1}
        with pytest.raises(RangeViolation) as exc_info:
            validate_dashboard(document)
        assert exc_info.value.widget_ids == ("banner",)

    def test_wire_widget_negative_position(self) -> None:
        """Negative positions are outside the grid."""
        document = wire_dashboard()
        document["widgets"][1]["position"] = {"column": -1, "row": 0}
        with pytest.raises(BoundsViolation) as exc_info:
            validate_dashboard(document)
        assert exc_info.value.widget_ids == ("users",)

    def test_wire_overlap(self) -> None:
        """Overlap in a wire document names both widgets."""
        document = wire_dashboard()
        document["widgets"][1]["position"] = {"column": 1, "row": 0}
        with pytest.raises(OverlapViolation) as exc_info:
            validate_dashboard(document)
        assert exc_info.value.widget_ids == ("banner", "users")


class TestCheckDashboard:
    """Result-returning wrapper."""

    def test_ok(self, two_widget_dashboard: DashboardData) -> None:
        """Valid dashboards come back wrapped in Ok."""
        result = check_dashboard(two_widget_dashboard)
        assert result.is_ok()
        assert result.unwrap() is two_widget_dashboard

    def test_err(self) -> None:
        """Failures come back as Err holding the exception."""
        result = check_dashboard(wire_dashboard(version=None))
        assert result.is_err()
        error = result.unwrap_err()
        assert isinstance(error, DashboardValidationError)
        assert error.to_dict()["path"] == "version"
