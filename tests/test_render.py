from __future__ import annotations

import numpy as np
import pytest

from logitlab import config
from logitlab.controller.render import RenderCoordinator, heatmap_color
from logitlab.model.classifier import ModelParameters
from tests.conftest import RecordingSurface


@pytest.fixture
def coordinator(state) -> RenderCoordinator:
    return RenderCoordinator(state)


class TestHeatmapColor:
    def test_even_odds(self):
        assert heatmap_color(0.5) == (75, 37, 75, 0.2)

    def test_certain_label_one(self):
        assert heatmap_color(1.0) == (0, 75, 150, 0.2)

    def test_certain_label_zero(self):
        assert heatmap_color(0.0) == (150, 0, 0, 0.2)


class TestMainCanvas:
    def test_draw_order(self, coordinator, surface):
        coordinator.render_main(surface)
        kinds = [c[0] for c in surface.calls]
        assert kinds[0] == "clear"
        last_rect = max(i for i, k in enumerate(kinds) if k == "rect")
        first_line = kinds.index("polyline")
        first_circle = kinds.index("circle")
        assert last_rect < first_line < first_circle

    def test_heatmap_cells(self, coordinator, surface):
        coordinator.render_main(surface)
        rects = surface.of_kind("rect")
        # 100 x 60 at 20 px: 5 columns, 3 rows
        assert len(rects) == 15
        assert {(r[1], r[2]) for r in rects} == {(x, y) for x in range(0, 100, 20) for y in range(0, 60, 20)}

    def test_heatmap_samples_cell_corner(self, state, surface):
        state.set_parameters(ModelParameters(0.0, 0.0, 0.0))
        RenderCoordinator(state).draw_heatmap(surface)
        assert all(r[5] == heatmap_color(0.5) for r in surface.of_kind("rect"))

    def test_boundary_style(self, coordinator, surface):
        coordinator.render_main(surface)
        (line,) = surface.of_kind("polyline")
        _, points, color, width, dash, glow = line
        assert color == config.BOUNDARY_COLOR
        assert width == 3.0
        assert tuple(dash) == (10.0, 5.0)
        assert glow == 15.0
        # Diagonal from bottom-left to top-right of the device
        np.testing.assert_allclose(points[0], [0.0, 60.0], atol=1e-9)
        np.testing.assert_allclose(points[-1], [100.0, 0.0], atol=1e-9)

    def test_no_boundary_for_constant_model(self, state, surface):
        state.set_parameters(ModelParameters(0.0, 0.0, 0.0))
        RenderCoordinator(state).render_main(surface)
        assert surface.of_kind("polyline") == []

    def test_points(self, state, coordinator, surface):
        coordinator.render_main(surface)
        circles = surface.of_kind("circle")
        assert len(circles) == len(state.dataset)
        for call, point in zip(circles, state.dataset):
            _, cx, cy, radius, color, outline, glow = call
            assert cx == pytest.approx(point.x * 100)
            assert cy == pytest.approx(point.y * 60)
            assert radius == config.POINT_RADIUS
            assert color == (config.POSITIVE_COLOR if point.label == 1 else config.NEGATIVE_COLOR)
            assert outline == "#ffffff"
            assert glow == 10.0

    @pytest.mark.parametrize("params", [
        ModelParameters(10.0, 0.1, -10.0),
        ModelParameters(1.0, 0.0, -2.0),
        ModelParameters(-0.3, 9.9, 4.2),
    ])
    def test_device_coordinates_are_finite(self, state, surface, params):
        state.set_parameters(params)
        RenderCoordinator(state).render_main(surface)
        for call in surface.of_kind("polyline"):
            assert np.all(np.isfinite(call[1]))
        for call in surface.of_kind("circle"):
            assert np.isfinite(call[1]) and np.isfinite(call[2])

    def test_zero_sized_surface_only_clears(self, coordinator):
        surface = RecordingSurface(0, 0)
        coordinator.render_main(surface)
        assert surface.calls == [("clear",)]

    def test_bad_resolution(self, state):
        with pytest.raises(ValueError):
            RenderCoordinator(state, resolution=0)


class TestSigmoidPanel:
    def test_demo_logit(self, state, coordinator):
        state.set_parameters(ModelParameters(1.0, 3.0, -0.5))
        assert coordinator.demo_logit() == pytest.approx(1.5)

    def test_axes_curve_and_marker(self, coordinator):
        surface = RecordingSurface(200, 120)
        coordinator.render_sigmoid(surface)
        lines = surface.of_kind("polyline")
        assert len(lines) == 3
        curve = lines[2][1]
        assert curve.shape == (200, 2)
        # Curve runs from bottom-left to top-right
        assert curve[0, 1] > curve[-1, 1]

        (marker,) = surface.of_kind("circle")
        # Default parameters: demo z = 1, p ~ 0.731
        assert marker[1] == pytest.approx(120.0)
        assert marker[2] == pytest.approx(120 - 0.7310586 * 120, abs=1e-4)

    def test_marker_is_clamped_to_panel(self, state, coordinator):
        state.set_parameters(ModelParameters(10.0, 10.0, 10.0))
        surface = RecordingSurface(200, 120)
        coordinator.render_sigmoid(surface)
        (marker,) = surface.of_kind("circle")
        assert 0.0 <= marker[1] <= 200.0
        assert 0.0 <= marker[2] <= 120.0
