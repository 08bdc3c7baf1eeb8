from __future__ import annotations

import numpy as np
import pytest

from logitlab.controller.geometry import BoundaryGeometry
from logitlab.model.classifier import LinearClassifier, ModelParameters


@pytest.fixture
def geometry() -> BoundaryGeometry:
    return BoundaryGeometry()


def test_samples_cover_the_square(geometry):
    nx = geometry.samples()
    assert nx.size == 101
    assert nx[0] == pytest.approx(-5.0)
    assert nx[-1] == pytest.approx(5.0)


def test_diagonal_boundary(geometry):
    (line,) = geometry.compute(ModelParameters(1.0, 1.0, 0.0))
    assert line.shape == (101, 2)
    np.testing.assert_allclose(line[0], [0.0, 1.0], atol=1e-12)
    np.testing.assert_allclose(line[-1], [1.0, 0.0], atol=1e-12)


def test_boundary_points_sit_at_probability_half(geometry):
    params = ModelParameters(2.0, -1.5, 0.7)
    clf = LinearClassifier(params)
    for line in geometry.compute(params):
        assert np.all(np.isfinite(line))
        assert np.all((line >= 0.0) & (line <= 1.0))
        np.testing.assert_allclose(clf.probability(line[:, 0], line[:, 1]), 0.5, atol=1e-9)


def test_steep_line_is_clipped(geometry):
    lines = geometry.compute(ModelParameters(2.0, 1.0, 0.0))
    assert len(lines) == 1
    assert len(lines[0]) >= 2
    assert np.all((lines[0] >= 0.0) & (lines[0] <= 1.0))


def test_line_outside_the_square(geometry):
    assert geometry.compute(ModelParameters(0.0, 1.0, 10.0)) == []


def test_vertical_line_when_w2_is_zero(geometry):
    # nx = -b / w1 = 2 maps to x = 0.7
    (line,) = geometry.compute(ModelParameters(1.0, 0.0, -2.0))
    np.testing.assert_allclose(line, [[0.7, 0.0], [0.7, 1.0]])


def test_vertical_line_outside_the_square(geometry):
    assert geometry.compute(ModelParameters(1.0, 0.0, -6.0)) == []


def test_no_boundary_when_both_weights_are_zero(geometry):
    assert geometry.compute(ModelParameters(0.0, 0.0, 1.0)) == []


def test_to_device():
    device = BoundaryGeometry.to_device(np.array([[0.5, 0.25]]), 200, 100)
    np.testing.assert_allclose(device, [[100.0, 25.0]])


def test_step_must_be_positive():
    with pytest.raises(ValueError):
        BoundaryGeometry(step=0.0)


def test_steep_line_still_crosses_the_square(geometry):
    # ny = -100 * nx: only the nx = 0 sample is inside, the edges are at nx = -/+0.05
    params = ModelParameters(10.0, 0.1, 0.0)
    (line,) = geometry.compute(params)
    assert len(line) >= 2
    assert np.all(np.diff(line[:, 0]) >= 0)
    np.testing.assert_allclose(line[0], [0.495, 1.0])
    np.testing.assert_allclose(line[-1], [0.505, 0.0])
    np.testing.assert_allclose(
        LinearClassifier(params).probability(line[:, 0], line[:, 1]), 0.5, atol=1e-9
    )


def test_steep_line_close_to_vertical_matches_vertical(geometry):
    (steep,) = geometry.compute(ModelParameters(10.0, 0.001, -20.0))
    (vertical,) = geometry.compute(ModelParameters(10.0, 0.0, -20.0))
    np.testing.assert_allclose(steep[[0, -1], 0], vertical[:, 0], atol=1e-3)
