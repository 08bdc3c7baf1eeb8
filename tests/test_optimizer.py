from __future__ import annotations

import pytest

from logitlab.controller.optimizer import GradientDescentOptimizer, gradient
from logitlab.exceptions import EmptyDatasetError
from logitlab.model.classifier import LinearClassifier, ModelParameters
from logitlab.model.dataset import Dataset, Point


class TestGradient:
    def test_single_point_at_centre(self):
        ds = Dataset([Point(0.5, 0.5, 1)])
        # p = 0.5, error = -0.5, nx = ny = 0
        assert gradient(ds, ModelParameters(0.0, 0.0, 0.0)) == pytest.approx((0.0, 0.0, -0.5))

    def test_error_times_normalized_features(self):
        ds = Dataset([Point(0.6, 0.7, 0)])
        # p = 0.5, error = 0.5, nx = 1, ny = 2
        assert gradient(ds, ModelParameters(0.0, 0.0, 0.0)) == pytest.approx((0.5, 1.0, 0.5))

    def test_gradient_is_summed_not_averaged(self):
        one = Dataset([Point(0.6, 0.7, 0)])
        two = Dataset([Point(0.6, 0.7, 0), Point(0.6, 0.7, 0)])
        g1 = gradient(one, ModelParameters(0.0, 0.0, 0.0))
        g2 = gradient(two, ModelParameters(0.0, 0.0, 0.0))
        assert g2 == pytest.approx(tuple(2 * v for v in g1))


class TestGradientDescentOptimizer:
    def test_yields_one_snapshot_per_epoch(self, generator):
        steps = list(GradientDescentOptimizer().run(generator.generate(), ModelParameters()))
        assert len(steps) == 50
        assert all(isinstance(s, ModelParameters) for s in steps)

    def test_update_rule(self):
        ds = Dataset([Point(0.5, 0.5, 1)])
        (first,) = GradientDescentOptimizer(learning_rate=0.5, epochs=1).run(ds, ModelParameters(0.0, 0.0, 0.0))
        # b -= 0.5 * (-0.5) / 1
        assert first.as_tuple() == pytest.approx((0.0, 0.0, 0.25))

    def test_initial_parameters_untouched(self, generator):
        initial = ModelParameters(1.0, 1.0, 0.0)
        list(GradientDescentOptimizer().run(generator.generate(), initial))
        assert initial.as_tuple() == (1.0, 1.0, 0.0)

    def test_training_improves_the_fit(self, generator):
        ds = generator.generate()
        initial = ModelParameters()
        before = LinearClassifier(initial).metrics(ds)

        *_, final = GradientDescentOptimizer().run(ds, initial)
        after = LinearClassifier(final).metrics(ds)

        assert after.mean_squared_error < before.mean_squared_error
        assert after.accuracy >= before.accuracy

    def test_empty_dataset_fails_before_iteration(self):
        with pytest.raises(EmptyDatasetError):
            GradientDescentOptimizer().run(Dataset([]), ModelParameters())

    def test_zero_epochs(self, generator):
        assert list(GradientDescentOptimizer(epochs=0).run(generator.generate(), ModelParameters())) == []

    def test_negative_epochs(self):
        with pytest.raises(ValueError):
            GradientDescentOptimizer(epochs=-1)

    def test_step_matches_first_snapshot(self, generator):
        ds = generator.generate()
        optimizer = GradientDescentOptimizer()
        first = next(optimizer.run(ds, ModelParameters()))
        assert optimizer.step(ds, ModelParameters()) == first

    def test_step_on_empty_dataset(self):
        with pytest.raises(EmptyDatasetError):
            GradientDescentOptimizer().step(Dataset([]), ModelParameters())
