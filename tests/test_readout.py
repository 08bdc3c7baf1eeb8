from __future__ import annotations

from logitlab.model.classifier import Metrics, ModelParameters
from logitlab.model.readout import MetricsReadout, equation_text, format_value


def test_format_value_one_decimal():
    assert format_value(1.0) == "1.0"
    assert format_value(-2.345) == "-2.3"


def test_equation_text():
    assert equation_text(ModelParameters(1.0, -0.5, 0.0)) == "z = (1.0)x₁ + (-0.5)x₂ + (0.0)"


def test_readout_from_metrics():
    readout = MetricsReadout.from_metrics(Metrics(accuracy=50.0, mean_squared_error=0.25))
    assert readout.accuracy_text == "50%"
    assert readout.accuracy_fill == 50.0
    assert readout.loss_text == "0.25"
    assert readout.loss_fill == 25.0


def test_accuracy_is_rounded_to_whole_percent():
    readout = MetricsReadout.from_metrics(Metrics(accuracy=200 / 3, mean_squared_error=0.1))
    assert readout.accuracy_text == "67%"


def test_loss_bar_is_capped():
    readout = MetricsReadout.from_metrics(Metrics(accuracy=0.0, mean_squared_error=1.5))
    assert readout.loss_fill == 100.0
    assert readout.loss_text == "1.50"


def test_unavailable_readout():
    readout = MetricsReadout.unavailable()
    assert readout.accuracy_text == "--"
    assert readout.loss_text == "--"
    assert readout.accuracy_fill == 0.0
