"""Human-readable strings for the metrics panel and the slider labels."""
from __future__ import annotations

from dataclasses import dataclass

from logitlab.model.classifier import Metrics, ModelParameters


def format_value(value: float) -> str:
    """One decimal, the precision shown next to every slider."""
    return f"{value:.1f}"


def equation_text(params: ModelParameters) -> str:
    """The current linear equation, e.g. 'z = (1.0)x₁ + (-0.5)x₂ + (0.0)'."""
    return (
        f"z = ({format_value(params.w1)})x₁ + "
        f"({format_value(params.w2)})x₂ + "
        f"({format_value(params.b)})"
    )


@dataclass(frozen=True)
class MetricsReadout:
    """What the accuracy and loss meters display."""
    accuracy_text: str
    accuracy_fill: float  # bar width in percent
    loss_text: str
    loss_fill: float  # bar width in percent, capped at 100

    @classmethod
    def from_metrics(cls, metrics: Metrics) -> MetricsReadout:
        return cls(
            accuracy_text=f"{metrics.accuracy:.0f}%",
            accuracy_fill=metrics.accuracy,
            loss_text=f"{metrics.mean_squared_error:.2f}",
            loss_fill=min(100.0, metrics.mean_squared_error * 100.0),
        )

    @classmethod
    def unavailable(cls) -> MetricsReadout:
        return cls(accuracy_text="--", accuracy_fill=0.0, loss_text="--", loss_fill=0.0)
