"""Response curves for turning considerations into urgency scores.

Scoring functions usually read a normalized consideration and reshape it:
invert it so that "bad is high", then raise it to a power so urgency grows
faster as the signal worsens. The Reasoner does not require any of this;
scoring functions may return whatever number they like.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from aiutility.types import NormalizedValue


def clamp(value: float, min_value: float = 0.0, max_value: float = 1.0) -> float:
    return max(min_value, min(max_value, value))


class ResponseCurveType(Enum):
    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    STEP = "step"


@dataclass(frozen=True, slots=True)
class ResponseCurve:
    """Map a normalized input onto a normalized score.

    The input is clamped to 0.0..1.0 unless ``clamp_input`` is off, then
    flipped to ``1 - value`` when ``inverted`` is set, and finally shaped.
    Unclamped curves pass out-of-range stats straight through the
    arithmetic, so an overhealed or negative stat still scores.
    """

    curve_type: ResponseCurveType
    exponent: float = 2.0
    threshold: float = 0.5
    inverted: bool = False
    clamp_input: bool = True

    def evaluate(self, value: NormalizedValue) -> NormalizedValue:
        if self.clamp_input:
            value = clamp(value)
        if self.inverted:
            value = 1.0 - value
        match self.curve_type:
            case ResponseCurveType.LINEAR:
                return value
            case ResponseCurveType.EXPONENTIAL:
                return value**self.exponent
            case ResponseCurveType.STEP:
                return 1.0 if value >= self.threshold else 0.0
        return 0.0

    def __call__(self, value: NormalizedValue) -> NormalizedValue:
        return self.evaluate(value)


# (1 - x)^2: rises quickly once a "good is high" stat starts dropping.
URGENT_WHEN_LOW = ResponseCurve(
    ResponseCurveType.EXPONENTIAL, inverted=True, clamp_input=False
)

# (1 - x)^3: stays quiet until a stock is nearly gone.
URGENT_WHEN_EMPTY = ResponseCurve(
    ResponseCurveType.EXPONENTIAL, exponent=3.0, inverted=True, clamp_input=False
)

# x^3: stays quiet until a "bad is high" stat is nearly maxed.
URGENT_WHEN_HIGH = ResponseCurve(
    ResponseCurveType.EXPONENTIAL, exponent=3.0, clamp_input=False
)
