"""Tween specs, easing curves and the ping-pong animation value."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

from logging_utils import require

Easing = Callable[[float], float]

_BISECTION_STEPS = 32


@dataclass(frozen=True)
class CubicBezierEasing:
    """Easing curve defined by the control points (a, b) and (c, d).

    The curve starts at (0, 0) and ends at (1, 1); the x coordinate is the
    time fraction and the y coordinate the eased progress.
    """

    a: float
    b: float
    c: float
    d: float

    @staticmethod
    def _evaluate(p1: float, p2: float, t: float) -> float:
        inv = 1 - t
        return 3 * inv * inv * t * p1 + 3 * inv * t * t * p2 + t * t * t

    def __call__(self, fraction: float) -> float:
        if fraction <= 0.0:
            return 0.0
        if fraction >= 1.0:
            return 1.0
        # x(t) is monotone for control x values in [0, 1]
        low, high = 0.0, 1.0
        t = fraction
        for _ in range(_BISECTION_STEPS):
            t = (low + high) / 2
            x = self._evaluate(self.a, self.c, t)
            if x < fraction:
                low = t
            else:
                high = t
        return self._evaluate(self.b, self.d, t)


def linear_easing(fraction: float) -> float:
    return fraction


FAST_OUT_SLOW_IN = CubicBezierEasing(0.4, 0.0, 0.2, 1.0)
LINEAR_OUT_SLOW_IN = CubicBezierEasing(0.0, 0.0, 0.2, 1.0)
FAST_OUT_LINEAR_IN = CubicBezierEasing(0.4, 0.0, 1.0, 1.0)

EASINGS = {
    "linear": linear_easing,
    "fast_out_slow_in": FAST_OUT_SLOW_IN,
    "linear_out_slow_in": LINEAR_OUT_SLOW_IN,
    "fast_out_linear_in": FAST_OUT_LINEAR_IN,
}


def easing_by_name(name: str) -> Easing:
    """Look up one of the named easing curves, e.g. ``"fast_out_slow_in"``."""
    require(name in EASINGS, f"unknown easing {name!r}, expected one of {sorted(EASINGS)}")
    return EASINGS[name]


class RepeatMode(enum.Enum):
    RESTART = "restart"
    REVERSE = "reverse"


@dataclass(frozen=True)
class TweenSpec:
    """Duration, easing and repeat behaviour of an infinitely repeating tween."""

    duration_ms: int
    easing: Easing = linear_easing
    repeat_mode: RepeatMode = RepeatMode.REVERSE

    def __post_init__(self) -> None:
        require(self.duration_ms >= 0, f"duration_ms must be >= 0, got {self.duration_ms}")


class AnimationValue:
    """A scalar in [0, 1] driven by elapsed time.

    With ``RepeatMode.REVERSE`` the value sweeps 0 -> 1 -> 0 indefinitely;
    with ``RepeatMode.RESTART`` it jumps back to 0 after each sweep.
    The owner advances it once per tick and every reader sees the same value
    for the rest of that frame.
    """

    def __init__(self, spec: TweenSpec) -> None:
        self.spec = spec
        self._elapsed_ms = 0.0
        self._value = 0.0

    @property
    def value(self) -> float:
        return self._value

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    def reset(self) -> None:
        self._elapsed_ms = 0.0
        self._value = 0.0

    def advance(self, elapsed_ms: float) -> float:
        require(elapsed_ms >= 0, f"elapsed_ms must be >= 0, got {elapsed_ms}")
        self._elapsed_ms += elapsed_ms
        self._value = self._value_at(self._elapsed_ms)
        return self._value

    def _value_at(self, elapsed_ms: float) -> float:
        duration = self.spec.duration_ms
        if duration == 0:
            return 1.0 if elapsed_ms > 0 else 0.0
        iteration, remainder = divmod(elapsed_ms, duration)
        fraction = remainder / duration
        if self.spec.repeat_mode is RepeatMode.REVERSE and int(iteration) % 2 == 1:
            fraction = 1.0 - fraction
        return self.spec.easing(fraction)
