"""Construction-time configuration for planets and stars."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from animation import RepeatMode, TweenSpec, easing_by_name
from config import (
    MAX_PLANET_ALPHA,
    MAX_PLANET_RADIUS,
    MAX_STAR_EDGE_COUNT,
    MAX_STAR_SIDE_LENGTH,
    NUMBER_OF_PLANETS,
    NUMBER_OF_STARS,
    PLANET_ANIMATION_DURATION_MS,
    PLANET_COLORS,
    PLANET_EASING,
    STAR_COLORS,
    STAR_EASING,
    STAR_SHINING_DURATION_MS,
)
from logging_utils import require

Color = Tuple[int, int, int]

DEFAULT_PLANET_ANIMATION_SPEC = TweenSpec(
    duration_ms=PLANET_ANIMATION_DURATION_MS,
    easing=easing_by_name(PLANET_EASING),
    repeat_mode=RepeatMode.REVERSE,
)

DEFAULT_STAR_SHINING_ANIMATION_SPEC = TweenSpec(
    duration_ms=STAR_SHINING_DURATION_MS,
    easing=easing_by_name(STAR_EASING),
    repeat_mode=RepeatMode.REVERSE,
)


@dataclass(frozen=True)
class PlanetData:
    number_of_planets: int = NUMBER_OF_PLANETS
    max_planet_radius: float = MAX_PLANET_RADIUS
    max_planet_alpha: float = MAX_PLANET_ALPHA
    planet_colors: Tuple[Color, ...] = PLANET_COLORS
    planet_animation_spec: TweenSpec = DEFAULT_PLANET_ANIMATION_SPEC

    def __post_init__(self) -> None:
        require(self.number_of_planets >= 0, "number_of_planets must be >= 0")
        require(self.max_planet_radius >= 0, "max_planet_radius must be >= 0")
        require(0 <= self.max_planet_alpha <= 1, "max_planet_alpha must be 0..1")
        # lists are accepted but stored as tuples so the record stays immutable
        object.__setattr__(self, "planet_colors", tuple(self.planet_colors))


@dataclass(frozen=True)
class StarData:
    number_of_stars: int = NUMBER_OF_STARS
    star_colors: Tuple[Color, ...] = STAR_COLORS
    max_side_length: float = MAX_STAR_SIDE_LENGTH
    max_edge_count: int = MAX_STAR_EDGE_COUNT
    star_shining_animation_spec: TweenSpec = DEFAULT_STAR_SHINING_ANIMATION_SPEC

    def __post_init__(self) -> None:
        require(self.number_of_stars >= 0, "number_of_stars must be >= 0")
        require(self.max_side_length >= 0, "max_side_length must be >= 0")
        require(self.max_edge_count >= 0, "max_edge_count must be >= 0")
        object.__setattr__(self, "star_colors", tuple(self.star_colors))
