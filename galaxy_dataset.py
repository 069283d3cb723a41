"""Randomized planet and star datasets, generated once per Galaxy."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from galaxy_data import Color, PlanetData, StarData
from logging_utils import log_debug, log_loop

# Coefficients just outside the canvas on either side of an axis
OUTSIDE_LOW = -0.1
OUTSIDE_HIGH = 1.1


class PlacementError(RuntimeError):
    """Raised when a planet's coefficients do not put it outside any edge."""


class Edge(enum.Enum):
    """Canvas edge a planet starts from, with the rotation that points it inward.

    Shift directions are ``(sin(angle), cos(angle))``; a base angle in
    ``[0, pi]`` points right, so each edge rotates it toward the canvas.
    """

    LEFT = 0.0
    BOTTOM = math.pi / 2
    RIGHT = math.pi
    TOP = -math.pi / 2

    @property
    def angle_offset(self) -> float:
        return self.value

    @classmethod
    def from_coefficients(cls, x_factor: float, y_factor: float) -> "Edge":
        if x_factor < 0:
            return cls.LEFT
        if x_factor > 1:
            return cls.RIGHT
        if y_factor < 0:
            return cls.TOP
        if y_factor > 1:
            return cls.BOTTOM
        raise PlacementError(
            f"coefficients ({x_factor}, {y_factor}) are inside the canvas"
        )


@dataclass(frozen=True)
class PlanetRandomizer:
    """Keeps the random values a planet is drawn from."""

    center_offset_x_factor: float
    center_offset_y_factor: float
    edge: Edge
    shift_angle: float
    reverse: bool
    radius: float
    color: Color
    alpha: float


@dataclass(frozen=True)
class StarRandomizer:
    """Keeps the random values a star is drawn from."""

    center_offset_x_factor: float
    center_offset_y_factor: float
    edge_count: int
    side_length: float
    interior_angle: float
    color: Color
    reverse: bool


def _pick_color(rng: np.random.Generator, palette: Sequence[Color]) -> Color:
    return palette[int(rng.integers(len(palette)))]


def random_outside_coefficients(rng: np.random.Generator) -> Tuple[float, float]:
    """Return (x, y) factors with one axis inside [0, 1] and the other just outside."""
    inside = float(rng.uniform(0.0, 1.0))
    outside = OUTSIDE_LOW if rng.random() < 0.5 else OUTSIDE_HIGH
    if rng.random() < 0.5:
        return outside, inside
    return inside, outside


def random_shift_angle(rng: np.random.Generator, edge: Edge) -> float:
    return float(rng.uniform(0.0, math.pi)) + edge.angle_offset


def generate_planet_dataset(
    planet_data: PlanetData, rng: Optional[np.random.Generator] = None
) -> Tuple[PlanetRandomizer, ...]:
    rng = rng if rng is not None else np.random.default_rng()
    count = planet_data.number_of_planets
    if not planet_data.planet_colors:
        log_debug("generate_planet_dataset: empty palette, no planets")
        return ()
    planets = []
    for index in range(count):
        x_factor, y_factor = random_outside_coefficients(rng)
        edge = Edge.from_coefficients(x_factor, y_factor)
        planets.append(
            PlanetRandomizer(
                center_offset_x_factor=x_factor,
                center_offset_y_factor=y_factor,
                edge=edge,
                shift_angle=random_shift_angle(rng, edge),
                reverse=index < count // 2,
                radius=float(rng.uniform(0.0, planet_data.max_planet_radius)),
                color=_pick_color(rng, planet_data.planet_colors),
                alpha=float(rng.uniform(0.0, planet_data.max_planet_alpha)),
            )
        )
    log_loop(f"generate_planet_dataset count={len(planets)}", planets)
    return tuple(planets)


def generate_star_dataset(
    star_data: StarData, rng: Optional[np.random.Generator] = None
) -> Tuple[StarRandomizer, ...]:
    rng = rng if rng is not None else np.random.default_rng()
    count = star_data.number_of_stars
    if not star_data.star_colors:
        log_debug("generate_star_dataset: empty palette, no stars")
        return ()
    stars = []
    for index in range(count):
        stars.append(
            StarRandomizer(
                center_offset_x_factor=float(rng.uniform(0.0, 1.0)),
                center_offset_y_factor=float(rng.uniform(0.0, 1.0)),
                edge_count=int(rng.integers(0, star_data.max_edge_count + 1)),
                side_length=float(rng.random()) * star_data.max_side_length,
                interior_angle=float(rng.uniform(0.0, math.pi)),
                color=_pick_color(rng, star_data.star_colors),
                reverse=index < count // 2,
            )
        )
    log_loop(f"generate_star_dataset count={len(stars)}", stars)
    return tuple(stars)
