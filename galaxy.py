# galaxy.py

import math

import numpy as np
import pygame

from animation import AnimationValue
from config import BACKGROUND_COLOR, RANDOM_SEED
from galaxy_data import PlanetData, StarData
from galaxy_dataset import generate_planet_dataset, generate_star_dataset
from galaxy_geometry import (
    canvas_diagonal,
    path_bounds,
    planet_center,
    star_alpha,
    star_center,
    star_path,
)
from logging_utils import log_debug


def _to_alpha_byte(alpha):
    return max(0, min(255, int(round(alpha * 255))))


def _visible_area(surface, min_x, min_y, max_x, max_y):
    """Part of the bounding box that lands on ``surface``, or None."""
    left = math.floor(min_x)
    top = math.floor(min_y)
    bounds = pygame.Rect(left, top,
                         int(math.ceil(max_x)) - left + 1,
                         int(math.ceil(max_y)) - top + 1)
    area = bounds.clip(surface.get_rect())
    if area.width == 0 or area.height == 0:
        return None
    return area


def draw_translucent_circle(surface, center, radius, color, alpha):
    """Filled circle blended onto ``surface`` through an SRCALPHA temp surface.

    The temp surface only covers the part of the circle inside ``surface``.
    Returns True when something was blitted.
    """
    if radius < 1 or alpha <= 0:
        return False
    x, y = center
    area = _visible_area(surface, x - radius, y - radius, x + radius, y + radius)
    if area is None:
        return False
    temp = pygame.Surface(area.size, pygame.SRCALPHA)
    pygame.draw.circle(temp, (*color, _to_alpha_byte(alpha)),
                       (x - area.x, y - area.y), radius)
    surface.blit(temp, area.topleft)
    return True


def draw_translucent_polygon(surface, points, color, alpha):
    """Filled polygon blended onto ``surface``; degenerate outlines are skipped."""
    if alpha <= 0 or len(points) < 3:
        return False
    min_x, min_y, max_x, max_y = path_bounds(points)
    if max_x - min_x < 1 and max_y - min_y < 1:
        return False
    area = _visible_area(surface, min_x, min_y, max_x, max_y)
    if area is None:
        return False
    temp = pygame.Surface(area.size, pygame.SRCALPHA)
    local = [(float(px), float(py)) for px, py in points - np.array(area.topleft)]
    pygame.draw.polygon(temp, (*color, _to_alpha_byte(alpha)), local)
    surface.blit(temp, area.topleft)
    return True


def draw_galaxy(surface, planets, stars, shift_value, shining_value):
    """Draw every planet and star for the given animation values.

    Only ``surface`` is mutated. Returns the number of shapes drawn.
    """
    width, height = surface.get_size()
    diagonal = canvas_diagonal(width, height)
    drawn = 0

    for planet in planets:
        center = planet_center(
            planet.center_offset_x_factor,
            planet.center_offset_y_factor,
            planet.shift_angle,
            width,
            height,
            diagonal,
            shift_value,
            reverse=planet.reverse,
        )
        if draw_translucent_circle(surface, center, planet.radius, planet.color, planet.alpha):
            drawn += 1

    for star in stars:
        start = star_center(star.center_offset_x_factor, star.center_offset_y_factor,
                            width, height)
        points = star_path(start, star.side_length, star.edge_count, star.interior_angle)
        alpha = star_alpha(shining_value, reverse=star.reverse)
        if draw_translucent_polygon(surface, points, star.color, alpha):
            drawn += 1

    return drawn


class Galaxy:
    """Drifting planets and shining stars drawn over a solid background."""

    def __init__(self, planet_data=None, star_data=None, rng=None,
                 background_color=BACKGROUND_COLOR):
        self.planet_data = planet_data if planet_data is not None else PlanetData()
        self.star_data = star_data if star_data is not None else StarData()
        if rng is None:
            rng = np.random.default_rng(RANDOM_SEED)
        self.background_color = background_color

        self.planets = generate_planet_dataset(self.planet_data, rng)
        self.stars = generate_star_dataset(self.star_data, rng)

        self.planet_animation = AnimationValue(self.planet_data.planet_animation_spec)
        self.star_shining_animation = AnimationValue(self.star_data.star_shining_animation_spec)
        log_debug(f"Galaxy.__init__ planets={len(self.planets)} stars={len(self.stars)}")

    def update(self, dt):
        elapsed_ms = dt * 1000.0
        self.planet_animation.advance(elapsed_ms)
        self.star_shining_animation.advance(elapsed_ms)

    def draw(self, surf):
        if self.background_color is not None:
            surf.fill(self.background_color)
        return draw_galaxy(
            surf,
            self.planets,
            self.stars,
            self.planet_animation.value,
            self.star_shining_animation.value,
        )
