import math

import numpy as np
import pytest

from galaxy_data import PlanetData, StarData
from galaxy_dataset import (
    OUTSIDE_HIGH,
    OUTSIDE_LOW,
    Edge,
    PlacementError,
    generate_planet_dataset,
    generate_star_dataset,
)

PALETTE = ((10, 20, 30), (40, 50, 60))

INWARD = {
    Edge.LEFT: (1.0, 0.0),
    Edge.RIGHT: (-1.0, 0.0),
    Edge.TOP: (0.0, 1.0),
    Edge.BOTTOM: (0.0, -1.0),
}


def _planets(count=500, seed=7, **kwargs):
    data = PlanetData(number_of_planets=count, planet_colors=PALETTE, **kwargs)
    return generate_planet_dataset(data, np.random.default_rng(seed))


def test_exactly_one_axis_outside():
    for planet in _planets():
        x, y = planet.center_offset_x_factor, planet.center_offset_y_factor
        x_outside = not 0.0 <= x <= 1.0
        y_outside = not 0.0 <= y <= 1.0
        assert x_outside != y_outside
        outside = x if x_outside else y
        inside = y if x_outside else x
        assert outside in (OUTSIDE_LOW, OUTSIDE_HIGH)
        assert 0.0 <= inside <= 1.0


def test_edge_matches_coefficients():
    planets = _planets()
    for planet in planets:
        assert planet.edge is Edge.from_coefficients(
            planet.center_offset_x_factor, planet.center_offset_y_factor
        )
    assert {planet.edge for planet in planets} == set(Edge)


def test_shift_points_inward():
    for planet in _planets():
        nx, ny = INWARD[planet.edge]
        dot = math.sin(planet.shift_angle) * nx + math.cos(planet.shift_angle) * ny
        assert dot >= -1e-9


def test_planet_bounds_and_palette():
    for planet in _planets(max_planet_radius=4.0, max_planet_alpha=0.3):
        assert 0.0 <= planet.radius <= 4.0
        assert 0.0 <= planet.alpha <= 0.3
        assert planet.color in PALETTE


def test_first_half_is_reversed():
    planets = _planets(count=7)
    assert [p.reverse for p in planets] == [True, True, True, False, False, False, False]


def test_equal_seeds_give_equal_datasets():
    assert _planets(seed=3) == _planets(seed=3)
    assert _planets(seed=3) != _planets(seed=4)


def test_zero_count_and_empty_palette_yield_nothing():
    assert _planets(count=0) == ()
    data = PlanetData(number_of_planets=10, planet_colors=())
    assert generate_planet_dataset(data, np.random.default_rng(0)) == ()
    stars = StarData(number_of_stars=10, star_colors=[])
    assert generate_star_dataset(stars, np.random.default_rng(0)) == ()


def test_inside_coefficients_are_impossible_placement():
    with pytest.raises(PlacementError):
        Edge.from_coefficients(0.5, 0.5)


def test_edge_classification():
    assert Edge.from_coefficients(-0.1, 0.5) is Edge.LEFT
    assert Edge.from_coefficients(1.1, 0.5) is Edge.RIGHT
    assert Edge.from_coefficients(0.5, -0.1) is Edge.TOP
    assert Edge.from_coefficients(0.5, 1.1) is Edge.BOTTOM


@pytest.mark.parametrize(
    "kwargs",
    [
        {"number_of_planets": -1},
        {"max_planet_radius": -1.0},
        {"max_planet_alpha": 1.5},
    ],
)
def test_invalid_planet_data_raises(kwargs):
    with pytest.raises(ValueError):
        PlanetData(**kwargs)


def test_invalid_star_data_raises():
    with pytest.raises(ValueError):
        StarData(number_of_stars=-3)
    with pytest.raises(ValueError):
        StarData(max_edge_count=-1)


def test_star_ranges():
    data = StarData(number_of_stars=300, star_colors=PALETTE, max_side_length=8.0, max_edge_count=10)
    stars = generate_star_dataset(data, np.random.default_rng(11))
    assert len(stars) == 300
    for star in stars:
        assert 0.0 <= star.center_offset_x_factor <= 1.0
        assert 0.0 <= star.center_offset_y_factor <= 1.0
        assert 0 <= star.edge_count <= 10
        assert 0.0 <= star.side_length <= 8.0
        assert 0.0 <= star.interior_angle <= math.pi
        assert star.color in PALETTE
    assert sum(star.reverse for star in stars) == 150


def test_generated_dataset_is_traced_when_logging(tmp_path, monkeypatch):
    import logging_utils

    path = tmp_path / "debug.txt"
    monkeypatch.setattr(logging_utils, "LOG_ENABLED", True)
    monkeypatch.setattr(logging_utils, "LOG_FILE_PATH", str(path))
    planets = _planets(count=3)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 4
    assert lines[0].endswith("generate_planet_dataset count=3")
    assert "PlanetRandomizer(" in lines[1]
    assert repr(planets[2]) in lines[3]
