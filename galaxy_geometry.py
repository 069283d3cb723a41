# galaxy_geometry.py

import math

import numpy as np


def canvas_diagonal(width, height):
    return math.hypot(width, height)


def planet_center(x_factor, y_factor, shift_angle, width, height, diagonal,
                  shift_value, reverse=False):
    """Return the pixel center of a planet for the current shift value.

    The planet starts at its stored fractional position and is pushed along
    ``(sin(shift_angle), cos(shift_angle))`` by up to one canvas diagonal,
    which is always enough to carry it across and off the canvas.
    Reversed planets travel the same line in the opposite phase.
    """
    progress = 1.0 - shift_value if reverse else shift_value
    magnitude = progress * diagonal
    x = x_factor * width + magnitude * math.sin(shift_angle)
    y = y_factor * height + magnitude * math.cos(shift_angle)
    return x, y


def star_center(x_factor, y_factor, width, height):
    return x_factor * width, y_factor * height


def star_alpha(shining_value, reverse=False):
    return 1.0 - shining_value if reverse else shining_value


def star_path(start, side_length, edge_count, interior_angle):
    """Return the vertices of a spiked star outline as an (N, 2) array.

    Each step turns the running direction by ``2*pi / edge_count`` and adds
    two vertices, one along the interior angle and one along the exterior
    angle, so the outline alternates between spike and notch. Since the
    rotations are evenly spread the walk ends back at ``start`` for
    ``edge_count >= 2``. ``edge_count <= 0`` gives just the start point.
    """
    points = [np.asarray(start, dtype=float)]
    if edge_count <= 0:
        return np.array(points)
    exterior_angle = math.pi - interior_angle
    step_angle = 2 * math.pi / edge_count
    previous = points[0]
    for step in range(edge_count):
        rotation = step_angle * step
        spike = previous + side_length * np.array(
            [math.sin(interior_angle + rotation), math.cos(interior_angle + rotation)]
        )
        notch = spike + side_length * np.array(
            [math.sin(exterior_angle + rotation), math.cos(exterior_angle + rotation)]
        )
        points.extend((spike, notch))
        previous = notch
    return np.array(points)


def path_bounds(points):
    """Return (min_x, min_y, max_x, max_y) of a vertex array."""
    mins = points.min(axis=0)
    maxs = points.max(axis=0)
    return float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])
