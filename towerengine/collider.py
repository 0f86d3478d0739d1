"""Simple collision and containment checks."""

from __future__ import annotations

from typing import Any

from .point import Point


def is_point_in_bitmap(pnt: Point, bitmap: Any) -> bool:
    """Return whether the pixel of ``bitmap`` at ``pnt`` is not fully transparent.

    ``bitmap`` is any surface offering ``get_at((x, y))`` that returns a colour
    with an ``a`` component, such as a pygame surface.
    """
    return bitmap.get_at((int(pnt.x), int(pnt.y))).a != 0


def is_point_in_rect(pnt: Point, rect_pos: Point, rect_size: Point) -> bool:
    """Return whether ``pnt`` lies inside the rectangle at ``rect_pos`` of ``rect_size``.

    The left and top edges are inside, the right and bottom edges are not.
    """
    return (
        rect_pos.x <= pnt.x < rect_pos.x + rect_size.x
        and rect_pos.y <= pnt.y < rect_pos.y + rect_size.y
    )


def is_rect_overlap(r1_min: Point, r1_max: Point, r2_min: Point, r2_max: Point) -> bool:
    """Return whether two rectangles given by their corners overlap.

    Rectangles that only touch along an edge do not overlap.
    """
    return (
        r1_max.x > r2_min.x
        and r2_max.x > r1_min.x
        and r1_max.y > r2_min.y
        and r2_max.y > r1_min.y
    )


def is_circle_overlap(c1: Point, r1: float, c2: Point, r2: float) -> bool:
    """Return whether two circles overlap; touching circles do not."""
    return (c1 - c2).magnitude() < r1 + r2