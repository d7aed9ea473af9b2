"""
Transform Engine.

Pure functions mapping an ordered sequence of points plus one
transformation spec to a new sequence of points. Output index i always
corresponds to input index i, which the canvas relies on for labels
(A -> A') and the coordinate table relies on for diffing.

The engine never raises for numeric input. NaN and infinity are not
sanitized; they propagate through the arithmetic.
"""

import logging
import math
from functools import lru_cache
from typing import Sequence

from models.geometry import (
    ORIGIN, Point, Shape, TransformationMode, TransformSpec,
    Translation, Reflection, ReflectionAxis, Rotation, RotationDirection,
    Enlargement, SPEC_TYPES,
)

logger = logging.getLogger(__name__)


def translate(points: Sequence[Point], spec: Translation) -> Shape:
    return tuple(Point(p.x + spec.dx, p.y + spec.dy) for p in points)


def reflect(points: Sequence[Point], spec: Reflection) -> Shape:
    if spec.axis == ReflectionAxis.X:
        return tuple(Point(p.x, -p.y) for p in points)
    if spec.axis == ReflectionAxis.Y:
        return tuple(Point(-p.x, p.y) for p in points)

    # Mirror line y = m*x + c
    m, c = spec.m, spec.c
    denom = 1 + m * m
    if denom == 0:
        # Unreachable for real m; identity fallback
        return tuple(points)

    return tuple(
        Point(
            (p.x * (1 - m * m) + p.y * 2 * m - 2 * m * c) / denom,
            (p.x * 2 * m + p.y * (m * m - 1) + 2 * c) / denom,
        )
        for p in points
    )


def rotate(points: Sequence[Point], spec: Rotation) -> Shape:
    center = spec.center or ORIGIN
    sign = -1 if spec.direction == RotationDirection.CLOCKWISE else 1
    rad = spec.angle * sign * math.pi / 180
    cos_a, sin_a = math.cos(rad), math.sin(rad)

    return tuple(
        Point(
            cos_a * (p.x - center.x) - sin_a * (p.y - center.y) + center.x,
            sin_a * (p.x - center.x) + cos_a * (p.y - center.y) + center.y,
        )
        for p in points
    )


def enlarge(points: Sequence[Point], spec: Enlargement) -> Shape:
    center = spec.center or ORIGIN
    scale = spec.scale
    return tuple(
        Point(
            center.x + scale * (p.x - center.x),
            center.y + scale * (p.y - center.y),
        )
        for p in points
    )


_DISPATCH = {
    Translation: translate,
    Reflection: reflect,
    Rotation: rotate,
    Enlargement: enlarge,
}


def apply(points: Sequence[Point], spec: TransformSpec) -> Shape:
    """
    Apply one transformation to every point.

    Args:
        points: Shape to transform (not modified)
        spec: Translation, Reflection, Rotation or Enlargement

    Returns:
        New tuple of points, same length and order as ``points``

    Raises:
        TypeError: if ``spec`` is not one of the four spec types
    """
    func = _DISPATCH.get(type(spec))
    if func is None:
        raise TypeError(f"Unknown transformation spec: {spec!r}")
    result = func(points, spec)
    logger.debug(f"Applied {spec} to {len(result)} points")
    return result


@lru_cache(maxsize=64)
def apply_cached(points: Shape, spec: TransformSpec) -> Shape:
    """``apply`` memoized on input equality; ``points`` must be a tuple."""
    return apply(points, spec)


# ---- display policy ----

def is_applied(spec: TransformSpec) -> bool:
    """
    Whether the canvas should draw the transformed shape.

    This is a display decision only: ``apply`` computes identities too.
    """
    if isinstance(spec, Translation):
        return spec.dx != 0 or spec.dy != 0
    if isinstance(spec, Reflection):
        return True
    if isinstance(spec, Rotation):
        return spec.angle != 0
    if isinstance(spec, Enlargement):
        return spec.scale != 1
    return False


def default_spec(mode: TransformationMode) -> TransformSpec:
    return SPEC_TYPES[mode]()


def mode_of(spec: TransformSpec) -> TransformationMode:
    for mode, spec_type in SPEC_TYPES.items():
        if isinstance(spec, spec_type):
            return mode
    raise TypeError(f"Unknown transformation spec: {spec!r}")


def format_coordinate(value: float) -> str:
    """Round to 2 decimals and drop trailing zeros: 3.0 -> '3', 2.499 -> '2.5'."""
    rounded = round(value, 2)
    if rounded == 0:
        rounded = 0.0  # avoid "-0"
    text = f"{rounded:.2f}".rstrip("0").rstrip(".")
    return text


def format_point(p: Point) -> str:
    return f"({format_coordinate(p.x)}, {format_coordinate(p.y)})"


def has_moved(original: Point, transformed: Point, tolerance: float = 0.01) -> bool:
    return (abs(original.x - transformed.x) > tolerance
            or abs(original.y - transformed.y) > tolerance)


def _signed(value: float) -> str:
    text = format_coordinate(value)
    return f"+{text}" if value > 0 else text


def _center_text(center) -> str:
    return format_point(center) if center else "Origin"


def describe(spec: TransformSpec) -> str:
    """One-line description, e.g. 'Translated by (+3, -1)'."""
    if isinstance(spec, Translation):
        return f"Translated by ({_signed(spec.dx)}, {_signed(spec.dy)})"
    if isinstance(spec, Reflection):
        if spec.axis == ReflectionAxis.X:
            return "Reflected on X-Axis"
        if spec.axis == ReflectionAxis.Y:
            return "Reflected on Y-Axis"
        return f"Reflected on y={format_coordinate(spec.m)}x+{format_coordinate(spec.c)}"
    if isinstance(spec, Rotation):
        return (f"{format_coordinate(spec.angle)}° {spec.direction.value} "
                f"around {_center_text(spec.center)}")
    if isinstance(spec, Enlargement):
        return (f"Enlarged by factor {format_coordinate(spec.scale)} "
                f"around {_center_text(spec.center)}")
    return "No transformation"
