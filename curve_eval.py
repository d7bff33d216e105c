# Parametric curve variants (CIRCLE, ELLIPSE, HELIX) and their evaluators.
# Each curve is an immutable record tagged by `kind`; evaluation dispatches on
# the tag, so the report and the aggregation never need isinstance checks.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, List, Tuple, Union

import numpy as np

Point3 = Tuple[float, float, float]
Tangent3 = Tuple[float, float, float]

TWO_PI = 2.0 * math.pi


class InvalidParameter(ValueError):
    """A geometric parameter is not strictly positive."""


def _positive(*values):
    # NaN fails this check as well
    return all(v > 0 for v in values)


@dataclass(frozen=True)
class Circle:
    radius: float
    kind: ClassVar[str] = 'CIRCLE'

    def __post_init__(self):
        if not _positive(self.radius):
            raise InvalidParameter("Circle radius must be positive.")


@dataclass(frozen=True)
class Ellipse:
    major: float
    minor: float
    kind: ClassVar[str] = 'ELLIPSE'

    def __post_init__(self):
        if not _positive(self.major, self.minor):
            raise InvalidParameter("Ellipse radii must be positive.")


@dataclass(frozen=True)
class Helix:
    radius: float
    step: float
    kind: ClassVar[str] = 'HELIX'

    def __post_init__(self):
        if not _positive(self.radius, self.step):
            raise InvalidParameter("Helix radius and step must be positive.")


Curve = Union[Circle, Ellipse, Helix]


def eval_curve_at_t(curve: Curve, t: float) -> Point3:
    """
    Evaluate the curve position at parameter t.
    Returns (x, y, z).
    """
    c, s = math.cos(t), math.sin(t)
    kind = curve.kind
    if kind == 'CIRCLE':
        return (curve.radius * c, curve.radius * s, 0.0)
    if kind == 'ELLIPSE':
        return (curve.major * c, curve.minor * s, 0.0)
    if kind == 'HELIX':
        return (curve.radius * c, curve.radius * s, curve.step * t / TWO_PI)
    raise ValueError(f"Unknown curve kind: {kind!r}")


def eval_derivative_at_t(curve: Curve, t: float) -> Tangent3:
    """
    First derivative d/dt of the position at parameter t.
    Returns (dx, dy, dz).
    """
    c, s = math.cos(t), math.sin(t)
    kind = curve.kind
    if kind == 'CIRCLE':
        return (-curve.radius * s, curve.radius * c, 0.0)
    if kind == 'ELLIPSE':
        return (-curve.major * s, curve.minor * c, 0.0)
    if kind == 'HELIX':
        return (-curve.radius * s, curve.radius * c, curve.step / TWO_PI)
    raise ValueError(f"Unknown curve kind: {kind!r}")


def curve_radius(curve: Curve) -> float:
    """Defining radius: the circle radius, the ellipse MAJOR radius, the helix radius."""
    kind = curve.kind
    if kind == 'ELLIPSE':
        return curve.major
    if kind in ('CIRCLE', 'HELIX'):
        return curve.radius
    raise ValueError(f"Unknown curve kind: {kind!r}")


def helix_step(curve: Curve) -> float:
    if curve.kind != 'HELIX':
        raise TypeError(f"{curve.kind} has no step")
    return curve.step


def sample_curve(curve: Curve, t0: float, t1: float, samples: int = 100) -> List[Point3]:
    """
    Uniformly sample the curve on [t0, t1], endpoints included.
    Returns a list of (x, y, z).
    """
    m = max(2, int(samples))
    ts = np.linspace(t0, t1, m)
    c, s = np.cos(ts), np.sin(ts)
    kind = curve.kind
    if kind == 'CIRCLE':
        xs, ys, zs = curve.radius * c, curve.radius * s, np.zeros_like(ts)
    elif kind == 'ELLIPSE':
        xs, ys, zs = curve.major * c, curve.minor * s, np.zeros_like(ts)
    elif kind == 'HELIX':
        xs, ys, zs = curve.radius * c, curve.radius * s, curve.step * ts / TWO_PI
    else:
        raise ValueError(f"Unknown curve kind: {kind!r}")
    return [(float(x), float(y), float(z)) for x, y, z in zip(xs, ys, zs)]
