# Random curve generator.
# The random source is passed in explicitly; make_rng() builds one seeded from
# wall-clock time unless a seed is given.

import logging
import time

import numpy as np

from config import CURVE_COUNT, CURVE_KINDS, ELLIPSE_MINOR_RATIO, RADIUS_RANGE, STEP_RANGE
from curve_eval import Circle, Ellipse, Helix

log = logging.getLogger('opencurves.curve_gen')


def make_rng(seed=None):
    """Return (rng, seed). A seed of None is taken from the wall clock."""
    if seed is None:
        seed = time.time_ns()
    log.info("Random seed: %d", seed)
    return np.random.default_rng(seed), seed


def _make_curve(kind, radius, step):
    if kind == 'CIRCLE':
        return Circle(radius)
    if kind == 'ELLIPSE':
        return Ellipse(radius, radius * ELLIPSE_MINOR_RATIO)
    if kind == 'HELIX':
        return Helix(radius, step)
    raise ValueError(f"Unknown curve kind: {kind!r}")


def generate_curves(rng, count=CURVE_COUNT, radius_range=RADIUS_RANGE, step_range=STEP_RANGE):
    """
    Draw `count` curves. Per curve, in order: a radius in [radius_range),
    a step in [step_range), then a variant uniformly over CURVE_KINDS.
    Ellipses get minor = ELLIPSE_MINOR_RATIO * radius.

    Raises curve_eval.InvalidParameter if a range yields non-positive values.
    """
    r_lo, r_hi = radius_range
    s_lo, s_hi = step_range
    curves = []
    for i in range(int(count)):
        radius = float(rng.uniform(r_lo, r_hi))
        step = float(rng.uniform(s_lo, s_hi))
        kind = CURVE_KINDS[int(rng.integers(len(CURVE_KINDS)))]
        curve = _make_curve(kind, radius, step)
        log.debug("curve %d: %r", i, curve)
        curves.append(curve)
    return curves
