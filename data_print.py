# Print the curve report and the circle summary to the terminal.
import math
import sys

import curve_eval as ce
from config import EVAL_T


def format_number(v):
    """Six significant digits, like a default iostream (e.g. 1.41421, 0.125, 1e-07)."""
    return f"{v:g}"


def _format_triple(p):
    return "(" + ", ".join(format_number(v) for v in p) + ")"


def _format_t(t):
    if math.isclose(t, math.pi / 4):
        return "PI/4"
    return format_number(t)


def format_curve_type(curve):
    kind = curve.kind
    if kind == 'CIRCLE':
        return f"Circle, Radius: {format_number(ce.curve_radius(curve))}"
    if kind == 'ELLIPSE':
        return f"Ellipse, Major Radius: {format_number(ce.curve_radius(curve))}"
    if kind == 'HELIX':
        return (f"Helix, Radius: {format_number(ce.curve_radius(curve))}, "
                f"Step: {format_number(ce.helix_step(curve))}")
    raise ValueError(f"Unknown curve kind: {kind!r}")


def print_curve_report(curves, t=EVAL_T, out=None):
    """Print type, point and derivative of each curve at t, in the given order."""
    out = out or sys.stdout
    print(f"Coordinates and Derivatives at t={_format_t(t)}:", file=out)
    for curve in curves:
        point = ce.eval_curve_at_t(curve, t)
        deriv = ce.eval_derivative_at_t(curve, t)
        print(f"Curve Type: {format_curve_type(curve)}", file=out)
        print(f"Point (x, y, z): {_format_triple(point)}", file=out)
        print(f"Derivative (dx, dy, dz): {_format_triple(deriv)}", file=out)
        print(file=out)


def print_circle_summary(circles, total, out=None):
    """Print the (already sorted) circles and the sum of their radii."""
    out = out or sys.stdout
    print("Sorted Circles by Radius:", file=out)
    for circle in circles:
        print(f"Circle, Radius: {format_number(ce.curve_radius(circle))}", file=out)
    print(f"Total Sum of Radii: {format_number(total)}", file=out)
