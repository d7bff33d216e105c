# Plotting helpers. One chart per call, no styles set.
import math

import matplotlib.pyplot as plt

import curve_eval as ce
from config import HELIX_TURNS, PLOT_SAMPLES

_COLORS = {'CIRCLE': 'blue', 'ELLIPSE': 'red', 'HELIX': 'green'}


def _axis_labels(projection):
    """Return appropriate axis labels for the given projection."""
    if projection == 'xy':
        return 'X', 'Y'
    elif projection == 'xz':
        return 'X', 'Z'
    elif projection == 'yz':
        return 'Y', 'Z'
    elif projection == 'iso':
        return 'Iso-X', 'Iso-Y'
    else:
        return 'X', 'Y'  # default to xy


def _project_point(point, projection):
    """Project a 3D point to 2D based on the projection type."""
    x, y, z = point[:3]
    if projection == 'xy':
        return (x, y)
    elif projection == 'xz':
        return (x, z)
    elif projection == 'yz':
        return (y, z)
    elif projection == 'iso':
        # Rotate 45 deg about Z, then 35.264 deg about X, drop depth
        angle_x = math.radians(35.26438968)
        angle_z = math.radians(45)
        xr = x * math.cos(angle_z) - y * math.sin(angle_z)
        yr = x * math.sin(angle_z) + y * math.cos(angle_z)
        yr2 = yr * math.cos(angle_x) - z * math.sin(angle_x)
        return (xr, yr2)
    else:
        return (x, y)  # default to xy


def _param_range(curve, turns):
    # closed curves need one turn; a helix is shown over several
    if curve.kind == 'HELIX':
        return 0.0, 2.0 * math.pi * turns
    return 0.0, 2.0 * math.pi


def plot_curves(curves, projection='xy', samples=PLOT_SAMPLES, turns=HELIX_TURNS,
                t=None, out_path=None):
    """
    Draw every curve in one chart. If t is given, mark each curve's point at t.
    Shows the window, or saves to out_path and closes the figure.
    """
    if not curves:
        raise ValueError("No curves to plot.")

    fig = plt.figure()
    for i, curve in enumerate(curves):
        t0, t1 = _param_range(curve, turns)
        proj = [_project_point(p, projection) for p in ce.sample_curve(curve, t0, t1, samples)]
        xs = [p[0] for p in proj]
        ys = [p[1] for p in proj]
        color = _COLORS.get(curve.kind, 'gray')
        plt.plot(xs, ys, color=color, linewidth=1.2,
                 label=f"{i + 1}: {curve.kind.capitalize()}")
        if t is not None:
            px, py = _project_point(ce.eval_curve_at_t(curve, t), projection)
            plt.plot([px], [py], marker='o', color=color)

    title = f"Curves ({projection})"
    if t is not None:
        title += f", t={t:g}"
    plt.title(title)
    xl, yl = _axis_labels(projection)
    plt.xlabel(xl)
    plt.ylabel(yl)
    plt.axis('equal')
    plt.legend()

    if out_path:
        fig.savefig(out_path)
        plt.close(fig)
        return out_path
    plt.show()
    return None
