# Global constants for curve generation, evaluation and plotting.
# Ranges are half-open [low, high).

import math

CURVE_COUNT = 5
RADIUS_RANGE = (1.0, 11.0)
STEP_RANGE = (1.0, 6.0)
ELLIPSE_MINOR_RATIO = 0.5

# Selector order used by the generator: 0 -> CIRCLE, 1 -> ELLIPSE, 2 -> HELIX
CURVE_KINDS = ('CIRCLE', 'ELLIPSE', 'HELIX')

EVAL_T = math.pi / 4

PLOT_SAMPLES = 200
HELIX_TURNS = 3

LOGGER_NAME = 'opencurves'
