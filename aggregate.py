"""
Circle aggregation: filter, sort by radius, and sum the radii.

The sum is a data-parallel reduction: radii are split into chunks, each chunk
is summed on a worker thread, and the partial sums are combined in completion
order. Floating point results can therefore differ from the sequential sum in
the last bits.
"""

import concurrent.futures
import logging

from curve_eval import curve_radius

log = logging.getLogger('opencurves.aggregate')

DEFAULT_CHUNK = 64


def circle_subset(curves):
    """Circles only, in generation order. The items are the same objects."""
    return [c for c in curves if c.kind == 'CIRCLE']


def sort_by_radius(curves):
    # sorted() is stable: equal radii keep their relative order
    return sorted(curves, key=curve_radius)


def _partial_sum(radii):
    s = 0.0
    for r in radii:
        s += r
    return s


def sum_radii(curves, max_workers=None, chunk_size=DEFAULT_CHUNK):
    """Sum of curve_radius over `curves` using a thread pool. Empty input -> 0.0."""
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    radii = [curve_radius(c) for c in curves]
    if not radii:
        return 0.0

    chunks = [radii[i:i + chunk_size] for i in range(0, len(radii), chunk_size)]
    log.debug("sum_radii: %d radii in %d chunk(s), max_workers=%s",
              len(radii), len(chunks), max_workers)

    total = 0.0
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(_partial_sum, chunk) for chunk in chunks]
        for future in concurrent.futures.as_completed(futures):
            total += future.result()
    return total


def aggregate_circles(curves, max_workers=None):
    """Return (circles sorted by radius, total of their radii)."""
    circles = sort_by_radius(circle_subset(curves))
    total = sum_radii(circles, max_workers=max_workers)
    return circles, total
