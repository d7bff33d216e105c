# OpenCurves3D CLI: generate random curves, report them at t, sum circle radii.
# Usage:
#   python cli.py
#   python cli.py --seed 42 --count 10
#   python cli.py --plot --projection iso
#   python cli.py --save-plot curves.png
#
# Notes:
# - With no arguments: 5 curves, wall-clock seed, t = PI/4.
# - Report goes to stdout; logs and errors go to stderr.

import argparse
import logging
import sys

import aggregate
import curve_gen
import data_print
from config import CURVE_COUNT, EVAL_T, RADIUS_RANGE, STEP_RANGE
from curve_eval import InvalidParameter
from logging_config import setup_logging

log = logging.getLogger('opencurves.cli')


def _build_parser():
    ap = argparse.ArgumentParser(description="OpenCurves3D: random 3D curves report")
    ap.add_argument("--seed", type=int, default=None, help="Random seed (default: wall clock)")
    ap.add_argument("--count", type=int, default=CURVE_COUNT, help="Number of curves to generate")
    ap.add_argument("--t", dest="t", type=float, default=EVAL_T, help="Evaluation parameter (default: PI/4)")
    ap.add_argument("--radius-min", type=float, default=RADIUS_RANGE[0])
    ap.add_argument("--radius-max", type=float, default=RADIUS_RANGE[1])
    ap.add_argument("--step-min", type=float, default=STEP_RANGE[0])
    ap.add_argument("--step-max", type=float, default=STEP_RANGE[1])
    ap.add_argument("--workers", type=int, default=None, help="Worker threads for the radius sum")
    ap.add_argument("--plot", action="store_true", help="Show the curves in a matplotlib window")
    ap.add_argument("--projection", "-p", dest="projection", choices=["xy", "yz", "xz", "iso"], default="xy",
                    help="2D projection for plotting: xy, yz, xz, or iso (isometric)")
    ap.add_argument("--save-plot", dest="save_plot", help="Save the plot to this file instead of showing it")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-file", default=None, help="Also write logs to this file")
    return ap


def main(argv=None):
    ap = _build_parser()
    args = ap.parse_args(argv)

    if args.count < 0:
        ap.error("--count must be >= 0")
    if args.radius_min >= args.radius_max:
        ap.error("--radius-min must be less than --radius-max")
    if args.step_min >= args.step_max:
        ap.error("--step-min must be less than --step-max")
    if args.workers is not None and args.workers < 1:
        ap.error("--workers must be >= 1")

    setup_logging(getattr(logging, args.log_level), args.log_file)

    rng, seed = curve_gen.make_rng(args.seed)
    try:
        curves = curve_gen.generate_curves(
            rng,
            count=args.count,
            radius_range=(args.radius_min, args.radius_max),
            step_range=(args.step_min, args.step_max),
        )
    except InvalidParameter as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1
    log.info("Generated %d curves (seed %d)", len(curves), seed)

    data_print.print_curve_report(curves, args.t)

    circles, total = aggregate.aggregate_circles(curves, max_workers=args.workers)
    log.info("%d circle(s) of %d curves", len(circles), len(curves))
    data_print.print_circle_summary(circles, total)

    if args.plot or args.save_plot:
        import plot
        if not curves:
            log.warning("Nothing to plot.")
        else:
            path = plot.plot_curves(curves, projection=args.projection, t=args.t,
                                    out_path=args.save_plot)
            if path:
                print(f"Saved plot -> {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
