from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import CompileSettings, FTP_WATTS
from .errors import ZwoTimelineError
from .parsing.assembler import read_workout
from .storage.export import export_timeline_csv, export_workout_summary_csv
from .timeline.compiler import compile_workout

logger = logging.getLogger(__name__)


def _cmd_compile(args: argparse.Namespace) -> int:
    workout = read_workout(args.input)
    settings = CompileSettings(continuous_time=args.continuous_time, ftp_watts=args.ftp)
    timeline = compile_workout(workout, settings)
    output = args.output or str(Path(args.input).with_suffix(".timeline.csv"))
    export_timeline_csv(timeline, output, ftp_watts=settings.ftp_watts)
    minutes = len(timeline) / 60.0
    print(f"Compiled {Path(args.input).name}: {len(timeline)} samples ({minutes:.1f} min) -> {output}")
    return 0


def _cmd_summary(args: argparse.Namespace) -> int:
    workout = read_workout(args.input)
    output = args.output or str(Path(args.input).with_suffix(".summary.csv"))
    export_workout_summary_csv(workout, output)
    print(
        f"Parsed {Path(args.input).name}: {workout.segment_count} segments, "
        f"{len(workout.annotations)} annotations, {workout.planned_duration_s}s planned -> {output}"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compile .zwo workouts into per-second cadence/power targets")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_compile = sub.add_parser("compile", help="Write the per-second timeline as CSV")
    p_compile.add_argument("input", help="Input .zwo file")
    p_compile.add_argument("--output", help="Output CSV path (default: <input>.timeline.csv)")
    p_compile.add_argument("--ftp", type=float, default=None, help=f"FTP in watts to add a power_w column (e.g. {FTP_WATTS:.0f})")
    p_compile.add_argument("--continuous-time", action="store_true", help="Number seconds across the whole workout instead of per segment")
    p_compile.set_defaults(func=_cmd_compile)

    p_summary = sub.add_parser("summary", help="Write the decoded segments and annotations as CSV")
    p_summary.add_argument("input", help="Input .zwo file")
    p_summary.add_argument("--output", help="Output CSV path (default: <input>.summary.csv)")
    p_summary.set_defaults(func=_cmd_summary)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return args.func(args)
    except (ZwoTimelineError, FileNotFoundError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
