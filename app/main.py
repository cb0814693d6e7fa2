from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from detection import DetectionParameters, STRATEGIES, make_strategy

from app.display import CvDisplay, WINDOW_NAME
from app.gui_controls import ParameterPanel
from app.video_app import VideoApp


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="capdetect",
        description="Live blue bottle cap detection with adjustable HSV range.",
    )
    parser.add_argument(
        "source",
        nargs="*",
        help="video file or camera index; asked for on stdin unless exactly one is given",
    )
    parser.add_argument(
        "--method",
        choices=sorted(STRATEGIES),
        default="color",
        help="detection method (default: color)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="also show the intermediate masks",
    )
    parser.add_argument(
        "--no-panel",
        action="store_true",
        help="run without the parameter window",
    )
    return parser


def initial_source(sources: List[str]) -> Optional[str]:
    """Only a single positional argument counts as a start-up source."""
    if len(sources) == 1:
        return sources[0]
    return None


def main(argv: Optional[List[str]] = None) -> int:
    # Never a usage error: unknown words just count as extra sources
    args, extra = build_arg_parser().parse_known_args(argv)

    params = DetectionParameters()
    strategy = make_strategy(args.method, params)

    display = CvDisplay(WINDOW_NAME)
    app = VideoApp(strategy, params, display, show_debug=args.debug)

    if not args.no_panel:
        panel = ParameterPanel(params, on_pause=app.set_paused)
        panel.open()
        display.attach_panel(panel)

    return app.run(initial_source(args.source + extra))


if __name__ == "__main__":
    sys.exit(main())
