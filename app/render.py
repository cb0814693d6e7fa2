from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from capture.cv_capture import OpenCVCapture
from capture.errors import FrameSizeError, OutputOpenError, SourceOpenError
from capture.video_writer import VideoFileWriter, OUTPUT_PATH, OUTPUT_FOURCC, OUTPUT_FPS
from detection import DetectionParameters, STRATEGIES, make_strategy

from app.batch_app import BatchApp, print_summary


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="capdetect-render",
        description=f"Detect blue bottle caps in a video and write the annotated result to {OUTPUT_PATH}.",
    )
    parser.add_argument("source", help="input video file (or camera index)")
    parser.add_argument(
        "--method",
        choices=sorted(STRATEGIES),
        default="color",
        help="detection method (default: color)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    params = DetectionParameters()
    strategy = make_strategy(args.method, params)

    try:
        with OpenCVCapture.open(args.source) as capture:
            with VideoFileWriter(OUTPUT_PATH, capture.frame_size, OUTPUT_FPS, OUTPUT_FOURCC) as writer:
                print(f"[render] {args.source} -> {OUTPUT_PATH} "
                      f"({writer.frame_size[0]}x{writer.frame_size[1]} @ {OUTPUT_FPS:.0f} fps)")
                counts = BatchApp(capture, writer, strategy).run()
    except SourceOpenError as e:
        print(f"[render] {e}", file=sys.stderr)
        return 1
    except OutputOpenError as e:
        print(f"[render] {e}", file=sys.stderr)
        return 1
    except FrameSizeError as e:
        # decoder reported a frame size its frames do not have
        print(f"[render] {e}", file=sys.stderr)
        return 1

    print_summary(counts, OUTPUT_PATH)
    return 0


if __name__ == "__main__":
    sys.exit(main())
