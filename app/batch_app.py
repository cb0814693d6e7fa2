from __future__ import annotations
from typing import Dict, List

import numpy as np

from capture.capture_base import Capture
from capture.video_writer import VideoFileWriter
from detection.detection_strategy import DetectionStrategy


class BatchApp:
    """Decode -> detect -> annotate -> encode, every frame in source order."""

    def __init__(
        self,
        capture: Capture,
        writer: VideoFileWriter,
        strategy: DetectionStrategy,
    ):
        self.capture = capture
        self.writer = writer
        self.strategy = strategy

    def run(self) -> List[int]:
        """Blob count per written frame."""
        counts: List[int] = []

        while True:
            ok, frame = self.capture.read()
            if not ok or frame is None:
                break

            out = self.strategy.process_frame(frame)
            self.writer.write(out.vis if out.vis is not None else frame)
            counts.append(len(out.detections))

        return counts


def summarize_counts(counts: List[int]) -> Dict[str, float]:
    arr = np.array(counts, dtype=np.float32)

    if arr.size == 0:
        return {"frames": 0, "mean": 0.0, "max": 0.0, "change_mean": 0.0, "change_max": 0.0}

    if arr.size > 1:
        diffs = np.abs(np.diff(arr))
        change_mean = float(np.mean(diffs))
        change_max = float(np.max(diffs))
    else:
        change_mean = change_max = 0.0

    return {
        "frames": int(arr.size),
        "mean": float(np.mean(arr)),
        "max": float(np.max(arr)),
        "change_mean": change_mean,
        "change_max": change_max,
    }


def print_summary(counts: List[int], output_path: str) -> None:
    s = summarize_counts(counts)
    print("==== Render summary ====")
    print(f"Output: {output_path}")
    print(f"Frames written: {s['frames']}")
    print(f"Caps per frame: mean {s['mean']:.2f}, max {s['max']:.0f}")
    print(f"Count change between frames (|n_t - n_t-1|): mean {s['change_mean']:.2f}, max {s['change_max']:.0f}")
