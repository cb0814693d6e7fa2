from __future__ import annotations
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import numpy as np

from capture.capture_base import Capture
from capture.cv_capture import OpenCVCapture
from capture.errors import SourceOpenError
from detection.detection_strategy import DetectionStrategy
from detection.parameters import DetectionParameters

KEY_ESC = 27
QUIT_KEYS = (KEY_ESC, ord("q"))
PAUSE_KEYS = (ord(" "),)
RESTART_KEYS = (ord("r"), ord("R"))
LOAD_KEYS = (ord("l"), ord("L"))

SOURCE_PROMPT = "Enter video file path (or 'quit' to exit): "
FINISHED_PROMPT = "Video finished. Load another? (Enter path or 'quit'): "
QUIT_WORDS = ("quit", "q")

CONTROLS_HELP = (
    "Controls:\n"
    "  SPACE - Pause/Resume\n"
    "  'r' - Restart video from beginning\n"
    "  'l' - Load new video file\n"
    "  ESC or 'q' - Quit application"
)


class Status(Enum):
    PROMPTING = "prompting"
    PLAYING = "playing"
    PAUSED = "paused"
    FINISHED = "finished"


class Outcome(Enum):
    FINISHED = "finished"
    LOAD_NEW = "load_new"
    OPEN_FAILED = "open_failed"
    QUIT = "quit"


@dataclass
class PlaybackState:
    source_path: Optional[str] = None
    paused: bool = False
    # only read while paused; never drawn on
    last_frame: Optional[np.ndarray] = None


class VideoApp:
    """
    Interactive playback loop.

    One source is open at a time. Each tick decodes a frame (unless paused),
    runs the detector on it, shows the annotated result and waits for a key
    for `params.delay_ms()`; the key decides what happens next.
    """

    def __init__(
        self,
        strategy: DetectionStrategy,
        params: DetectionParameters,
        display,
        open_capture: Callable[[str], Capture] = OpenCVCapture.open,
        prompt: Callable[[str], str] = input,
        show_debug: bool = False,
    ):
        self.strategy = strategy
        self.params = params
        self.display = display
        self.open_capture = open_capture
        self.prompt = prompt
        self.show_debug = show_debug

        self.state = PlaybackState()
        self.status = Status.PROMPTING
        self.capture: Optional[Capture] = None

    # ------------------------------------------------------------
    #   Outer loop: prompt -> play -> prompt ...
    # ------------------------------------------------------------
    def run(self, initial_source: Optional[str] = None) -> int:
        source = initial_source
        message = SOURCE_PROMPT

        try:
            while True:
                if not source:
                    source = self.ask_for_source(message)
                    if source is None:
                        break
                    if not source:
                        continue

                outcome = self.play(source)
                if outcome is Outcome.QUIT:
                    break

                message = FINISHED_PROMPT if outcome is Outcome.FINISHED else SOURCE_PROMPT
                source = None
        finally:
            self.display.close()

        print("[VideoApp] Stopped.")
        return 0

    def ask_for_source(self, message: str = SOURCE_PROMPT) -> Optional[str]:
        """The answer, stripped; None means quit."""
        self.status = Status.PROMPTING
        try:
            answer = self.prompt(message)
        except EOFError:
            return None

        answer = answer.strip()
        if answer in QUIT_WORDS:
            return None
        return answer

    def play(self, source: str) -> Outcome:
        try:
            capture = self.open_capture(source)
        except SourceOpenError as e:
            print(f"[VideoApp] {e}", file=sys.stderr)
            self.status = Status.PROMPTING
            return Outcome.OPEN_FAILED

        self.state.source_path = source
        self.state.last_frame = None
        self.capture = capture
        self.status = Status.PAUSED if self.state.paused else Status.PLAYING

        print(f"[VideoApp] Playing: {source}")
        print(CONTROLS_HELP)

        outcome: Optional[Outcome] = None
        try:
            with capture:
                while True:
                    outcome = self.tick()
                    if outcome is not None:
                        break
        finally:
            self.capture = None

        if outcome is not Outcome.FINISHED:
            self.status = Status.PROMPTING
        return outcome

    # ------------------------------------------------------------
    #   One iteration
    # ------------------------------------------------------------
    def tick(self) -> Optional[Outcome]:
        if self.capture is None:
            raise RuntimeError("tick() without an open source")

        if not self.state.paused:
            ok, frame = self.capture.read()
            if not ok or frame is None:
                print("[VideoApp] Video finished.")
                self.status = Status.FINISHED
                return Outcome.FINISHED
            self.state.last_frame = frame
        else:
            # Paused before anything was decoded: nothing to show yet
            frame = self.state.last_frame

        if frame is not None:
            out = self.strategy.process_frame(frame)
            self.display.show(out.vis if out.vis is not None else frame)
            if self.show_debug and out.debug:
                self.display.show_debug(out.debug)

        key = self.display.wait_key(self.params.delay_ms())
        return self.handle_key(key)

    def handle_key(self, key: int) -> Optional[Outcome]:
        if key in QUIT_KEYS:
            return Outcome.QUIT
        if key in PAUSE_KEYS:
            self.toggle_pause()
        elif key in RESTART_KEYS:
            self.restart()
        elif key in LOAD_KEYS:
            return Outcome.LOAD_NEW
        return None

    # ------------------------------------------------------------
    #   State changes (keys and panel)
    # ------------------------------------------------------------
    def set_paused(self, paused: bool) -> None:
        paused = bool(paused)
        if paused == self.state.paused:
            return

        self.state.paused = paused
        if self.capture is not None:
            self.status = Status.PAUSED if paused else Status.PLAYING
        print("[VideoApp] " + ("Video PAUSED" if paused else "Video PLAYING"))

    def toggle_pause(self) -> None:
        self.set_paused(not self.state.paused)
        self.display.paused_changed(self.state.paused)

    def restart(self) -> None:
        if self.capture is None:
            return
        self.capture.restart()
        print("[VideoApp] Video restarted from beginning")
