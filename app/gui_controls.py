from __future__ import annotations

from typing import Callable, Optional

import dearpygui.dearpygui as dpg

from detection.parameters import (
    DetectionParameters,
    HUE_MAX,
    SAT_MAX,
    VAL_MAX,
    MIN_AREA_LIMIT,
    MAX_AREA_LIMIT,
    SPEED_SLIDER_MIN,
    SPEED_SLIDER_MAX,
)


class ParameterPanel:
    """
    DearPyGui window with the detector sliders and the pause toggle.

    Owns:
      - nothing but widget ids; every slider writes straight into `params`
      - the pause checkbox, which reports through `on_pause`

    Callbacks are queued (manual callback management) and only run from
    `poll()`, which the display calls once per tick. The video loop and the
    panel therefore share one thread and `params` needs no lock.
    """

    def __init__(
        self,
        params: DetectionParameters,
        on_pause: Optional[Callable[[bool], None]] = None,
        title: str = "Parameters",
    ):
        self.params = params
        self.on_pause = on_pause
        self.title = title

        self.widgets = {}
        self._pause_box = None
        self._opened = False

    # ------------------------------------------------------------
    #   DearPyGui setup
    # ------------------------------------------------------------
    def open(self) -> None:
        dpg.create_context()
        dpg.configure_app(manual_callback_management=True)
        dpg.create_viewport(title=self.title, width=460, height=400)

        self.build()

        dpg.setup_dearpygui()
        dpg.show_viewport()
        self._opened = True

    def build(self) -> None:
        """Create the widgets in the current dearpygui context."""
        with dpg.window(label="Cap detection", width=440, height=380):
            dpg.add_text("HSV range")
            self._add_param_slider("Lower Hue", "lower_hue", HUE_MAX)
            self._add_param_slider("Lower Sat", "lower_sat", SAT_MAX)
            self._add_param_slider("Lower Val", "lower_val", VAL_MAX)
            self._add_param_slider("Upper Hue", "upper_hue", HUE_MAX)
            self._add_param_slider("Upper Sat", "upper_sat", SAT_MAX)
            self._add_param_slider("Upper Val", "upper_val", VAL_MAX)

            dpg.add_separator()
            dpg.add_text("Contour area (px)")
            self._add_param_slider("Min Area", "min_area", MIN_AREA_LIMIT)
            self._add_param_slider("Max Area", "max_area", MAX_AREA_LIMIT)

            dpg.add_separator()
            dpg.add_text("Playback")

            def on_speed(sender, app_data):
                self.params.set_speed_slider(int(app_data))
                dpg.set_value(sender, self.params.speed_slider)
                print(f"[GUI] Video speed: {self.params.speed:.1f}x")

            self.widgets["speed"] = dpg.add_slider_int(
                label="Video Speed (0.1x - 2.0x)",
                min_value=SPEED_SLIDER_MIN,
                max_value=SPEED_SLIDER_MAX,
                default_value=self.params.speed_slider,
                callback=on_speed,
            )

            def on_pause_toggle(sender, app_data):
                if self.on_pause is not None:
                    self.on_pause(bool(app_data))

            self._pause_box = dpg.add_checkbox(
                label="PAUSE (toggle with SPACE key)",
                default_value=False,
                callback=on_pause_toggle,
            )
            self.widgets["pause"] = self._pause_box

    def _add_param_slider(self, label: str, attr: str, max_value: int) -> None:
        def on_change(sender, app_data, user_data):
            setattr(self.params, user_data, int(app_data))
            print(f"[GUI] {label}:", int(app_data))

        self.widgets[attr] = dpg.add_slider_int(
            label=label,
            min_value=0,
            max_value=max_value,
            default_value=int(getattr(self.params, attr)),
            callback=on_change,
            user_data=attr,
        )

    # ------------------------------------------------------------
    #   Per-tick hooks
    # ------------------------------------------------------------
    def poll(self) -> None:
        if not self._opened or not dpg.is_dearpygui_running():
            return
        dpg.run_callbacks(dpg.get_callback_queue())
        dpg.render_dearpygui_frame()

    def set_paused(self, paused: bool) -> None:
        if self._pause_box is not None:
            dpg.set_value(self._pause_box, bool(paused))

    def close(self) -> None:
        if self._opened:
            dpg.destroy_context()
            self._opened = False
        self._pause_box = None
        self.widgets = {}
