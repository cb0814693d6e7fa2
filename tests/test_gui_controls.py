import unittest

import dearpygui.dearpygui as dpg

from app.gui_controls import ParameterPanel
from detection import DetectionParameters


class ParameterPanelTest(unittest.TestCase):
    def setUp(self):
        dpg.create_context()
        self.params = DetectionParameters()
        self.pauses = []
        self.panel = ParameterPanel(self.params, on_pause=self.pauses.append)
        self.panel.build()

    def tearDown(self):
        dpg.destroy_context()

    def fire(self, key, value):
        item = self.panel.widgets[key]
        callback = dpg.get_item_callback(item)
        user_data = dpg.get_item_user_data(item)
        if user_data is None:
            callback(item, value)
        else:
            callback(item, value, user_data)

    def test_sliders_start_at_current_values(self):
        self.assertEqual(dpg.get_value(self.panel.widgets["lower_hue"]), 100)
        self.assertEqual(dpg.get_value(self.panel.widgets["max_area"]), 50000)
        self.assertEqual(dpg.get_value(self.panel.widgets["speed"]), 10)

    def test_sliders_write_parameters(self):
        self.fire("lower_hue", 90)
        self.fire("upper_val", 200)
        self.fire("min_area", 500)

        self.assertEqual(self.params.lower_hue, 90)
        self.assertEqual(self.params.upper_val, 200)
        self.assertEqual(self.params.min_area, 500)

    def test_speed_slider(self):
        self.fire("speed", 20)

        self.assertAlmostEqual(self.params.speed, 2.0)
        self.assertEqual(self.params.delay_ms(), 15)

    def test_pause_checkbox_reports(self):
        self.fire("pause", True)
        self.fire("pause", False)

        self.assertEqual(self.pauses, [True, False])

    def test_set_paused_updates_checkbox(self):
        self.panel.set_paused(True)

        self.assertTrue(dpg.get_value(self.panel.widgets["pause"]))


if __name__ == "__main__":
    unittest.main()
