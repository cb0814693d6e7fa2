import unittest
from unittest import mock

from app import main as cli
from app.video_app import VideoApp


class InteractiveCliTest(unittest.TestCase):
    def run_main(self, argv):
        with mock.patch.object(VideoApp, "run", return_value=0) as run:
            code = cli.main(argv + ["--no-panel"])
        return code, run.call_args[0][0]

    def test_single_source_is_played(self):
        self.assertEqual(self.run_main(["clip.avi"]), (0, "clip.avi"))

    def test_no_source_prompts(self):
        self.assertEqual(self.run_main([]), (0, None))

    def test_two_sources_prompt_instead_of_failing(self):
        self.assertEqual(self.run_main(["a.avi", "b.avi"]), (0, None))

    def test_unknown_option_is_not_a_usage_error(self):
        self.assertEqual(self.run_main(["clip.avi", "--fullscreen"]), (0, None))

    def test_initial_source(self):
        self.assertEqual(cli.initial_source(["x.avi"]), "x.avi")
        self.assertIsNone(cli.initial_source([]))
        self.assertIsNone(cli.initial_source(["x.avi", "y.avi"]))


if __name__ == "__main__":
    unittest.main()
