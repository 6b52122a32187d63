"""
Test cases for the application entry point.
"""
import importlib.util
import logging
import sys
import unittest
from pathlib import Path
from unittest import mock

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

HAS_CAMERA_STACK = all(importlib.util.find_spec(name) for name in ("cv2", "mediapipe"))


@unittest.skipUnless(HAS_CAMERA_STACK, "needs the camera extra (opencv-python, mediapipe)")
class TestRun(unittest.TestCase):
    """Test the synchronous entry point."""

    def test_ctrl_c_is_logged_not_raised(self):
        from fistbump import main as app_main

        def interrupted(coro):
            coro.close()
            raise KeyboardInterrupt

        with mock.patch.object(app_main.asyncio, "run", side_effect=interrupted):
            with self.assertLogs(app_main.logger, level=logging.INFO) as logs:
                app_main.run([])

        self.assertIn("Application interrupted by user", logs.output[0])


if __name__ == '__main__':
    unittest.main()
