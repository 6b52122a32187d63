"""
Main application: webcam fist-bump detection with a hand-driven scene object.
"""
import argparse
import asyncio
import logging
import time
from typing import Optional

import cv2
import numpy as np

from .config import load_config
from .effects import EffectTrigger, MockEffects
from .landmarks import HandsTracker, draw_hands
from .processor import FrameProcessor, FrameReport
from .scene import TrackedObject

logger = logging.getLogger(__name__)


class FistBumpApp:
    """Main application class for fist-bump detection."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )
        self.processor = FrameProcessor(self.config)
        self.effects = EffectTrigger(MockEffects(), cooldown_ms=self.config.effects.cooldown_ms)
        self.tracked_object = TrackedObject(
            projection=self.config.projection,
            interaction=self.config.interaction
        )

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")
        logger.info(f"Camera {self.config.camera.index} opened")

    async def handle_report(self, report: FrameReport, t_now: float) -> None:
        """Drive the scene object and the effect layer from a frame report."""
        fist = report.first_fist()
        if fist is not None and fist.pose is not None:
            self.tracked_object.follow(fist.pose)
        else:
            self.tracked_object.reset()
        self.tracked_object.visible = fist is not None

        if report.fist_bump and report.bump_point is not None:
            x, y = report.bump_point
            await self.effects.fire(x, y, self.config.effects.message, t_now)

    def draw_overlay(self, frame: np.ndarray, report: FrameReport) -> np.ndarray:
        """Draw the debug panel and tracked object state."""
        y = 20
        for line in report.debug_lines():
            cv2.putText(frame, line, (10, y), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (255, 255, 255), 1)
            y += 14

        pos = self.tracked_object.position
        rot = self.tracked_object.rotation
        object_text = (f"Object: ({pos.x:.2f}, {pos.y:.2f}, {pos.z:.2f}) "
                       f"rot=({rot.pitch:.2f}, {rot.yaw:.2f}, {rot.roll:.2f})")
        cv2.putText(frame, object_text, (10, frame.shape[0] - 40), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (0, 255, 0), 1)
        cv2.putText(frame, "Press 'q' to quit", (10, frame.shape[0] - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        return frame

    async def run(self):
        """Run the main application loop."""
        logger.info(f"Starting {self.config.display.window_name}")

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("Failed to read frame from camera")
                    break

                hands = self.tracker.process(frame)

                t_now = time.monotonic()
                frame_wh = (frame.shape[1], frame.shape[0])  # (width, height)
                report = self.processor.process_frame(hands, frame_wh)

                await self.handle_report(report, t_now)

                if self.config.display.show_landmarks:
                    frame = draw_hands(frame, hands)
                if self.config.display.show_debug:
                    frame = self.draw_overlay(frame, report)

                cv2.imshow(self.config.display.window_name, frame)

                # Check for quit key
                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break
        finally:
            self.cap.release()
            self.tracker.close()
            cv2.destroyAllWindows()


async def main(argv=None):
    """Entry point for the application."""
    parser = argparse.ArgumentParser(description="Webcam fist-bump detector")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = FistBumpApp(config_path=args.config)
    await app.run()


def run(argv=None):
    # Ctrl-C cancels the task under asyncio.run, so catch it out here
    try:
        asyncio.run(main(argv))
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")


if __name__ == "__main__":
    run()
