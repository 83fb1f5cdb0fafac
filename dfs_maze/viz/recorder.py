import logging
import os
import pygame
import cv2
import numpy as np
from datetime import datetime

logger = logging.getLogger(__name__)

class VideoRecorder:
    """
    Writes the maze animation to an mp4.

    The renderer feeds it one frame per carved wall, so the video shows the
    carving at a steady pace whatever the window frame rate is. The solved
    maze is held on screen for HOLD_SECONDS at the end.
    """
    HOLD_SECONDS = 2
    OUTPUT_DIR = "recordings"

    def __init__(self, active=False, output_file=None, fps=30, grid_size=None):
        self.active = active
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0
        self.output_file = output_file

        if self.active and not self.output_file:
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            dims = f"{grid_size}x{grid_size}_" if grid_size else ""
            self.output_file = os.path.join(self.OUTPUT_DIR, f"maze_{dims}{ts}.mp4")

    @property
    def hold_frames(self) -> int:
        return self.fps * self.HOLD_SECONDS

    @staticmethod
    def to_bgr(surface: pygame.Surface) -> np.ndarray:
        # surfarray is (width, height, 3) RGB, VideoWriter wants (height, width, 3) BGR
        frame = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
        return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)

    def _open(self, width: int, height: int):
        out_dir = os.path.dirname(self.output_file)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)

        self.frame_size = (width, height)
        fourcc = cv2.VideoWriter_fourcc(*'mp4v')
        self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
        if not self.writer.isOpened():
            self.writer = None
            raise RuntimeError(f"Could not open video writer for {self.output_file}")
        logger.info(f"Recording started: {self.output_file}")

    def capture_frame(self, surface: pygame.Surface, repeat: int = 1):
        if not self.active:
            return

        if self.writer is None:
            self._open(*surface.get_size())

        frame = self.to_bgr(surface)
        for _ in range(repeat):
            self.writer.write(frame)
        self.frame_count += repeat

    def hold(self, surface: pygame.Surface):
        """Repeats the current surface so the final state stays visible."""
        self.capture_frame(surface, repeat=self.hold_frames)

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
