"""
Frame recorder for PNG sequence output.

Lets a headless session dump every rendered frame of a burst for inspection.
"""

import logging
import os

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


class FrameRecorder:
    """
    Records frames as a numbered PNG image sequence.
    """

    def __init__(self, output_dir: str):
        """
        Initialize frame recorder.

        Args:
            output_dir: Directory to save PNG frames
        """
        self.output_dir = output_dir
        self.frame_count = 0
        self.is_open = False

    def open(self) -> None:
        """Create output directory if it doesn't exist."""
        os.makedirs(self.output_dir, exist_ok=True)
        self.is_open = True
        self.frame_count = 0
        logger.info("recording frames to %s", self.output_dir)

    def write_frame(self, frame: np.ndarray) -> str:
        """
        Write a frame as PNG.

        Args:
            frame: RGB frame data (H, W, 3), uint8 or float in 0..1

        Returns:
            Path of the written file

        Raises:
            ValueError: If recorder is not open
        """
        if not self.is_open:
            raise ValueError("Recorder not open. Call open() first.")

        filepath = os.path.join(self.output_dir, f"frame_{self.frame_count:06d}.png")

        if frame.dtype != np.uint8:
            frame = (np.clip(frame, 0.0, 1.0) * 255).astype(np.uint8)

        Image.fromarray(frame).save(filepath, "PNG")
        self.frame_count += 1
        return filepath

    def write_surface(self, surface) -> str:
        """Write a pygame surface; surfarray is (W, H, 3) so it is transposed first."""
        import pygame

        pixels = pygame.surfarray.array3d(surface)
        return self.write_frame(np.ascontiguousarray(np.transpose(pixels, (1, 0, 2))))

    def close(self) -> None:
        """Finalize recording."""
        if self.is_open:
            logger.info("recorded %d frames", self.frame_count)
        self.is_open = False
