"""
Recording module for saving rendered frames.
"""

from .frame_recorder import FrameRecorder

__all__ = ["FrameRecorder"]
