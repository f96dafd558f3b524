"""Pygame session hosting a single like view.

The session owns the window, the event loop and the frame clock. It forwards
left clicks to the view as touches and calls ``LikeView.frame`` once per
display refresh while the burst is animating.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import pygame

from ...config.schema import ViewConfig
from ...core import IconResources, LikeView
from ...recording.frame_recorder import FrameRecorder
from .icons import BUILTIN_LIKED, BUILTIN_UNLIKED, load_icon
from .particles import draw_particles

BACKGROUND_RGB = (250, 250, 250)


class PygameSession:
    def __init__(
        self,
        config: ViewConfig,
        *,
        max_frames: Optional[int] = None,
        auto_trigger: bool = False,
        record_dir: Optional[str] = None,
    ):
        """Initialize the session.

        Args:
            config: View configuration
            max_frames: Stop after this many frames (None runs until closed)
            auto_trigger: Fire one touch as soon as the window is up
            record_dir: Write every frame as PNG here; frame time becomes
                deterministic (frame index / fps)
        """
        self.config = config
        self.max_frames = max_frames
        self.auto_trigger = auto_trigger
        self.recorder = FrameRecorder(record_dir) if record_dir else None

        self.screen: Optional[pygame.Surface] = None
        self.view: Optional[LikeView] = None
        self.icons: Optional[IconResources] = None
        self.bursts = 0
        self._logger = logging.getLogger(self.__class__.__name__)

    def initialize(self) -> None:
        if not pygame.get_init():
            pygame.init()

        W, H = self.config.w, self.config.h
        self.screen = pygame.display.set_mode((W, H))
        pygame.display.set_caption("likeview")

        self.icons = IconResources(
            liked=self.config.liked_icon or BUILTIN_LIKED,
            unliked=self.config.unliked_icon or BUILTIN_UNLIKED,
            loader=load_icon,
        )
        self.view = LikeView(self.icons, self.config)
        if self.recorder is not None:
            self.recorder.open()
        self._logger.info("Pygame session initialized: %dx%d @ %d fps", W, H, self.config.fps)

    def draw(self) -> None:
        view = self.view
        screen = self.screen
        screen.fill(BACKGROUND_RGB)

        rect = view.icon_rect
        if view.image is not None and rect.width > 0 and rect.height > 0:
            icon = pygame.transform.smoothscale(view.image, (rect.width, rect.height))
            screen.blit(icon, (rect.left, rect.top))

        draw_particles(screen, view.sprites())
        view.mark_drawn()

    def handle_event(self, ev: pygame.event.Event) -> bool:
        """Returns False when the session should stop."""
        if ev.type == pygame.QUIT:
            return False
        if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
            return False
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            self.view.on_touch_down()
            self.bursts += 1
        return True

    def run(self) -> Dict[str, Any]:
        if self.view is None:
            self.initialize()

        clock = pygame.time.Clock()
        fps = self.config.fps
        frames = 0

        if self.auto_trigger:
            self.view.on_touch_down()
            self.bursts += 1

        running = True
        try:
            while running:
                for ev in pygame.event.get():
                    if not self.handle_event(ev):
                        running = False

                if self.recorder is not None:
                    now = frames * 1000.0 / fps
                else:
                    now = pygame.time.get_ticks()

                if self.view.animating:
                    self.view.frame(now)

                if self.view.needs_redraw or self.recorder is not None:
                    self.draw()
                    pygame.display.flip()
                    if self.recorder is not None:
                        self.recorder.write_surface(self.screen)

                frames += 1
                if self.max_frames is not None and frames >= self.max_frames:
                    break
                clock.tick(fps)
        finally:
            self.shutdown()

        self._logger.info("session ended after %d frames, %d bursts", frames, self.bursts)
        return {"frames": frames, "bursts": self.bursts, "liked": self.view.is_liked}

    def shutdown(self) -> None:
        if self.recorder is not None:
            self.recorder.close()
        if self.icons is not None:
            self.icons.cleanup()
        pygame.quit()
