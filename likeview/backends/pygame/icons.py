from __future__ import annotations

import logging
from typing import Any, Tuple

import pygame

logger = logging.getLogger(__name__)

BUILTIN_LIKED = "builtin:liked"
BUILTIN_UNLIKED = "builtin:unliked"

HEART_SIZE = 150
LIKED_RGB = (228, 13, 86)
UNLIKED_RGB = (140, 140, 140)


def _maybe_convert_alpha(surf: pygame.Surface) -> pygame.Surface:
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return surf.convert_alpha()
    return surf


def draw_heart(size: int, rgb: Tuple[int, int, int], filled: bool = True) -> pygame.Surface:
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    r = size // 4
    lobes = ((size // 2 - r + 2, size // 3), (size // 2 + r - 2, size // 3))
    tip = (size // 2, size - size // 8)
    poly = [(lobes[0][0] - r, lobes[0][1] + r // 4), tip, (lobes[1][0] + r, lobes[1][1] + r // 4), (size // 2, size // 3)]
    color = (*rgb, 255)
    width = 0 if filled else max(2, size // 25)
    for c in lobes:
        pygame.draw.circle(surf, color, c, r, width)
    pygame.draw.polygon(surf, color, poly, width)
    return surf


def load_icon(handle: Any) -> pygame.Surface:
    """Load an icon surface from a file path or a builtin handle."""
    if handle == BUILTIN_LIKED:
        return draw_heart(HEART_SIZE, LIKED_RGB, filled=True)
    if handle == BUILTIN_UNLIKED:
        return draw_heart(HEART_SIZE, UNLIKED_RGB, filled=False)
    logger.debug("loading icon image %s", handle)
    return _maybe_convert_alpha(pygame.image.load(str(handle)))
