from __future__ import annotations

from typing import Dict, List, Tuple

import pygame

from ...engine import ParticleSprite


# Pre-rendered dot surfaces, keyed by (radius, rgba)
_dot_cache: Dict[Tuple[int, Tuple[int, int, int, int]], pygame.Surface] = {}


def _get_dot_surface(radius: int, color: Tuple[int, int, int, int]) -> pygame.Surface:
    key = (radius, color)
    surf = _dot_cache.get(key)
    if surf is None:
        # Limit cache size; alpha changes every frame so keys churn
        if len(_dot_cache) > 512:
            _dot_cache.clear()
        surf = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(surf, color, (radius, radius), radius)
        _dot_cache[key] = surf
    return surf


def draw_particles(screen: pygame.Surface, sprites: List[ParticleSprite]) -> int:
    """Draw particle sprites as alpha-blended dots. Returns how many were drawn."""
    drawn = 0
    for sp in sprites:
        if sp.color[3] <= 0:
            continue
        radius = max(1, int(round(sp.size)))
        surf = _get_dot_surface(radius, sp.color)
        screen.blit(surf, (int(sp.x) - radius, int(sp.y) - radius))
        drawn += 1
    return drawn
