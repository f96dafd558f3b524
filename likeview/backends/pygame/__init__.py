"""Pygame rendering backend.

- icons: icon image loading and the builtin heart icons
- particles: particle sprite drawing
- session: window, event loop and frame clock (``PygameSession``)
"""

from __future__ import annotations

__all__ = []
