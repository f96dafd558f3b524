"""Icon resources of a like view.

The liked/unliked icon handles are opaque to the view: they are only handed
to the backend loader, and the loaded images are cached per handle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Optional


@dataclass
class IconResources:
    liked: Hashable = None
    unliked: Hashable = None
    loader: Optional[Callable[[Any], Any]] = None

    _cache: Dict[Any, Any] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__), repr=False)

    def set_handles(self, liked: Hashable, unliked: Hashable) -> None:
        self.liked = liked
        self.unliked = unliked

    def handle(self, liked: bool) -> Hashable:
        return self.liked if liked else self.unliked

    def image(self, liked: bool) -> Any:
        """Loaded image for the liked or unliked icon (cached per handle)."""
        h = self.handle(liked)
        if self.loader is None:
            return h
        if h not in self._cache:
            self._logger.debug("loading %s icon %r", "liked" if liked else "unliked", h)
            self._cache[h] = self.loader(h)
        return self._cache[h]

    def cleanup(self) -> None:
        if self._cache:
            self._logger.debug("releasing %d cached icons", len(self._cache))
        self._cache.clear()
