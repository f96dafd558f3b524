from __future__ import annotations

from typing import Callable, Iterable, Iterator, List

from .particle import Particle


class ParticleStore:
    """Live particles of the current burst, in insertion order."""

    def __init__(self):
        self._particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    def __bool__(self) -> bool:
        return bool(self._particles)

    def snapshot(self) -> List[Particle]:
        return list(self._particles)

    def replace(self, particles: Iterable[Particle]) -> None:
        self._particles = list(particles)

    def clear(self) -> None:
        self._particles = []

    def retain(self, keep: Callable[[Particle], bool]) -> int:
        """Rebuild the store from the particles ``keep`` accepts.

        ``keep`` runs over a snapshot, so it may update the particle it is
        given. Returns the number of particles removed.
        """
        before = self._particles
        self._particles = [p for p in list(before) if keep(p)]
        return len(before) - len(self._particles)
