"""The stimulus-processing engine that owns an onto16 projection."""

from __future__ import annotations

from dataclasses import replace
from typing import Union

from .projection import NoemaMode, Projection


class Engine:
    """Holds the projection state and drives stimulus processing."""

    def __init__(self) -> None:
        self._projection = Projection()

    @property
    def projection(self) -> Projection:
        """A snapshot of the current projection."""
        return replace(self._projection)

    def process(self, stimulus: Union[bytes, bytearray, memoryview, str]) -> bool:
        """Absorb a stimulus; return whether it activated the projection."""
        changed = self._projection.absorb(stimulus)
        if changed:
            self._projection.stabilize(NoemaMode.NOEMA_FAST)
        return changed

    def generate_projection(self) -> bytes:
        """Serialise the current projection as text bytes."""
        return str(self._projection).encode("utf-8")