"""The onto16 projection state and its stabilisation rules."""

from __future__ import annotations

import enum
import hashlib
from dataclasses import dataclass
from typing import Union

_MASK64 = 2**64 - 1
_MASK32 = 2**32 - 1
_MASK16 = 2**16 - 1
_U8_MAX = 255
_FAST_STEP = 10


class NoemaMode(enum.Enum):
    """Mode of ontological processing."""

    NOEMA_FAST = "noema_fast"  # reactive: outer structure
    NOEMA_SLOW = "noema_slow"  # reflective: inner structure


def stimulus_hash(stimulus: Union[bytes, bytearray, memoryview, str]) -> int:
    """Return a stable unsigned 64-bit hash of a stimulus."""
    if isinstance(stimulus, str):
        stimulus = stimulus.encode("utf-8")
    digest = hashlib.blake2b(bytes(stimulus), digest_size=8).digest()
    return int.from_bytes(digest, "little")


@dataclass
class Projection:
    """Dynamic state of a synthetic mind in onto16 form."""

    hash_state: int = 0
    energy_level: int = 0
    stability: int = 0

    def absorb(self, stimulus: Union[bytes, bytearray, memoryview, str]) -> bool:
        """Fold a stimulus into the state; return whether the state changed."""
        stim_hash = stimulus_hash(stimulus)
        if stim_hash == 0:
            return False
        old_hash = self.hash_state
        self.hash_state = (self.hash_state + stim_hash) & _MASK64
        self.energy_level = (self.energy_level + 1) & _MASK32
        return self.hash_state != old_hash

    def stabilize(self, mode: NoemaMode) -> None:
        """Raise stability according to the given processing mode."""
        if mode is NoemaMode.NOEMA_FAST:
            self.stability = min(self.stability + _FAST_STEP, _U8_MAX)
        else:
            gain = (self.energy_level & _MASK16) // 100
            self.stability = min(self.stability + gain, _U8_MAX)

    def __str__(self) -> str:
        return (
            f"Projection {{ hash_state: {self.hash_state}, "
            f"energy_level: {self.energy_level}, stability: {self.stability} }}"
        )