"""Public interface: load a profile, feed stimuli, read onto16 projections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .engine import Engine
from .profile import Profile
from .projection import NoemaMode


class CoreError(Exception):
    """Raised when the core fails to process a stimulus."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Core error: {self.message}"


@dataclass(frozen=True)
class OntoProjection:
    """An onto16 projection with its outer and inner components."""

    noema_fast: str
    noema_slow: str


def load_profile(data: Union[bytes, str]) -> Profile:
    """Load a profile from YAML; raises ProfileError on failure."""
    return Profile.from_yaml(data)


class Core144:
    """Synthetic mind core whose identity is given by a profile."""

    def __init__(self, profile: Profile) -> None:
        self._profile = profile
        self._engine = Engine()

    @property
    def profile(self) -> Profile:
        """The profile this core was created with."""
        return self._profile

    def process(self, stimulus: str) -> OntoProjection:
        """Process a text stimulus and return the resulting projection."""
        if not isinstance(stimulus, str):
            raise TypeError("stimulus must be a string")
        if not self._engine.process(stimulus):
            raise CoreError("stimulus produced no activation")
        return self.generate_projection()

    def generate_projection(self) -> OntoProjection:
        """Return the current projection without processing anything."""
        state = self._engine.projection
        fast = str(state)
        state.stabilize(NoemaMode.NOEMA_SLOW)
        return OntoProjection(noema_fast=fast, noema_slow=str(state))