"""Command that loads a profile, processes a stimulus and prints the projection."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

from .api import Core144, CoreError, load_profile
from .profile import ProfileError, ProfileErrorKind

DEFAULT_PROFILE_YAML = b"""
id: "TestMind"
temperament: "choleric"
birth_year: 1985
elements:
  - fire
  - metal
traits:
  proactive: true
  reflective: false
"""

DEFAULT_STIMULUS = "How should I respond to novelty without prior ontological grounding?"


def _read_profile(path: str | None) -> bytes:
    if path is None:
        return DEFAULT_PROFILE_YAML
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise ProfileError(ProfileErrorKind.IO, str(exc)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo; return a process exit status."""
    parser = argparse.ArgumentParser(description="Generate an onto16 projection.")
    parser.add_argument("stimulus", nargs="?", default=DEFAULT_STIMULUS)
    parser.add_argument("--profile", help="path to a YAML profile")
    args = parser.parse_args(argv)

    try:
        profile = load_profile(_read_profile(args.profile))
        print(f"Profile loaded: {profile.id}")
        core = Core144(profile)
        projection = core.process(args.stimulus)
    except (ProfileError, CoreError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print("\nOnto16 Projection:")
    print(json.dumps(asdict(projection), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())