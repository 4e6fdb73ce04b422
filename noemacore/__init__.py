"""Synthetic-mind core: YAML profiles, stimulus processing and onto16 projections."""

__version__ = "0.1.0"

__all__ = ["api", "demo", "engine", "profile", "projection"]