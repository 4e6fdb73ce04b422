"""Ontological profiles of a synthetic mind, loaded from YAML."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Union

import yaml

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class Temperament(enum.Enum):
    """Temperament of a profile."""

    CHOLERIC = "choleric"
    SANGUINE = "sanguine"
    PHLEGMATIC = "phlegmatic"
    MELANCHOLIC = "melancholic"


class Element(enum.Enum):
    """One of the five elements a profile may carry."""

    WOOD = "wood"
    FIRE = "fire"
    EARTH = "earth"
    METAL = "metal"
    WATER = "water"


class ProfileErrorKind(enum.Enum):
    """Category of a profile loading failure."""

    PARSE = "ParseError"
    VALIDATION = "ValidationError"
    IO = "IoError"

    def __str__(self) -> str:
        return self.value


class ProfileError(Exception):
    """Raised when a profile cannot be loaded."""

    def __init__(self, kind: ProfileErrorKind, message: str) -> None:
        super().__init__(kind, message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"[{self.kind}] {self.message}"


@dataclass(frozen=True)
class Profile:
    """Identity, temperament and ontological parameters of a synthetic mind."""

    id: str
    temperament: Temperament
    birth_year: int | None = None
    elements: tuple[Element, ...] = field(default_factory=tuple)

    @classmethod
    def from_yaml(cls, data: Union[bytes, str]) -> "Profile":
        """Build a profile from YAML text or bytes."""
        return parse_yaml_profile(data)


def _parse_error(message: str) -> ProfileError:
    return ProfileError(ProfileErrorKind.PARSE, message)


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise _parse_error(f"invalid type for field `{name}`: expected a string")
    return value


def _parse_temperament(value: Any) -> Temperament:
    text = _require_str(value, "temperament").lower()
    try:
        return Temperament(text)
    except ValueError:
        raise _parse_error(f"unknown temperament: {text}") from None


def _parse_elements(value: Any) -> tuple[Element, ...]:
    if not isinstance(value, list):
        raise _parse_error("invalid type for field `elements`: expected a sequence")
    elements = []
    for item in value:
        text = _require_str(item, "elements")
        try:
            elements.append(Element(text.lower()))
        except ValueError:
            raise _parse_error(f"unknown element: {text}") from None
    return tuple(elements)


def _parse_birth_year(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise _parse_error("invalid type for field `birth_year`: expected an integer")
    if not _I32_MIN <= value <= _I32_MAX:
        raise _parse_error(f"birth_year out of range: {value}")
    return value


def parse_yaml_profile(data: Union[bytes, str]) -> Profile:
    """Parse and validate a YAML profile document."""
    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise _parse_error(str(exc)) from exc

    if not isinstance(document, dict):
        raise _parse_error("expected a mapping at the top level")

    for required in ("id", "temperament"):
        if required not in document:
            raise _parse_error(f"missing field `{required}`")

    profile_id = _require_str(document["id"], "id")
    temperament = _parse_temperament(document["temperament"])
    birth_year = _parse_birth_year(document.get("birth_year"))
    elements = _parse_elements(document["elements"]) if "elements" in document else ()

    if not profile_id:
        raise ProfileError(ProfileErrorKind.VALIDATION, "profile id must not be empty")

    return Profile(
        id=profile_id,
        temperament=temperament,
        birth_year=birth_year,
        elements=elements,
    )