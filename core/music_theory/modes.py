"""
core/music_theory/modes.py — Descriptive per-scale tables.

Characteristics, common progressions, related scales and blue-note offsets
live in core/music_theory/data/modes.yaml. The file is parsed once on first
use and cached; afterwards every lookup reads frozen ModeProfile objects.

Unlike the harmonic tables, these do not fall back to Ionian: a scale name
with no entry simply has no characteristics, progressions or blue notes.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

_MODES_PATH: Path = Path(__file__).parent / "data" / "modes.yaml"


@dataclass(frozen=True)
class ModeProfile:
    """Descriptive data for one scale name.

    Attributes:
        characteristics:     Descriptive tags, e.g. ("Dreamy", "Floating")
        progressions:        Roman-numeral progressions, e.g. (("ii", "V", "I"),)
        related_scales:      Adjacent scale names
        blue_note_intervals: Semitones above the root, e.g. (3, 6, 10)
    """

    characteristics: tuple[str, ...] = ()
    progressions: tuple[tuple[str, ...], ...] = ()
    related_scales: tuple[str, ...] = ()
    blue_note_intervals: tuple[int, ...] = ()


EMPTY_PROFILE = ModeProfile()


def _profile_from_dict(data: dict[str, Any]) -> ModeProfile:
    return ModeProfile(
        characteristics=tuple(str(c) for c in data.get("characteristics") or ()),
        progressions=tuple(
            tuple(str(chord) for chord in prog) for prog in data.get("progressions") or ()
        ),
        related_scales=tuple(str(s) for s in data.get("related_scales") or ()),
        blue_note_intervals=tuple(int(i) for i in data.get("blue_note_intervals") or ()),
    )


@functools.cache
def load_mode_profiles(path: Path = _MODES_PATH) -> Mapping[str, ModeProfile]:
    """Parse and cache the mode profile file.

    Args:
        path: YAML file mapping scale name → profile fields

    Returns:
        Read-only mapping of scale name → ModeProfile, shared by every caller

    Raises:
        ValueError: If the file does not contain a mapping at top level
    """
    with path.open(encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)

    if not isinstance(raw, dict):
        raise ValueError(f"Mode profile file {path} must contain a mapping")

    return MappingProxyType(
        {str(name): _profile_from_dict(fields or {}) for name, fields in raw.items()}
    )


def get_mode_profile(scale_name: str) -> ModeProfile:
    """Return the profile for an exact scale name, or an empty profile."""
    return load_mode_profiles().get(scale_name, EMPTY_PROFILE)
