"""
core/music_theory/types.py — Frozen value objects for the scale engine.

All types are immutable frozen dataclasses — safe to hash, cache, and compare
by value. No I/O, no side effects, no external dependencies beyond stdlib.

Types:
    ScaleDegree     — one note of a built scale with its chord and analysis
    ChordQualities  — the dual (seventh / extended) chord-quality table
    ScaleData       — the fully elaborated description of root + scale name
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

# ---------------------------------------------------------------------------
# ScaleDegree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScaleDegree:
    """A single degree of a built scale.

    Attributes:
        label:      1-based position, e.g. "1", "5"
        chord:      Chord label built on the degree, e.g. "Dm7"
        notes:      Base seventh-chord tones, e.g. ("D", "F", "A", "C")
        interval:   Interval name from the scale root, e.g. "Major 2nd"
        quality:    Seventh-chord quality, e.g. "m7"
        roman:      Roman numeral label, e.g. "ii", "vii°"
        note:       The scale note this degree sits on
        extensions: Extension tones (9ths, 11ths, 13ths), kept apart from notes
    """

    label: str
    chord: str
    notes: tuple[str, ...]
    interval: str
    quality: str
    roman: str
    note: str
    extensions: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# ChordQualities
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordQualities:
    """Chord qualities per scale degree at two levels of detail.

    Attributes:
        seventh:    Basic seventh-chord qualities, e.g. ("maj7", "m7", ...)
        augmented:  Extended qualities, e.g. ("maj9", "m9", ...)
        extensions: Extension names per degree, e.g. (("9", "13"), ...)
    """

    seventh: tuple[str, ...]
    augmented: tuple[str, ...]
    extensions: tuple[tuple[str, ...], ...] = ()

    def level(self, name: str) -> tuple[str, ...]:
        """Return the quality tuple for a detail level ("seventh" or "augmented")."""
        if name == "seventh":
            return self.seventh
        if name == "augmented":
            return self.augmented
        raise ValueError(f"Unknown quality level {name!r}. Valid: ['augmented', 'seventh']")


# ---------------------------------------------------------------------------
# ScaleData
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScaleData:
    """The full analysis of a scale built on a root note.

    Attributes:
        name:               "<root> <scale name>", e.g. "C dorian"
        notes:              Ordered scale notes
        key_signature:      Notation key signature, e.g. "C", "Am", "F#"
        degrees:            One ScaleDegree per note
        intervals:          Interval names over the whole pattern (len(pattern) + 1)
        blue_notes:         Blue-note accents for blues-flavoured scales
        chord_progressions: Common progressions as roman-numeral sequences
        characteristics:    Descriptive tags, e.g. ("Mysterious", "Jazz")
        related_scales:     Harmonically adjacent scale names
        qualities:          Seventh / extended chord-quality table
    """

    name: str
    notes: tuple[str, ...]
    key_signature: str
    degrees: tuple[ScaleDegree, ...]
    intervals: tuple[str, ...]
    blue_notes: tuple[str, ...]
    chord_progressions: tuple[tuple[str, ...], ...]
    characteristics: tuple[str, ...]
    related_scales: tuple[str, ...]
    qualities: ChordQualities

    @property
    def root(self) -> str:
        """Root note as given to the engine (first word of ``name``)."""
        return self.name.split(" ", 1)[0]

    @property
    def scale_name(self) -> str:
        """Scale name as given to the engine (everything after the root)."""
        parts = self.name.split(" ", 1)
        return parts[1] if len(parts) > 1 else ""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict (tuples become lists)."""
        return asdict(self, dict_factory=_listify_dict)


def _listify(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_listify(v) for v in value]
    return value


def _listify_dict(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {key: _listify(value) for key, value in items}
