"""
api/schemas/theory.py — Pydantic request/response schemas for /theory endpoints.

Covers:
    /theory/notes      — NotesResponse
    /theory/scales     — ScalesResponse
    /theory/scale      — ScaleDataOut
    /theory/chord      — ChordRequest / ChordResponse
    /theory/transpose  — TransposeRequest / ScaleDataOut
    /theory/interval   — IntervalResponse

Root and scale fields are plain strings on purpose: unknown values are
handed to the engine, which falls back instead of failing.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.music_theory.types import ScaleData

# ---------------------------------------------------------------------------
# Shared sub-schemas
# ---------------------------------------------------------------------------


class ScaleDegreeOut(BaseModel):
    """One degree of a scale with its seventh chord."""

    label: str
    chord: str
    notes: list[str]
    interval: str
    quality: str
    roman: str
    note: str
    extensions: list[str]


class ChordQualitiesOut(BaseModel):
    """Seventh and extended chord qualities per degree."""

    seventh: list[str]
    augmented: list[str]
    extensions: list[list[str]]


class LevelChordOut(BaseModel):
    """A chord spelled at the requested detail level."""

    label: str
    notes: list[str]


# ---------------------------------------------------------------------------
# /theory/scale and /theory/transpose
# ---------------------------------------------------------------------------


class ScaleDataOut(BaseModel):
    """Full scale analysis."""

    name: str
    root: str
    scale_name: str
    notes: list[str]
    key_signature: str
    degrees: list[ScaleDegreeOut]
    intervals: list[str]
    blue_notes: list[str]
    chord_progressions: list[list[str]]
    characteristics: list[str]
    related_scales: list[str]
    qualities: ChordQualitiesOut
    level: str = "seventh"
    level_chords: list[LevelChordOut] = Field(default_factory=list)

    @classmethod
    def from_scale_data(
        cls,
        data: ScaleData,
        level: str = "seventh",
        level_chords: tuple[tuple[str, tuple[str, ...]], ...] = (),
    ) -> ScaleDataOut:
        """Build the response model from an engine ScaleData."""
        return cls(
            **data.to_dict(),
            root=data.root,
            scale_name=data.scale_name,
            level=level,
            level_chords=[
                LevelChordOut(label=label, notes=list(tones)) for label, tones in level_chords
            ],
        )


class TransposeRequest(BaseModel):
    """Transpose a scale by a number of semitones."""

    root: str = Field(..., min_length=1, max_length=8)
    scale: str = Field(..., min_length=1, max_length=64)
    semitones: int = Field(..., ge=-24, le=24)


# ---------------------------------------------------------------------------
# /theory/chord
# ---------------------------------------------------------------------------


class ChordRequest(BaseModel):
    """Spell a chord on a degree of a scale."""

    root: str = Field(..., min_length=1, max_length=8)
    scale: str = Field(..., min_length=1, max_length=64)
    degree: int = Field(..., ge=0, le=11, description="0-based scale degree")
    quality: str = Field("7", min_length=1, max_length=16)


class ChordResponse(BaseModel):
    """Chord tones for a scale degree."""

    root: str
    scale: str
    degree: int
    quality: str
    chord: str
    notes: list[str]


# ---------------------------------------------------------------------------
# /theory/notes, /theory/scales, /theory/interval
# ---------------------------------------------------------------------------


class NotesResponse(BaseModel):
    notes: list[str]


class ScalesResponse(BaseModel):
    scales: list[str]


class IntervalResponse(BaseModel):
    """Result of moving a note by a number of semitones."""

    root: str
    semitones: int
    prefer_flats: bool
    note: str
