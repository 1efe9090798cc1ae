"""
core/music_theory/pitch.py — Chromatic pitch classes and interval arithmetic.

A pitch class is a plain note-name string. The same 12 classes can be
spelled with sharps (canonical) or flats; the spelling is a rendering
choice passed as ``prefer_flats``, never a separate type.

Unrecognized note names are never an error: every helper hands them back
unchanged so that callers building UI state cannot crash on bad input.

Exports:
    NOTE_NAMES          12 sharp-spelled names, index = pitch class
    FLAT_NOTE_NAMES     12 flat-spelled names, index = pitch class
    ENHARMONIC          sharp ↔ flat spellings of the five black keys

    note_index(note) → int
    note_at_interval(root, semitones, prefer_flats) → str
    enharmonic(note) → str
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Chromatic tables
# ---------------------------------------------------------------------------

NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

FLAT_NOTE_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Both directions in one table: "C#" → "Db" and "Db" → "C#"
ENHARMONIC: dict[str, str] = {
    **{s: f for s, f in zip(NOTE_NAMES, FLAT_NOTE_NAMES, strict=True) if s != f},
    **{f: s for s, f in zip(NOTE_NAMES, FLAT_NOTE_NAMES, strict=True) if s != f},
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def note_index(note: str) -> int:
    """Return the pitch class (0–11) of a sharp-spelled note, or -1 if unknown.

    Only the canonical sharp spelling is recognized — "Db" returns -1.
    """
    try:
        return NOTE_NAMES.index(note)
    except ValueError:
        return -1


def note_at_interval(root: str, semitones: int, prefer_flats: bool = False) -> str:
    """Return the note ``semitones`` above ``root``.

    Args:
        root:         Sharp-spelled note name, e.g. "C", "F#"
        semitones:    Offset in semitones; any integer (13ths are +21)
        prefer_flats: Spell the result from the flat table

    Returns:
        The resulting note name, or ``root`` unchanged if it is unrecognized

    Examples:
        >>> note_at_interval("C", 3)
        'D#'
        >>> note_at_interval("C", 3, prefer_flats=True)
        'Eb'
        >>> note_at_interval("A", 21)
        'F#'
    """
    root_idx = note_index(root)
    if root_idx == -1:
        logger.debug("Unrecognized note %r passed through unchanged", root)
        return root

    chromatic = FLAT_NOTE_NAMES if prefer_flats else NOTE_NAMES
    return chromatic[(root_idx + semitones) % 12]


def enharmonic(note: str) -> str:
    """Swap a black-key note between its sharp and flat spelling.

    Natural notes and unrecognized strings are returned unchanged.

    Examples:
        >>> enharmonic("C#")
        'Db'
        >>> enharmonic("Bb")
        'A#'
        >>> enharmonic("E")
        'E'
    """
    return ENHARMONIC.get(note, note)
