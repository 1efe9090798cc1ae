"""
core/music_theory/keys.py — Key signatures the notation front end can draw.

A scale whose name contains "minor" is treated as a minor key and gets an
"m" suffix. The resulting symbol must be in SUPPORTED_KEY_SIGNATURES; any
other symbol falls back to "C" (major family) or "Am" (minor family).

C minor is not drawn; C-rooted minor scales use the "Am" signature.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

MAJOR_FALLBACK: str = "C"
MINOR_FALLBACK: str = "Am"

SUPPORTED_KEY_SIGNATURES: frozenset[str] = frozenset(
    {
        # Major
        "C",
        "G",
        "D",
        "A",
        "E",
        "B",
        "F#",
        "C#",
        "F",
        "Bb",
        "Eb",
        "Ab",
        "Db",
        "Gb",
        "Cb",
        # Minor
        "Am",
        "Em",
        "Bm",
        "F#m",
        "C#m",
        "G#m",
        "D#m",
        "A#m",
        "Dm",
        "Gm",
        "Fm",
        "Bbm",
        "Ebm",
        "Abm",
    }
)


def is_minor_scale(scale_name: str) -> bool:
    """Return True for scale names in the minor family (case-insensitive)."""
    return "minor" in scale_name.lower()


def get_key_signature(root: str, scale_name: str) -> str:
    """Return the notation key signature for a root + scale name.

    Examples:
        >>> get_key_signature("D", "ionian (major)")
        'D'
        >>> get_key_signature("E", "aeolian (natural minor)")
        'Em'
        >>> get_key_signature("G#", "lydian")
        'C'
    """
    minor = is_minor_scale(scale_name)
    key_name = f"{root}m" if minor else root

    if key_name in SUPPORTED_KEY_SIGNATURES:
        return key_name

    fallback = MINOR_FALLBACK if minor else MAJOR_FALLBACK
    logger.debug("Key signature %r not supported, using %r", key_name, fallback)
    return fallback
