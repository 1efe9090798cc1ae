"""
core/music_theory/ — Pure scale and chord analysis engine.

Exports:
    Types:   ScaleData, ScaleDegree, ChordQualities
    Pitch:   note_at_interval, enharmonic
    Scales:  build_scale, get_available_scales, get_available_notes
    Chords:  get_chord
    Keys:    get_key_signature
    Engine:  get_scale_data, transpose_scale, degree_chords
"""

from core.music_theory.chords import get_chord
from core.music_theory.engine import degree_chords, get_scale_data, transpose_scale
from core.music_theory.keys import get_key_signature
from core.music_theory.pitch import enharmonic, note_at_interval
from core.music_theory.scales import build_scale, get_available_notes, get_available_scales
from core.music_theory.types import ChordQualities, ScaleData, ScaleDegree

__all__ = [
    # Types
    "ScaleData",
    "ScaleDegree",
    "ChordQualities",
    # Pitch
    "note_at_interval",
    "enharmonic",
    # Scales
    "build_scale",
    "get_available_scales",
    "get_available_notes",
    # Chords
    "get_chord",
    # Keys
    "get_key_signature",
    # Engine
    "get_scale_data",
    "transpose_scale",
    "degree_chords",
]
