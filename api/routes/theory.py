"""
api/routes/theory.py — Scale and chord analysis endpoints.

Endpoints:
    GET  /theory/notes      — Supported root notes
    GET  /theory/scales     — Supported scale names
    GET  /theory/scale      — Full analysis of a root + scale name
    POST /theory/chord      — Chord tones on one scale degree
    POST /theory/transpose  — Analysis of a scale moved by N semitones
    GET  /theory/interval   — Note N semitones above a root

All endpoints delegate to core/music_theory. No database, no LLM — pure
computation. Unknown roots and scale names are passed through so the
engine's fallbacks apply exactly as they do for in-process callers.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import get_config
from api.schemas.theory import (
    ChordRequest,
    ChordResponse,
    IntervalResponse,
    NotesResponse,
    ScaleDataOut,
    ScalesResponse,
    TransposeRequest,
)
from core.config import ServiceConfig
from core.music_theory import (
    degree_chords,
    get_available_notes,
    get_available_scales,
    get_chord,
    get_scale_data,
    note_at_interval,
    transpose_scale,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/theory", tags=["theory"])


def _log_if_unknown(root: str, scale: str) -> None:
    if root not in get_available_notes() or scale not in get_available_scales():
        logger.info("Unsupported selection %r / %r, engine fallback applies", root, scale)


# ---------------------------------------------------------------------------
# GET /theory/notes, /theory/scales
# ---------------------------------------------------------------------------


@router.get("/notes", response_model=NotesResponse)
def list_notes() -> NotesResponse:
    """Return the 12 sharp-spelled root notes for a key selector."""
    return NotesResponse(notes=get_available_notes())


@router.get("/scales", response_model=ScalesResponse)
def list_scales() -> ScalesResponse:
    """Return every supported scale name for a scale selector."""
    return ScalesResponse(scales=get_available_scales())


# ---------------------------------------------------------------------------
# GET /theory/scale
# ---------------------------------------------------------------------------


@router.get("/scale", response_model=ScaleDataOut)
def scale_analysis(
    root: str | None = Query(None, max_length=8),
    scale: str | None = Query(None, max_length=64),
    level: str = Query("seventh", description="'seventh' or 'augmented'"),
    config: ServiceConfig = Depends(get_config),
) -> ScaleDataOut:
    """Analyse a scale: notes, degrees, chords, progressions, key signature.

    Args:
        root:  Root note; defaults to the configured default root.
        scale: Scale name; defaults to the configured default scale.
        level: Chord detail level for ``level_chords``.

    Raises:
        422: Unknown level.
    """
    root = root if root is not None else config.default_root
    scale = scale if scale is not None else config.default_scale
    _log_if_unknown(root, scale)

    data = get_scale_data(root, scale)
    try:
        chords = degree_chords(data, level)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return ScaleDataOut.from_scale_data(data, level=level, level_chords=chords)


# ---------------------------------------------------------------------------
# POST /theory/chord
# ---------------------------------------------------------------------------


@router.post("/chord", response_model=ChordResponse)
def chord_on_degree(request: ChordRequest) -> ChordResponse:
    """Spell the chord of ``quality`` on a degree of a scale.

    Unknown qualities are spelled as a dominant seventh.

    Raises:
        422: Degree outside the scale (e.g. degree 6 of a pentatonic scale).
    """
    data = get_scale_data(request.root, request.scale)
    try:
        notes = get_chord(request.root, data.notes, request.degree, request.quality)
    except IndexError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return ChordResponse(
        root=request.root,
        scale=request.scale,
        degree=request.degree,
        quality=request.quality,
        chord=f"{data.notes[request.degree]}{request.quality}",
        notes=list(notes),
    )


# ---------------------------------------------------------------------------
# POST /theory/transpose
# ---------------------------------------------------------------------------


@router.post("/transpose", response_model=ScaleDataOut)
def transpose(request: TransposeRequest) -> ScaleDataOut:
    """Return the analysis of a scale moved by ``semitones``."""
    _log_if_unknown(request.root, request.scale)
    data = transpose_scale(get_scale_data(request.root, request.scale), request.semitones)
    return ScaleDataOut.from_scale_data(data, level_chords=degree_chords(data))


# ---------------------------------------------------------------------------
# GET /theory/interval
# ---------------------------------------------------------------------------


@router.get("/interval", response_model=IntervalResponse)
def interval(
    root: str = Query(..., min_length=1, max_length=8),
    semitones: int = Query(..., ge=-48, le=48),
    prefer_flats: bool = Query(False),
) -> IntervalResponse:
    """Return the note ``semitones`` above ``root``, optionally flat-spelled."""
    return IntervalResponse(
        root=root,
        semitones=semitones,
        prefer_flats=prefer_flats,
        note=note_at_interval(root, semitones, prefer_flats=prefer_flats),
    )
