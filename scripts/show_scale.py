"""
Print the full analysis of a scale as JSON.

Usage:
    python -m scripts.show_scale C dorian
    python -m scripts.show_scale A "aeolian (natural minor)" --transpose 3
    python -m scripts.show_scale F# blues --level augmented
    python -m scripts.show_scale --list
"""

import argparse
import json
import logging
import sys

from core.config import ServiceConfig
from core.music_theory import (
    degree_chords,
    get_available_notes,
    get_available_scales,
    get_scale_data,
    transpose_scale,
)

logger = logging.getLogger(__name__)


def build_parser(config: ServiceConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show notes, chords and key of a scale.")
    parser.add_argument("root", nargs="?", default=config.default_root, help="Root note, e.g. C#")
    parser.add_argument(
        "scale",
        nargs="?",
        default=config.default_scale,
        help="Scale name, e.g. 'dorian' or 'aeolian (natural minor)'",
    )
    parser.add_argument("--transpose", type=int, default=0, help="Semitones to transpose by")
    parser.add_argument(
        "--level",
        choices=("seventh", "augmented"),
        default="seventh",
        help="Chord detail level for the chord table",
    )
    parser.add_argument("--list", action="store_true", help="List notes and scales, then exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    config = ServiceConfig.from_env()
    logging.basicConfig(level=config.log_level_value, format="%(levelname)s: %(message)s")
    args = build_parser(config).parse_args(argv)

    if args.list:
        print(json.dumps({"notes": get_available_notes(), "scales": get_available_scales()}, indent=2))
        return 0

    if args.scale not in get_available_scales():
        logger.warning("Unknown scale %r, showing the ionian (major) analysis", args.scale)

    data = get_scale_data(args.root, args.scale)
    if args.transpose:
        data = transpose_scale(data, args.transpose)

    output = data.to_dict()
    output["level_chords"] = [
        {"label": label, "notes": list(tones)} for label, tones in degree_chords(data, args.level)
    ]
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
