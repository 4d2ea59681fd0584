#!/usr/bin/env python3
"""
scripts/identify_chord.py: name a chord from the command line.

Usage (from project root):
    python scripts/identify_chord.py C E G                 # C Major
    python scripts/identify_chord.py "E, G, C"             # C Major/E
    python scripts/identify_chord.py E G C --detailed      # First inversion (bass: 3rd) - C Major/E
    python scripts/identify_chord.py 1 3 5 --numeric --key G
    python scripts/identify_chord.py C D F# --suggest      # nearest catalog chord as well
    python scripts/identify_chord.py --spell G "Dominant 7th"
    python scripts/identify_chord.py --list-keys
    python scripts/identify_chord.py --list-types

The first note given is treated as the bass. Exit status is 0 when a chord
(or a single note) was named, 1 otherwise.
"""
import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from chordid import constants as C
from chordid.matcher import (
    classify_chord,
    classify_chord_with_inversion,
    classify_chord_from_numeric,
    chord_notes,
    suggest_chord,
)
from chordid.notes import get_all_keys
from chordid.parser import parse_notes, parse_numeric_notes
from chordid.templates import template_names

# ── ANSI colours ──────────────────────────────────────────────────────────────
BOLD  = "\033[1m"
GREEN = "\033[92m"
YELL  = "\033[93m"
RED   = "\033[91m"
DIM   = "\033[2m"
RESET = "\033[0m"

_OK_KINDS = {C.KIND_CHORD, C.KIND_SINGLE_NOTE}


def build_parser():
    parser = argparse.ArgumentParser(description="Identify a chord from note names or scale degrees.")
    parser.add_argument("notes", nargs="*",
                        help="Notes (bass first), space or comma separated, e.g. C E G or \"Db, F, Ab\"")
    parser.add_argument("--key", default=C.DEFAULT_KEY,
                        help=f"Key for numeric input (default: {C.DEFAULT_KEY})")
    parser.add_argument("--numeric", action="store_true",
                        help="Interpret input as major-scale degrees 1-7 in --key")
    parser.add_argument("--detailed", action="store_true",
                        help="Spell out the inversion (letter notation only; not with --numeric)")
    parser.add_argument("--no-inversions", action="store_true",
                        help="Drop the /bass suffix for inverted chords")
    parser.add_argument("--suggest", action="store_true",
                        help="Also print the nearest catalog chord by pitch-class similarity")
    parser.add_argument("--spell", nargs=2, metavar=("ROOT", "TYPE"),
                        help="Print the notes of a catalog chord and exit")
    parser.add_argument("--list-keys", action="store_true", help="Print the available keys and exit")
    parser.add_argument("--list-types", action="store_true", help="Print the chord catalog and exit")
    parser.add_argument("--no-color", action="store_true", help="Plain output")
    return parser


def _paint(text, colour, plain):
    return text if plain else f"{colour}{text}{RESET}"


def run(args) -> int:
    if args.list_keys:
        print(" ".join(get_all_keys()))
        return 0
    if args.list_types:
        for name in template_names():
            print(name)
        return 0
    if args.spell:
        root, chord_type = args.spell
        spelled = chord_notes(root, chord_type)
        if spelled is None:
            print(_paint(f"[identify_chord] Unknown root or chord type: {root} {chord_type!r}",
                         RED, args.no_color), file=sys.stderr)
            return 1
        print(" ".join(spelled))
        return 0

    text = " ".join(args.notes)
    identify_inversions = not args.no_inversions
    if args.numeric:
        result = classify_chord_from_numeric(parse_numeric_notes(text), args.key, identify_inversions)
    elif args.detailed:
        result = classify_chord_with_inversion(parse_notes(text), args.key)
    else:
        result = classify_chord(parse_notes(text), args.key, identify_inversions)

    if result.kind in _OK_KINDS:
        print(_paint(result.text, BOLD + GREEN, args.no_color))
    elif result.kind == C.KIND_UNKNOWN:
        print(_paint(result.text, YELL, args.no_color))
    else:
        print(_paint(result.text, RED, args.no_color))

    if args.suggest and not args.numeric and result.kind in (C.KIND_CHORD, C.KIND_UNKNOWN):
        nearest = suggest_chord(parse_notes(text))
        print(_paint(f"  nearest: {nearest}", DIM, args.no_color))

    return 0 if result.kind in _OK_KINDS else 1


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.detailed and args.numeric:
        parser.error("--detailed works with letter notation only, not with --numeric")
    return args


def main(argv=None):
    args = parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
