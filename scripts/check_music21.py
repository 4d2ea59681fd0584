#!/usr/bin/env python3
"""
scripts/check_music21.py: visual validation of the chord catalog against music21.

Spells every catalog chord on every root, runs it through identify_chord and
through music21's root finder, and prints a table:

    [Chord]  notes  →  ours  |  music21 root / common name

Rows where music21 picks a different root are highlighted. Symmetric chords
(augmented, diminished 7th) and sus chords are legitimately ambiguous, so a
mismatch there is informational rather than an error. Chords are spelled
with sharps (A# D F), which music21 reads by letter name, so black-key roots
also disagree more often.

Usage:
    python scripts/check_music21.py
    python scripts/check_music21.py --root G          # one root only
    python scripts/check_music21.py --type "Minor 7th"
    python scripts/check_music21.py --mismatches-only
"""
import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

import warnings
warnings.filterwarnings("ignore")

from chordid.matcher import chord_notes, identify_chord
from chordid.music21_bridge import music21_root_pc, music21_common_name
from chordid.notes import get_all_keys, note_index, note_name
from chordid.templates import template_names

# ── ANSI colours ──────────────────────────────────────────────────────────────
BOLD  = "\033[1m"
CYAN  = "\033[96m"
GREEN = "\033[92m"
RED   = "\033[91m"
DIM   = "\033[2m"
RESET = "\033[0m"


def compare(root, chord_type):
    """Return (notes, ours, m21_root_name, m21_common_name, agree)."""
    notes = chord_notes(root, chord_type)
    ours = identify_chord(notes)
    m21_pc = music21_root_pc(notes)
    m21_root = note_name(m21_pc) if m21_pc is not None else "?"
    agree = m21_pc == note_index(root)
    return notes, ours, m21_root, music21_common_name(notes), agree


def main():
    parser = argparse.ArgumentParser(description="Compare catalog chords with music21's analysis.")
    parser.add_argument("--root", type=str, default=None, help="Only this root (e.g. G, Bb)")
    parser.add_argument("--type", type=str, default=None, help="Only this chord type (e.g. 'Major 7th')")
    parser.add_argument("--mismatches-only", action="store_true", help="Hide rows where roots agree")
    args = parser.parse_args()

    roots = [args.root] if args.root else get_all_keys()
    types = [args.type] if args.type else template_names()
    if any(chord_notes(r, t) is None for r in roots for t in types):
        parser.error(f"unknown root or chord type: {args.root!r} {args.type!r}")

    print(f"\n{BOLD}── Catalog vs music21 ─────────────────────────────────────────────{RESET}")
    n_rows = n_agree = 0
    for chord_type in types:
        for root in roots:
            notes, ours, m21_root, m21_name, agree = compare(root, chord_type)
            n_rows += 1
            n_agree += agree
            if agree and args.mismatches_only:
                continue
            colour = GREEN if agree else RED
            print(f"   {CYAN}{root + ' ' + chord_type:<26}{RESET} "
                  f"{' '.join(notes):<16} →  {ours:<28} | "
                  f"{colour}{m21_root:<3}{RESET} {DIM}{m21_name}{RESET}")
    print(f"{BOLD}────────────────────────────────────────────────────────────────────{RESET}")
    print(f"   Root agreement: {n_agree}/{n_rows} ({100.0 * n_agree / n_rows:.1f}%)\n")


if __name__ == "__main__":
    main()
