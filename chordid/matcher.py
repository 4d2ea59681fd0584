"""
Chord matcher: name a chord from an ordered list of notes.

The first note is taken as the bass. Every distinct note (in order of first
appearance) is tried as the root; the interval set above that root is compared
with each catalog template in declaration order and the first exact match
wins. When nothing matches exactly, two- and three-note inputs get a second
chance as incomplete chords (missing fifth / missing fifth and seventh).

Public string entry points return display text such as "C Major",
"C Major/E" or "Unknown chord". The classify_* variants return the same text
wrapped in a ChordResult so callers can branch on the kind of outcome.
"""
import collections

import numpy as np

from chordid import constants as C
from chordid.notes import (
    normalize_note,
    note_index,
    note_name,
    notes_to_pitch_classes,
    pitch_class_vector,
)
from chordid.scales import degrees_to_notes
from chordid.templates import (
    QUALITY_MAJOR,
    QUALITY_MINOR,
    get_template,
    iter_reduced,
    pitch_classes_of,
    template_matrix,
    template_vectors,
)

ChordResult = collections.namedtuple("ChordResult", ["kind", "text"])

# template is None for incomplete-chord matches.
Match = collections.namedtuple("Match", ["root", "name", "bass", "template"])

# Two-note fallback: checked per candidate root, in this order.
_INCOMPLETE_DYADS = (
    (4, "Major (no 5th)"),
    (3, "Minor (no 5th)"),
    (7, "5 (Power Chord)"),
)
# Three-note fallback: triad with its fifth missing, or a seventh chord missing one tone.
_INCOMPLETE_TRIADS = (
    (frozenset({0, 4}), "Major"),
    (frozenset({0, 3}), "Minor"),
)


# ── Pitch-class arithmetic ────────────────────────────────────────────────────

def calculate_intervals(pcs, root_pc):
    """Set of semitone distances (mod 12) from root_pc to each pitch class."""
    return frozenset((p - root_pc) % 12 for p in pcs)


def root_candidates(pcs):
    """Distinct pitch classes in order of first occurrence."""
    return list(dict.fromkeys(pcs))


# ── Matching ──────────────────────────────────────────────────────────────────

def match_exact(pcs):
    """First (root, template) whose interval set equals a catalog entry, or None."""
    bass = pcs[0]
    for root in root_candidates(pcs):
        intervals = calculate_intervals(pcs, root)
        for template, reduced in iter_reduced():
            if intervals == reduced:
                return Match(root, template.name, bass, template)
    return None


def match_incomplete(pcs):
    """Best guess for a two- or three-note chord with missing tones, or None."""
    bass = pcs[0]
    if len(pcs) == 2:
        for root in root_candidates(pcs):
            intervals = calculate_intervals(pcs, root)
            for interval, name in _INCOMPLETE_DYADS:
                if interval in intervals:
                    return Match(root, name, bass, None)
    elif len(pcs) == 3:
        for root in root_candidates(pcs):
            intervals = calculate_intervals(pcs, root)
            for required, name in _INCOMPLETE_TRIADS:
                if required <= intervals:
                    return Match(root, name, bass, None)
    return None


def find_chord(pcs):
    """Exact match first, then the incomplete-chord fallback. None if neither applies."""
    if len(pcs) < 2:
        return None
    return match_exact(pcs) or match_incomplete(pcs)


def format_match(match, identify_inversions=True):
    text = f"{note_name(match.root)} {match.name}"
    if identify_inversions and match.root != match.bass:
        text += f"/{note_name(match.bass)}"
    return text


# ── Inversion labelling ───────────────────────────────────────────────────────

def _is_major(t):
    return t is not None and t.quality == QUALITY_MAJOR


def _is_minor(t):
    return t is not None and t.quality == QUALITY_MINOR


def _has_seventh(t):
    return t is not None and t.seventh


# Ordered guards over (template, bass interval above root); first hit wins.
_INVERSION_RULES = (
    (C.LABEL_FIRST_INVERSION,  lambda t, iv: _is_major(t) and iv == 4),
    (C.LABEL_FIRST_INVERSION,  lambda t, iv: _is_minor(t) and iv == 3),
    (C.LABEL_SECOND_INVERSION, lambda t, iv: _is_major(t) and iv == 7),
    (C.LABEL_SECOND_INVERSION, lambda t, iv: _is_minor(t) and iv == 7),
    (C.LABEL_THIRD_INVERSION,  lambda t, iv: _has_seventh(t) and iv == 10),
    (C.LABEL_THIRD_INVERSION,  lambda t, iv: _is_major(t) and _has_seventh(t) and iv == 11),
)


def inversion_label(match):
    """
    Describe which chord tone is in the bass.

    Root position also names the chord ("Root position - C Major"), so every
    label has the same "label - chord" shape.

        Root position - C Major
        First inversion (bass: 3rd) - C Major/E
        Inversion with bass note: E - C Dominant 7th/E   (no rule applies)
    """
    chord = format_match(match, identify_inversions=False)
    if match.root == match.bass:
        return f"{C.LABEL_ROOT_POSITION} - {chord}"
    bass_interval = (match.bass - match.root) % 12
    slash = f"{chord}/{note_name(match.bass)}"
    for label, applies in _INVERSION_RULES:
        if applies(match.template, bass_interval):
            return f"{label} - {slash}"
    other = C.LABEL_OTHER_INVERSION.format(bass=note_name(match.bass))
    return f"{other} - {slash}"


# ── Entry points ──────────────────────────────────────────────────────────────

def _prepare(notes):
    """Return (pitch classes, None) or (None, early ChordResult) for the shared edge cases."""
    if not notes:
        return None, ChordResult(C.KIND_EMPTY, C.MSG_NO_NOTES)
    if len(notes) == 1:
        return None, ChordResult(C.KIND_SINGLE_NOTE, C.MSG_SINGLE_NOTE.format(note=notes[0]))
    pcs = notes_to_pitch_classes(notes)
    if pcs is None:
        return None, ChordResult(C.KIND_INVALID_NOTE, C.MSG_INVALID_NOTES)
    return pcs, None


def classify_chord(notes, key=None, identify_inversions=True):
    """
    Identify a chord from letter-notation notes; the first note is the bass.

    Args:
        notes: note names such as ["C", "E", "G"] or ["Db", "F", "Ab"].
        key: accepted for interface compatibility; not used for matching.
        identify_inversions: add "/<bass>" when the bass is not the root.

    Returns:
        ChordResult(kind, text).
    """
    pcs, early = _prepare(notes)
    if early is not None:
        return early
    match = find_chord(pcs)
    if match is None:
        return ChordResult(C.KIND_UNKNOWN, C.MSG_UNKNOWN)
    return ChordResult(C.KIND_CHORD, format_match(match, identify_inversions))


def classify_chord_with_inversion(notes, key=None):
    """Like classify_chord, but exact matches carry a spelled-out inversion label."""
    pcs, early = _prepare(notes)
    if early is not None:
        return early
    match = match_exact(pcs)
    if match is not None:
        return ChordResult(C.KIND_CHORD, inversion_label(match))
    match = match_incomplete(pcs)
    if match is None:
        return ChordResult(C.KIND_UNKNOWN, C.MSG_UNKNOWN)
    return ChordResult(C.KIND_CHORD, format_match(match, identify_inversions=True))


def classify_chord_from_numeric(degrees, key, identify_inversions=True):
    """
    Identify a chord given as major-scale degrees (1-7) in `key`.

    classify_chord_from_numeric([1, 3, 5], "C") → ChordResult("chord", "C Major")
    """
    if not degrees:
        return ChordResult(C.KIND_EMPTY, C.MSG_NO_NOTES)
    key_pc = note_index(key) if key is not None else None
    if key_pc is None:
        return ChordResult(C.KIND_INVALID_KEY, C.MSG_INVALID_KEY)
    notes, bad_degree = degrees_to_notes(degrees, key_pc)
    if notes is None:
        return ChordResult(C.KIND_INVALID_DEGREE, C.MSG_INVALID_DEGREE.format(degree=bad_degree))
    return classify_chord(notes, normalize_note(key), identify_inversions)


def identify_chord(notes, key=None, identify_inversions=True) -> str:
    return classify_chord(notes, key, identify_inversions).text


def identify_chord_with_inversion(notes, key=None) -> str:
    return classify_chord_with_inversion(notes, key).text


def identify_chord_from_numeric(degrees, key, identify_inversions=True) -> str:
    return classify_chord_from_numeric(degrees, key, identify_inversions).text


# ── Helpers built on the catalog ──────────────────────────────────────────────

def chord_notes(root, chord_type):
    """
    Spell a catalog chord, root first: chord_notes("G", "Dominant 7th") → ["G", "B", "D", "F"].
    Returns None for an unknown root or chord type.
    """
    root_pc = note_index(root)
    template = get_template(chord_type)
    if root_pc is None or template is None:
        return None
    offsets = sorted(pitch_classes_of(template))
    return [note_name(root_pc + i) for i in offsets]


def suggest_chord(notes) -> str:
    """
    Nearest catalog chord by cosine similarity of pitch-class vectors.

    Unlike identify_chord this always names a chord for two or more valid
    notes, which makes it useful when the exact rules answer "Unknown chord".
    Ties go to the lowest root pitch class, then catalog order.
    """
    pcs, early = _prepare(notes)
    if early is not None:
        return early.text
    vec = pitch_class_vector(pcs)
    scores = template_matrix() @ (vec / np.linalg.norm(vec))
    root_pc, template, _ = template_vectors()[int(np.argmax(scores))]
    return f"{note_name(root_pc)} {template.name}"
