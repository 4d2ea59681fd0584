"""
Note table and normaliser: letter-notation names <-> pitch classes 0-11.
"""
import numpy as np

from chordid.constants import NOTES, FLAT_EQUIVALENTS, _NOTE_TO_PC


def normalize_note(note_name):
    """Rewrite a flat spelling to its sharp equivalent; anything else passes through."""
    return FLAT_EQUIVALENTS.get(note_name, note_name)


def note_index(note_name):
    """Map a note name (e.g. 'C', 'F#', 'Gb') to its pitch class (0-11), or None."""
    return _NOTE_TO_PC.get(normalize_note(note_name))


def note_name(pc: int) -> str:
    return NOTES[pc % 12]


def get_all_keys() -> list[str]:
    """The twelve canonical note names in pitch-class order."""
    return list(NOTES)


def notes_to_pitch_classes(notes):
    """
    Convert a list of note names to pitch classes, preserving order.

    Returns None as soon as one name is not a valid note, so callers can
    report the whole input as invalid before doing any matching.
    """
    pcs = []
    for n in notes:
        pc = note_index(n)
        if pc is None:
            return None
        pcs.append(pc)
    return pcs


def pitch_class_vector(pcs):
    """12-element float32 multi-hot (chroma) vector for a collection of pitch classes."""
    v = np.zeros(12, dtype=np.float32)
    for pc in pcs:
        v[pc % 12] = 1.0
    return v
