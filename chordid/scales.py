from chordid.constants import MAJOR_SCALE_INTERVALS, MIN_SCALE_DEGREE, MAX_SCALE_DEGREE
from chordid.notes import note_name


def major_scale(root_pc: int) -> list[int]:
    """The seven pitch classes of the major scale built on root_pc."""
    return [(root_pc + i) % 12 for i in MAJOR_SCALE_INTERVALS]


def degrees_to_notes(degrees, key_pc: int):
    """
    Translate major-scale degrees (1-7) in the given key into note names.

    Returns (notes, bad_degree). Translation stops at the first degree outside
    1-7, in which case notes is None and bad_degree is that degree.
    """
    scale = major_scale(key_pc)
    notes = []
    for degree in degrees:
        if degree < MIN_SCALE_DEGREE or degree > MAX_SCALE_DEGREE:
            return None, degree
        notes.append(note_name(scale[degree - 1]))
    return notes, None
