"""
Chord template catalog: named chord types defined by semitone offsets from a root.

The catalog is a tuple in declaration order. Matching is first-hit-wins, so
the order below is part of the behaviour (e.g. "Minor 7th" is tried before
"Major 6th", which covers the same pitch classes from a different root).
"""
import collections

import numpy as np

from chordid.notes import pitch_class_vector

QUALITY_MAJOR = "major"
QUALITY_MINOR = "minor"
QUALITY_OTHER = "other"

ChordTemplate = collections.namedtuple(
    "ChordTemplate", ["name", "intervals", "quality", "seventh"]
)


def _template(name, intervals, quality=QUALITY_OTHER, seventh=False):
    return ChordTemplate(name, frozenset(intervals), quality, seventh)


def pitch_classes_of(template):
    """
    Interval set reduced modulo 12.

    The ninth chords are declared with a 14 (an octave above the 2nd); the
    matcher always works with mod-12 intervals, so this is the set compared.
    """
    return frozenset(i % 12 for i in template.intervals)


CHORD_TYPES: tuple[ChordTemplate, ...] = (
    _template("Major",               [0, 4, 7],          QUALITY_MAJOR),
    _template("Minor",               [0, 3, 7],          QUALITY_MINOR),
    _template("Diminished",          [0, 3, 6]),
    _template("Augmented",           [0, 4, 8]),
    _template("Sus2",                [0, 2, 7]),
    _template("Sus4",                [0, 5, 7]),
    _template("Major 7th",           [0, 4, 7, 11],      QUALITY_MAJOR, seventh=True),
    _template("Minor 7th",           [0, 3, 7, 10],      QUALITY_MINOR, seventh=True),
    _template("Dominant 7th",        [0, 4, 7, 10],      seventh=True),
    _template("Diminished 7th",      [0, 3, 6, 9],       seventh=True),
    _template("Half-Diminished 7th", [0, 3, 6, 10],      seventh=True),
    _template("Augmented 7th",       [0, 4, 8, 10],      seventh=True),
    _template("Major 6th",           [0, 4, 7, 9],       QUALITY_MAJOR),
    _template("Minor 6th",           [0, 3, 7, 9],       QUALITY_MINOR),
    _template("9th",                 [0, 4, 7, 10, 14]),
    _template("Minor 9th",           [0, 3, 7, 10, 14],  QUALITY_MINOR),
    _template("Major 9th",           [0, 4, 7, 11, 14],  QUALITY_MAJOR),
    _template("6/9",                 [0, 4, 7, 9, 14]),
    _template("5 (Power Chord)",     [0, 7]),
)

_BY_NAME = {t.name: t for t in CHORD_TYPES}

# Reduced interval sets, computed once alongside the catalog.
_PITCH_CLASSES = tuple((t, pitch_classes_of(t)) for t in CHORD_TYPES)


def iter_reduced():
    """Yield (template, mod-12 interval set) in catalog order."""
    return iter(_PITCH_CLASSES)


def get_template(name):
    """Look up a template by its display name; None if unknown."""
    return _BY_NAME.get(name)


def template_names() -> list[str]:
    return [t.name for t in CHORD_TYPES]


def _build_template_vectors():
    """
    List of (root_pc, template, vector) for every root and catalog entry.
    Vectors are 12-element multi-hot float32 chroma templates.
    """
    vectors = []
    for root_pc in range(12):
        for template, reduced in _PITCH_CLASSES:
            shifted = [(root_pc + i) % 12 for i in reduced]
            vectors.append((root_pc, template, pitch_class_vector(shifted)))
    return vectors


_VECTORS_CACHE = {}


def template_vectors():
    # Built on first use; the content is deterministic so a racing rebuild is harmless.
    if "flat" not in _VECTORS_CACHE:
        _VECTORS_CACHE["flat"] = tuple(_build_template_vectors())
    return _VECTORS_CACHE["flat"]


def template_matrix():
    """(12 * len(CHORD_TYPES), 12) array stacking template_vectors(), row-normalised."""
    if "matrix" not in _VECTORS_CACHE:
        m = np.stack([vec for _, _, vec in template_vectors()])
        m = m / np.linalg.norm(m, axis=1, keepdims=True)
        m.setflags(write=False)
        _VECTORS_CACHE["matrix"] = m
    return _VECTORS_CACHE["matrix"]
