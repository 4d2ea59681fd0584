"""
Cross-check helpers: hand a note list to music21 and read back its analysis.

music21 finds roots by stacking thirds, independently of our template search,
so agreement on root pitch class is a useful sanity check for the catalog.
"""
import music21

from chordid.notes import notes_to_pitch_classes


def _music21_name(note_name):
    """music21 spells flats with '-' (Bb -> B-); the spelling matters to its root finder."""
    if len(note_name) == 2 and note_name[1] == "b":
        return note_name[0] + "-"
    return note_name


def to_music21_chord(notes):
    """music21 Chord for a list of note names (octave-less), or None if a name is invalid."""
    if not notes or notes_to_pitch_classes(notes) is None:
        return None
    return music21.chord.Chord([_music21_name(n) for n in notes])


def music21_root_pc(notes):
    """Pitch class of the root music21 picks for these notes, or None."""
    chord = to_music21_chord(notes)
    if chord is None:
        return None
    return chord.root().pitchClass


def music21_common_name(notes):
    """music21's descriptive name, e.g. 'major triad' or 'dominant seventh chord'."""
    chord = to_music21_chord(notes)
    if chord is None:
        return None
    return chord.commonName
