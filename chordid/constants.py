from types import MappingProxyType

# ── Pitch-class lookup tables ─────────────────────────────────────────────────

# Canonical (sharp) spelling, indexed by pitch class.
NOTES: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)
# Flats are accepted on input and rewritten to their sharp equivalent.
FLAT_EQUIVALENTS = MappingProxyType({
    "Db": "C#", "Eb": "D#", "Gb": "F#", "Ab": "G#", "Bb": "A#",
})
_NOTE_TO_PC = MappingProxyType({name: pc for pc, name in enumerate(NOTES)})

# Major scale, W-W-H-W-W-W-H, as offsets above the tonic.
MAJOR_SCALE_INTERVALS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
MIN_SCALE_DEGREE, MAX_SCALE_DEGREE = 1, 7

DEFAULT_KEY = "C"

# ── Result kinds and display strings ──────────────────────────────────────────
KIND_CHORD = "chord"
KIND_UNKNOWN = "unknown"
KIND_EMPTY = "empty"
KIND_SINGLE_NOTE = "single_note"
KIND_INVALID_NOTE = "invalid_note"
KIND_INVALID_KEY = "invalid_key"
KIND_INVALID_DEGREE = "invalid_scale_degree"

MSG_NO_NOTES = "No notes provided"
MSG_SINGLE_NOTE = "{note} note"
MSG_INVALID_NOTES = "Invalid note(s) found"
MSG_INVALID_KEY = "Invalid key"
MSG_INVALID_DEGREE = "Invalid scale degree: {degree}"
MSG_UNKNOWN = "Unknown chord"

# ── Inversion labels (identify_chord_with_inversion) ──────────────────────────
LABEL_ROOT_POSITION = "Root position"
LABEL_FIRST_INVERSION = "First inversion (bass: 3rd)"
LABEL_SECOND_INVERSION = "Second inversion (bass: 5th)"
LABEL_THIRD_INVERSION = "Third inversion (bass: 7th)"
LABEL_OTHER_INVERSION = "Inversion with bass note: {bass}"
