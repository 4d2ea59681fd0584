import re

# Tokens are separated by any run of whitespace and/or commas.
_SPLIT_RE = re.compile(r"[\s,]+")
# Signed decimal integer, optionally followed by one accidental (#/b).
# The accidental is accepted but not applied to the degree.
_DEGREE_RE = re.compile(r"^([+-]?\d+)[#b]?$")


def _tokens(text):
    return [t.strip() for t in _SPLIT_RE.split(text) if t.strip()]


def parse_notes(text: str) -> list[str]:
    """
    Split free-form note input into note tokens.

        "C, E G"  → ["C", "E", "G"]
        "   "     → []
    """
    return _tokens(text)


def parse_numeric_notes(text: str) -> list[int]:
    """
    Split free-form scale-degree input into integers.

    A trailing '#' or 'b' is tolerated ("3b" → 3). Tokens that are not
    integers are dropped.
    """
    degrees = []
    for tok in _tokens(text):
        m = _DEGREE_RE.match(tok)
        if m:
            degrees.append(int(m.group(1)))
    return degrees
