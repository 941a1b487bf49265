import re

# Cue extensions appended to a character name in a screenplay
_CUE_EXTENSIONS = (
    "V.O.", "V.O", "VO", "O.S.", "O.S", "OS", "O.C.", "O.C", "OC",
    "CONT'D", "CONTD", "CONT.", "CONTINUED", "FILTERED", "PRE-LAP", "ON PHONE",
    "ON RADIO", "ON TV", "INTO PHONE",
)

# Trailing words that make a cue refer to a part of the character
_CUE_SUFFIX_WORDS = ("VOICE", "THOUGHTS", "REFLECTION", "SHADOW")

_PARENTHETICAL = re.compile(r"\([^)]*\)")
_WHITESPACE = re.compile(r"\s+")


def to_straight_quotes(text: str) -> str:
    return text.translate(str.maketrans({"’": "'", "‘": "'", "＇": "'"}))


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def strip_parentheticals(text: str) -> str:
    """Remove "(V.O.)", "(beat)" and similar asides, then tidy spacing."""
    return collapse_whitespace(_PARENTHETICAL.sub(" ", text or ""))


def normalize_character_cue(raw: str) -> str:
    """
    Reduce a character cue to the name used as trigger key:
        JOHN (V.O.)        -> JOHN
        JOHN'S VOICE       -> JOHN
        MARY (CONT'D)      -> MARY
        DETECTIVE O.S.     -> DETECTIVE

    Heuristics:
    - Curly quotes normalized to straight quotes first.
    - Parenthetical extensions and bare cue extensions are dropped.
    - A trailing possessive ("'S") is dropped, along with VOICE-like words after it.
    """
    if not raw:
        return ""

    text = to_straight_quotes(raw).upper()
    text = strip_parentheticals(text)

    changed = True
    while changed and text:
        changed = False
        for ext in _CUE_EXTENSIONS:
            if text.endswith(" " + ext):
                text = text[: -len(ext) - 1].rstrip()
                changed = True
        words = text.split(" ")
        if len(words) > 1 and words[-1] in _CUE_SUFFIX_WORDS:
            text = " ".join(words[:-1])
            changed = True

    # JOHN'S -> JOHN, but keep names like O'NEIL untouched
    text = re.sub(r"'S$", "", text)
    text = re.sub(r"S'$", "S", text)

    return collapse_whitespace(text.strip(" .,:;-"))
