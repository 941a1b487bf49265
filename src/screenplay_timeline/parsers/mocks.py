# Placeholder vocabulary used until a music parser exists
MOCK_MUSIC_PROMPTS = [
    "soft piano",
    "ambient pads",
    "orchestral strings",
    "acoustic guitar",
    "slow cello",
    "light percussion",
    "warm synthesizer",
    "solo violin",
]
