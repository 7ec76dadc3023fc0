# Lower-case fragments; a match anywhere in the text counts
PROFANE_WORDS = (
    "fuck",
    "shit",
    "bitch",
    "asshole",
    "bastard",
    "씨발",
    "시발",
    "병신",
    "개새끼",
    "좆",
)


def contains_profanity(text: str | None) -> bool:
    if not text:
        return False
    lowered = text.lower()
    return any(word in lowered for word in PROFANE_WORDS)
