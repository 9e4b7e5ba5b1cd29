"""Fixed choices offered during onboarding and on the profile page."""

PROFILE_TOPIC_OPTIONS = (
    "Physics",
    "Candlemaking",
    "Flower Arranging",
    "Fiction Writing",
    "Nonfiction Writing",
    "Crosswords",
    "Journaling",
    "Dance",
    "Film",
)

LEARN_ROLE_OPTIONS = (
    "Curious Explorer",
    "Hands-on Builder",
    "Collaborative Storyteller",
    "Quiet Observer",
)

PERSONALITY_QUESTIONS = (
    {
        "question": "When learning something new, I prefer to:",
        "options": (
            "Read detailed instructions first",
            "Jump in and figure it out as I go",
            "Watch someone else do it first",
            "Discuss it with others before starting",
        ),
    },
)

TOPIC_SET = frozenset(PROFILE_TOPIC_OPTIONS)
ROLE_SET = frozenset(LEARN_ROLE_OPTIONS)


def filter_topics(values) -> list[str]:
    """Keep known topics only, dropping duplicates but preserving order."""
    return list(dict.fromkeys(v for v in values if v in TOPIC_SET))
