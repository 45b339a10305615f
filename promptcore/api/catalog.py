"""Models offered by the service and their access tiers."""

# Available to everyone, counted against the free daily quota
LIMITED_MODELS = [
    "gpt-5-mini",
    "gpt-5-nano",
    "gpt-4.1-mini",
    "gpt-4.1-nano",
    "gpt-4o-mini",
    "o1-mini",
    "o3-mini",
    "o4-mini",
    "codex-mini-latest",
]

# Signed-in callers only, counted against the premium daily quota
PREMIUM_MODELS = [
    "gpt-5",
    "gpt-5-chat-latest",
    "gpt-4.1",
    "gpt-4o",
    "o1",
    "o3",
]

ALL_MODELS = [*LIMITED_MODELS, *PREMIUM_MODELS]


def is_premium_model(model: str) -> bool:
    return model in PREMIUM_MODELS


def is_limited_model(model: str) -> bool:
    return model in LIMITED_MODELS


def is_known_model(model: str) -> bool:
    return model in ALL_MODELS
