"""Model id lookups: display labels and provider families. Pure functions only."""

# Order matters: first match wins. (needle, label, exact)
_DISPLAY_NAMES: list[tuple[str, str, bool]] = [
    ("bart", "BART", False),
    ("pegasus", "Pegasus", False),
    ("Mixtral", "Mixtral", False),
    ("t5", "T5", False),
    ("distilbart", "DistilBART", False),
    ("gpt-3.5-turbo", "GPT-3.5", True),
    ("gpt-4", "GPT-4", True),
    ("claude", "Claude", False),
]

SUMMARIZATION = "summarization"
TEXT_GENERATION = "text_generation"
CHAT = "chat"
UNIMPLEMENTED = "unimplemented"

_SUMMARIZATION_NEEDLES = ("bart", "pegasus", "t5")
_TEXT_GENERATION_NEEDLES = ("Mixtral",)
_CHAT_NEEDLES = ("gpt",)
_UNIMPLEMENTED_NEEDLES = ("claude",)


def resolve_display_name(model_id: str) -> str:
    """Return a short label for a model id, or the id itself when unknown."""
    for needle, label, exact in _DISPLAY_NAMES:
        if (model_id == needle) if exact else (needle in model_id):
            return label
    return model_id


def open_source_family(model_id: str) -> str | None:
    """Which Hugging Face task a model id is served by, or None if unsupported."""
    if any(n in model_id for n in _SUMMARIZATION_NEEDLES):
        return SUMMARIZATION
    if any(n in model_id for n in _TEXT_GENERATION_NEEDLES):
        return TEXT_GENERATION
    return None


def proprietary_family(model_id: str) -> str | None:
    if any(n in model_id for n in _CHAT_NEEDLES):
        return CHAT
    if any(n in model_id for n in _UNIMPLEMENTED_NEEDLES):
        return UNIMPLEMENTED
    return None
