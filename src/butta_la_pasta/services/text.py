"""Text cleanup helpers for model output."""

_FENCE = "```"
_JSON_FENCE = "```json"


def strip_code_fence(content: str) -> str:
    """Remove a surrounding markdown code fence and whitespace."""
    content = content.strip()
    if content[: len(_JSON_FENCE)].lower() == _JSON_FENCE:
        content = content[len(_JSON_FENCE) :]
    elif content.startswith(_FENCE):
        content = content[len(_FENCE) :]
    if content.endswith(_FENCE):
        content = content[: -len(_FENCE)]
    return content.strip()
