"""Prompt templates shared across the server variants."""

from prompt_server.common.constants import (
    POEM_PROMPT_DESCRIPTION,
    POEM_PROMPT_NAME,
    POEM_PROMPT_TITLE,
)

HAIKU_NOTE = "Note that a haiku is 5 syllables followed by 7 syllables followed by 5 syllables "


def get_poem_writer_prompt() -> tuple[str, str, str]:
    """Get poem-writer prompt definition.

    Returns:
        Tuple of (name, title, description)
    """
    return POEM_PROMPT_NAME, POEM_PROMPT_TITLE, POEM_PROMPT_DESCRIPTION


def poem_writer(title: str, mood: str | None = None) -> str:
    """Build the haiku-writing instruction.

    Args:
        title: Title the haiku should carry
        mood: Optional mood; an empty string counts as no mood

    Returns:
        The instruction text sent as a single user message
    """
    mood_clause = f" with the mood {mood}" if mood else ""
    return f"Write a haiku{mood_clause} called {title}. {HAIKU_NOTE}"
