"""Map slider levels to prompt descriptors and build the system instruction.

Both axes share one partition of [0, 100]: [0, 25), [25, 50), [50, 75) and
[75, 100]. Changing the boundaries changes what the model is asked to do.
"""

from __future__ import annotations

BUCKET_UPPER_BOUNDS = (25, 50, 75)

TONE_DESCRIPTORS = (
    "very formal and professional",
    "formal",
    "casual",
    "very casual and conversational",
)

STYLE_DESCRIPTORS = (
    "very concise and to the point",
    "concise",
    "expanded",
    "very expanded and detailed",
)

DEFAULT_SYSTEM_PROMPT = (
    "You are a text tone and style adjuster. Adjust the following text to be more "
    "{tone} and {style}. Keep the meaning the same but change the tone and style "
    "accordingly. Do not reply as a letter or an email; answer in a single paragraph "
    "containing only the converted text, with no extra text or explanation. Preserve "
    "the original meaning and content completely. Return ONLY the transformed text "
    "without explanations, introductions, or metadata."
)


def bucket_index(level: int) -> int:
    """Return the bucket (0-3) a level in [0, 100] falls into."""
    for index, upper in enumerate(BUCKET_UPPER_BOUNDS):
        if level < upper:
            return index
    return len(BUCKET_UPPER_BOUNDS)


def tone_descriptor(tone_level: int) -> str:
    return TONE_DESCRIPTORS[bucket_index(tone_level)]


def style_descriptor(style_level: int) -> str:
    return STYLE_DESCRIPTORS[bucket_index(style_level)]


def build_system_prompt(tone_level: int, style_level: int, template: str | None = None) -> str:
    """Render the system instruction for the given levels.

    The template receives ``{tone}`` and ``{style}``; the built-in prompt is
    used when no template is supplied.
    """
    return (template or DEFAULT_SYSTEM_PROMPT).format(
        tone=tone_descriptor(tone_level),
        style=style_descriptor(style_level),
    )
