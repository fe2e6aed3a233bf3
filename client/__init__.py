"""Client side of the tone slider: HTTP client, editor session state and CLI."""

from .api import ToneAdjustmentClient
from .session import EditorSession, SliderPosition

__all__ = [
    "EditorSession",
    "SliderPosition",
    "ToneAdjustmentClient",
]
